"""Storefront bounded context — carts, checkout, discount codes and store stats.

Handles the shopping cart, the checkout flow that turns a cart into an order,
the discount-code ledger that rewards every nth order, and read-only admin
statistics over orders and codes.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
