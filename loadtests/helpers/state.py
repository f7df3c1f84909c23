"""Per-user state for the storefront load test journeys.

Each Locust user keeps its own state; nothing is shared across users.
"""

from dataclasses import dataclass, field


@dataclass
class CartState:
    """Tracks a cart between add, remove and checkout calls."""

    cart_id: str | None = None
    item_ids: list[str] = field(default_factory=list)
    expected_total: float = 0.0


@dataclass
class CheckoutState:
    """Tracks what a customer learned from their previous orders."""

    order_ids: list[str] = field(default_factory=list)
    last_order_number: int = 0
    known_codes: list[str] = field(default_factory=list)
