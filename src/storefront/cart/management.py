"""Cart management — lookup, creation on first access, and clearing.

``get_cart`` and ``find_cart`` are the read side of the cart store: checkout
uses the non-raising ``find_cart`` so it can report a missing cart itself.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.domain import logger, storefront


@storefront.command(part_of="Cart")
class ClearCart:
    """Remove every item from a cart."""

    cart_id = Identifier(required=True)


@storefront.command_handler(part_of=Cart)
class ManageCartHandler:
    @handle(ClearCart)
    def clear_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.get(command.cart_id)
        cart.clear()
        repo.add(cart)
        logger.info("Cart cleared", cart_id=str(cart.id))


def find_cart(cart_id):
    """Return the cart with ``cart_id``, or None when there is no such cart."""
    if not cart_id:
        return None
    try:
        return current_domain.repository_for(Cart).get(cart_id)
    except ObjectNotFoundError:
        return None


def get_cart(cart_id=None):
    """Return the cart with ``cart_id``, creating a fresh one when no id is given."""
    if not cart_id:
        cart = Cart.create()
        current_domain.repository_for(Cart).add(cart)
        logger.debug("Cart created", cart_id=str(cart.id))
        return cart

    cart = find_cart(cart_id)
    if cart is None:
        raise ObjectNotFoundError(f"Cart with ID {cart_id} not found")
    return cart
