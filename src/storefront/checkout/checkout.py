"""Checkout — turns a cart into an order, applying and rewarding discounts.

Flow (one Unit of Work per checkout):
    1. Load the cart; it must exist and hold at least one item
    2. Resolve the discount:
       - a manual code must validate, otherwise the checkout is rejected
       - with no manual code, the most recent unused code is auto-applied
    3. Assign the next order number
    4. Redeem the applied code and compute discount and total
    5. Store the order (a snapshot of the cart items)
    6. Mint a reward code if this order number is an nth order; the reward
       is for a later order, never for this one
    7. Clear the cart

All validation happens before the first write, so a rejected checkout leaves
the order counter, the ledger and the cart untouched.
"""

from protean import handle
from protean.exceptions import InvalidOperationError, ObjectNotFoundError, ValidationError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.cart.management import find_cart
from storefront.checkout.sequence import next_order_number
from storefront.discount import ledger
from storefront.discount.discount_code import normalize_code
from storefront.discount.policy import DEFAULT_DISCOUNT_PERCENT, discount_percent, nth_order_interval
from storefront.domain import logger, storefront
from storefront.order.order import Order
from storefront.order.repository import OrderRepository


@storefront.command(part_of="Order")
class Checkout:
    cart_id = Identifier(required=True)
    discount_code = Text()


@storefront.command_handler(part_of=Order)
class CheckoutHandler:
    @handle(Checkout)
    def checkout(self, command):
        if not str(command.cart_id or "").strip():
            raise ValidationError({"cart_id": ["Cart ID is required"]})

        cart = find_cart(command.cart_id)
        if cart is None:
            raise ObjectNotFoundError(f"Cart with ID {command.cart_id} not found")

        if cart.is_empty:
            raise InvalidOperationError("Cart is empty. Cannot checkout.")

        # Policy errors surface here, before the counter or the ledger change
        nth_order_interval()
        discount_percent()

        subtotal = cart.total
        applied_code, percent = self._resolve_discount(command.discount_code)

        order_number = next_order_number()

        discount_amount = 0.0
        if applied_code:
            discount_amount = ledger.calculate_discount_amount(subtotal, percent or DEFAULT_DISCOUNT_PERCENT)
            ledger.mark_used(applied_code)

        order = Order.place(
            cart=cart,
            order_number=order_number,
            discount_code=applied_code,
            discount_amount=discount_amount,
        )
        current_domain.repository_for(Order).add(order)

        ledger.generate_code(order_number)

        cart.clear()
        current_domain.repository_for(Cart).add(cart)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            order_number=order_number,
            subtotal=order.subtotal,
            discount_code=applied_code,
            discount_amount=order.discount_amount,
            total=order.total,
        )
        return str(order.id)

    def _resolve_discount(self, manual_code):
        """Return ``(code, percent)`` for the discount to apply, or ``(None, None)``.

        A blank manual code is treated as no code at all.
        """
        code = normalize_code(manual_code)
        if code:
            validation = ledger.validate_code(code)
            if not validation.valid:
                raise ValidationError({"discount_code": [validation.message]})
            return code, validation.discount_percent

        auto_code = ledger.most_recent_unused()
        if auto_code is not None and not auto_code.is_used:
            logger.debug("Auto-applying discount code", code=auto_code.code)
            return auto_code.code, auto_code.discount_percent

        return None, None


def process_checkout(cart_id, discount_code=None) -> Order:
    """Check out ``cart_id`` and return the placed order."""
    order_id = current_domain.process(
        Checkout(cart_id=cart_id, discount_code=discount_code),
        asynchronous=False,
    )
    return current_domain.repository_for(Order).get(order_id)


def get_order(order_id) -> Order:
    try:
        return current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError as exc:
        raise ObjectNotFoundError(f"Order with ID {order_id} not found") from exc


def list_orders() -> list[Order]:
    repo: OrderRepository = current_domain.repository_for(Order)
    return repo.in_number_order()
