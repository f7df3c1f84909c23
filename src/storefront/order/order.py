"""Order aggregate — the immutable record of a completed checkout.

Items are copied from the cart at checkout time so order history never
changes when the cart does. An applied discount is referenced by its code
string only. Orders expose no mutators once placed.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from storefront.domain import storefront
from storefront.order.events import OrderPlaced
from storefront.utils.money import round_money


@storefront.entity(part_of="Order")
class OrderItem:
    """A snapshot of a cart line at the moment of checkout."""

    cart_item_id = Identifier()
    product_id = String(required=True, max_length=100)
    name = String(required=True, max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)


@storefront.aggregate
class Order:
    cart_id = Identifier(required=True)
    items = HasMany(OrderItem)
    subtotal = Float(required=True, min_value=0.0)
    discount_code = String(max_length=50)
    discount_amount = Float(default=0.0, min_value=0.0)
    total = Float(required=True, min_value=0.0)
    order_number = Integer(required=True, min_value=1, unique=True)
    created_at = DateTime()

    @classmethod
    def place(cls, cart, order_number, discount_code=None, discount_amount=0.0):
        """Build an order from the current contents of ``cart``."""
        if not cart.items:
            raise ValidationError({"items": ["An order needs at least one item"]})

        subtotal = cart.total
        total = round_money(subtotal - discount_amount)
        now = datetime.now(UTC)

        order = cls(
            cart_id=str(cart.id),
            subtotal=subtotal,
            discount_code=discount_code,
            discount_amount=discount_amount,
            total=total,
            order_number=order_number,
            created_at=now,
        )
        for item in cart.items:
            order.add_items(
                OrderItem(
                    cart_item_id=str(item.id),
                    product_id=item.product_id,
                    name=item.name,
                    unit_price=item.unit_price,
                    quantity=item.quantity,
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                cart_id=str(cart.id),
                order_number=order_number,
                item_count=order.item_count,
                subtotal=subtotal,
                discount_code=discount_code,
                discount_amount=discount_amount,
                total=total,
                placed_at=now,
            )
        )
        return order

    @property
    def item_count(self):
        return sum(item.quantity for item in self.items)
