"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A cart was checked out and turned into an immutable order."""

    __version__ = 1

    order_id = Identifier(required=True)
    cart_id = Identifier(required=True)
    order_number = Integer(required=True)
    item_count = Integer(required=True)
    subtotal = Float(required=True)
    discount_code = String()
    discount_amount = Float(default=0.0)
    total = Float(required=True)
    placed_at = DateTime(required=True)
