"""Cart aggregate — the customer's working list of line items.

The cart lives for the whole process lifetime: it is created on first access,
mutated by adding and removing items, and emptied after a successful checkout.
It is never deleted. ``total`` is derived from the items and recomputed on
every change.
"""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, Float, HasMany, Integer, String

from storefront.cart.events import CartCleared, CartItemAdded, CartItemRemoved
from storefront.domain import storefront
from storefront.utils.money import round_money


@storefront.entity(part_of="Cart")
class CartItem:
    product_id = String(required=True, max_length=100)
    name = String(required=True, max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()

    @property
    def line_total(self):
        return self.unit_price * self.quantity


@storefront.aggregate
class Cart:
    items = HasMany(CartItem)
    total = Float(default=0.0)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls):
        now = datetime.now(UTC)
        return cls(total=0.0, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product_id, name, unit_price, quantity):
        """Add an item to the cart (or increase quantity if already present)."""
        existing = next((i for i in self.items if i.product_id == product_id), None)

        now = datetime.now(UTC)

        if existing:
            existing.quantity += quantity
            item_id = str(existing.id)
        else:
            item = CartItem(
                product_id=product_id,
                name=name,
                unit_price=unit_price,
                quantity=quantity,
                added_at=now,
            )
            self.add_items(item)
            item_id = str(item.id)

        self._recalculate_total()
        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                item_id=item_id,
                product_id=product_id,
                quantity=quantity,
                cart_total=self.total,
            )
        )
        return item_id

    def remove_item(self, item_id):
        """Remove a line item from the cart."""
        item = next((i for i in self.items if str(i.id) == str(item_id)), None)
        if item is None:
            raise ObjectNotFoundError(f"Item {item_id} not found in cart {self.id}")

        self.remove_items(item)
        self._recalculate_total()
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                item_id=str(item_id),
                cart_total=self.total,
            )
        )

    def clear(self):
        """Empty the cart and reset its total to zero."""
        removed = len(self.items)
        for item in list(self.items):
            self.remove_items(item)

        self.total = 0.0
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCleared(
                cart_id=str(self.id),
                items_removed=removed,
            )
        )

    @property
    def is_empty(self):
        return not self.items

    def _recalculate_total(self):
        self.total = round_money(sum(item.line_total for item in self.items))
