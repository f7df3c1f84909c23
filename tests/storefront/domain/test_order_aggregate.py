"""Tests for the Order aggregate — snapshotting a cart into an order."""

import pytest
from protean.exceptions import ValidationError
from storefront.cart.cart import Cart
from storefront.order.events import OrderPlaced
from storefront.order.order import Order


def _cart_with(*lines):
    cart = Cart.create()
    for product_id, unit_price, quantity in lines:
        cart.add_item(product_id, f"Product {product_id}", unit_price, quantity)
    return cart


class TestPlaceOrder:
    def test_order_without_discount(self):
        cart = _cart_with(("prod-001", 100.0, 2))
        order = Order.place(cart=cart, order_number=1)
        assert order.subtotal == 200.0
        assert order.discount_amount == 0.0
        assert order.discount_code is None
        assert order.total == 200.0
        assert order.order_number == 1

    def test_order_with_discount(self):
        cart = _cart_with(("prod-001", 99.99, 1))
        order = Order.place(cart=cart, order_number=4, discount_code="DISCOUNT-1234", discount_amount=10.0)
        assert order.discount_code == "DISCOUNT-1234"
        assert order.total == 89.99

    def test_total_is_subtotal_minus_discount_rounded(self):
        cart = _cart_with(("prod-001", 33.33, 3))
        order = Order.place(cart=cart, order_number=2, discount_code="DISCOUNT-1111", discount_amount=10.0)
        assert order.total == round(order.subtotal - order.discount_amount, 2)

    def test_items_are_copied_from_cart(self):
        cart = _cart_with(("prod-001", 100.0, 2), ("prod-002", 5.0, 4))
        order = Order.place(cart=cart, order_number=1)
        assert [(i.product_id, i.quantity) for i in order.items] == [("prod-001", 2), ("prod-002", 4)]
        assert order.items[0].cart_item_id == str(cart.items[0].id)

    def test_order_is_independent_of_later_cart_changes(self):
        cart = _cart_with(("prod-001", 100.0, 2))
        order = Order.place(cart=cart, order_number=1)

        cart.add_item("prod-001", "Product prod-001", 100.0, 5)
        cart.clear()

        assert len(order.items) == 1
        assert order.items[0].quantity == 2
        assert order.subtotal == 200.0

    def test_item_count_sums_quantities(self):
        cart = _cart_with(("prod-001", 100.0, 2), ("prod-002", 5.0, 4))
        order = Order.place(cart=cart, order_number=1)
        assert order.item_count == 6

    def test_empty_cart_cannot_be_placed(self):
        with pytest.raises(ValidationError):
            Order.place(cart=Cart.create(), order_number=1)

    def test_raises_order_placed_event(self):
        cart = _cart_with(("prod-001", 100.0, 2))
        order = Order.place(cart=cart, order_number=7)
        events = [e for e in order._events if isinstance(e, OrderPlaced)]
        assert len(events) == 1
        assert events[0].order_number == 7
        assert events[0].item_count == 2
        assert events[0].total == 200.0
