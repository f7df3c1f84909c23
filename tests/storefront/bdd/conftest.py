"""Shared BDD fixtures and step definitions for the Storefront domain."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then
from storefront.cart.items import AddToCart
from storefront.cart.management import get_cart
from storefront.checkout.checkout import process_checkout
from storefront.discount import ledger


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for the exception a rejected step raised."""
    return {"exc": None}


@pytest.fixture()
def issued():
    """Container for the code a Given step issued."""
    return {"code": None}


def _cart_with(product_id, unit_price, quantity):
    cart_id = str(get_cart().id)
    current_domain.process(
        AddToCart(
            cart_id=cart_id,
            product_id=product_id,
            name=f"Product {product_id}",
            unit_price=unit_price,
            quantity=quantity,
        ),
        asynchronous=False,
    )
    return cart_id


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse("the discount interval is {interval:d}"))
def discount_interval(nth_order, interval):
    nth_order(interval)


@given(
    parsers.cfparse('a cart holding {quantity:d} of "{product_id}" at {unit_price:f}'),
    target_fixture="cart_id",
)
def cart_holding(quantity, product_id, unit_price):
    return _cart_with(product_id, unit_price, quantity)


@given("an empty cart", target_fixture="cart_id")
def empty_cart():
    return str(get_cart().id)


@given(parsers.cfparse("{count:d} orders have been placed"))
def orders_placed(count):
    for _ in range(count):
        process_checkout(_cart_with("prod-900", 10.0, 1))


@given(parsers.cfparse("{count:d} orders of {quantity:d} items at {unit_price:f} have been placed"))
def orders_of_items_placed(count, quantity, unit_price):
    for _ in range(count):
        process_checkout(_cart_with("prod-901", unit_price, quantity))


@given(parsers.cfparse("a discount code issued for order {order_number:d}"))
def code_issued(issued, order_number):
    issued["code"] = ledger.generate_code(order_number).code


@given("the issued code has been redeemed")
def code_redeemed(issued):
    ledger.mark_used(issued["code"])


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the ledger holds {count:d} unused code"))
def ledger_unused_code_singular(count):
    assert len([c for c in ledger.all_codes() if not c.is_used]) == count


@then(parsers.cfparse("the ledger holds {count:d} unused codes"))
def ledger_unused_codes(count):
    assert len([c for c in ledger.all_codes() if not c.is_used]) == count
