"""BDD tests for store statistics and admin discount generation."""

import pytest
from pytest_bdd import parsers, scenarios, then, when
from storefront.admin.discounts import GenerationOutcome, generate_discount
from storefront.admin.statistics import store_stats

scenarios("features/store_statistics.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse("the admin generates a code for order {order_number:d}"), target_fixture="report")
def admin_generates(order_number):
    return generate_discount(order_number)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the store has {count:d} orders"))
def store_has_orders(count):
    assert store_stats().total_orders == count


@then(parsers.cfparse("the store has sold {count:d} items"))
def store_sold_items(count):
    assert store_stats().items_purchased_count == count


@then(parsers.cfparse("the purchase amount is {amount:f}"))
def purchase_amount_is(amount):
    assert store_stats().total_purchase_amount == pytest.approx(amount)


@then(parsers.cfparse("the discount amount is {amount:f}"))
def discount_amount_is(amount):
    assert store_stats().total_discount_amount == pytest.approx(amount)


@then(parsers.cfparse("the store lists {count:d} discount code"))
def store_lists_code(count):
    assert len(store_stats().discount_codes) == count


@then(parsers.cfparse("the store lists {count:d} discount codes"))
def store_lists_codes(count):
    assert len(store_stats().discount_codes) == count


@then(parsers.cfparse('the generation succeeds with "{message}"'))
def generation_succeeds(report, message):
    assert report.success is True
    assert report.message == message


@then("the generation is skipped")
def generation_skipped(report):
    assert report.success is False
    assert report.outcome == GenerationOutcome.SKIPPED.value
