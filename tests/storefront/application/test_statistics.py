"""Application tests for store statistics."""

import pytest
from protean.exceptions import ValidationError
from storefront.admin import statistics
from storefront.checkout.checkout import process_checkout
from storefront.discount import ledger


class TestEmptyStore:
    def test_all_figures_are_zero(self):
        stats = statistics.store_stats()
        assert stats.items_purchased_count == 0
        assert stats.total_purchase_amount == 0.0
        assert stats.total_discount_amount == 0.0
        assert stats.total_orders == 0
        assert stats.discount_codes == []


class TestAggregates:
    def test_counts_items_across_orders(self, filled_cart):
        process_checkout(filled_cart(("prod-001", 10.0, 2), ("prod-002", 1.0, 3)))
        process_checkout(filled_cart(("prod-003", 5.0, 1)))

        assert statistics.total_items_purchased() == 6
        assert statistics.order_count() == 2

    def test_purchase_amount_is_before_discount(self, filled_cart, nth_order):
        nth_order(1)
        process_checkout(filled_cart(("prod-001", 100.0, 1)))
        process_checkout(filled_cart(("prod-001", 100.0, 1)))

        assert statistics.total_purchase_amount() == 200.0
        assert statistics.total_discount_amount() == 10.0

    def test_lists_used_and_unused_codes(self, filled_cart, nth_order):
        nth_order(2)
        for _ in range(3):
            process_checkout(filled_cart(("prod-001", 20.0, 1)))

        codes = statistics.all_discount_codes()
        assert [c.order_number for c in codes] == [2]
        assert codes[0].is_used is True

        ledger.generate_code(4)
        assert [c.is_used for c in statistics.all_discount_codes()] == [True, False]

    def test_snapshot_matches_individual_figures(self, filled_cart, nth_order):
        nth_order(2)
        for price in (10.0, 20.0, 30.0):
            process_checkout(filled_cart(("prod-001", price, 2)))

        stats = statistics.store_stats()
        assert stats.total_orders == statistics.order_count() == 3
        assert stats.items_purchased_count == statistics.total_items_purchased() == 6
        assert stats.total_purchase_amount == statistics.total_purchase_amount() == 120.0
        assert stats.total_discount_amount == statistics.total_discount_amount() == 6.0
        assert len(stats.discount_codes) == 1

    def test_rejected_checkouts_are_not_counted(self, filled_cart):
        cart_id = filled_cart(("prod-001", 10.0, 1))
        with pytest.raises(ValidationError):
            process_checkout(cart_id, discount_code="DISCOUNT-0000")

        assert statistics.order_count() == 0
        assert statistics.total_purchase_amount() == 0.0
