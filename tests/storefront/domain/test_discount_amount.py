"""Tests for discount arithmetic and monetary rounding."""

import pytest
from storefront.discount.ledger import calculate_discount_amount
from storefront.utils.money import round_money


class TestCalculateDiscountAmount:
    @pytest.mark.parametrize(
        "subtotal, percent, expected",
        [
            (200.0, 10, 20.0),
            (99.99, 10, 10.0),
            (0.05, 10, 0.01),
            (10.05, 50, 5.03),
            (0.0, 10, 0.0),
            (123.45, 100, 123.45),
        ],
    )
    def test_rounds_half_up_to_cents(self, subtotal, percent, expected):
        assert calculate_discount_amount(subtotal, percent) == expected


class TestRoundMoney:
    def test_half_cent_rounds_up(self):
        assert round_money(2.675) == 2.68

    def test_float_noise_is_removed(self):
        assert round_money(0.1 + 0.2) == 0.3
