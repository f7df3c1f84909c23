"""Monetary rounding: two decimal places, halves rounded away from zero."""

from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")


def round_money(amount) -> float:
    return float(Decimal(str(amount)).quantize(CENTS, rounding=ROUND_HALF_UP))
