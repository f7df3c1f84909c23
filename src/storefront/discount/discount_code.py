"""DiscountCode aggregate — a single-use reward minted on every nth order.

A code is identified by its uppercase code string. It is created unused,
redeemed at most once, and never deleted. The order number that triggered its
generation is kept so that at most one code exists per qualifying order.
"""

from datetime import UTC, datetime

from protean.exceptions import InvalidOperationError
from protean.fields import Boolean, DateTime, Integer, String

from storefront.discount.events import DiscountCodeIssued, DiscountCodeRedeemed
from storefront.domain import storefront


def normalize_code(code):
    """Codes are matched case-insensitively and stored uppercase."""
    return (code or "").strip().upper()


@storefront.aggregate
class DiscountCode:
    code = String(identifier=True, required=True, max_length=50)
    discount_percent = Integer(required=True, min_value=1, max_value=100)
    is_used = Boolean(default=False)
    order_number = Integer(required=True, min_value=1)
    created_at = DateTime()
    used_at = DateTime()

    @classmethod
    def issue(cls, code, order_number, discount_percent):
        now = datetime.now(UTC)
        discount_code = cls(
            code=normalize_code(code),
            discount_percent=discount_percent,
            is_used=False,
            order_number=order_number,
            created_at=now,
        )
        discount_code.raise_(
            DiscountCodeIssued(
                code=discount_code.code,
                order_number=order_number,
                discount_percent=discount_percent,
                issued_at=now,
            )
        )
        return discount_code

    def mark_used(self):
        """Redeem the code. A used code can never be redeemed again."""
        if self.is_used:
            raise InvalidOperationError(f"Discount code {self.code} has already been used")

        now = datetime.now(UTC)
        self.is_used = True
        self.used_at = now

        self.raise_(DiscountCodeRedeemed(code=self.code, used_at=now))
