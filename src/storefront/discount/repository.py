"""Repository for the DiscountCode aggregate — the ledger's store."""

from storefront.discount.discount_code import DiscountCode, normalize_code
from storefront.domain import storefront
from storefront.utils.queries import fetch_all


@storefront.repository(part_of=DiscountCode)
class DiscountCodeRepository:
    def find_by_code(self, code) -> DiscountCode | None:
        """Case-insensitive lookup; None when the code is unknown."""
        normalized = normalize_code(code)
        if not normalized:
            return None
        return self._dao.query.filter(code=normalized).all().first

    def find_for_order(self, order_number: int) -> DiscountCode | None:
        """The code minted for ``order_number``, if one exists."""
        return self._dao.query.filter(order_number=order_number).all().first

    def most_recent_unused(self) -> DiscountCode | None:
        """The unused code with the highest triggering order number."""
        return self._dao.query.filter(is_used=False).order_by("-order_number").all().first

    def in_issue_order(self) -> list[DiscountCode]:
        """Every code, used or not, oldest first."""
        return fetch_all(self._dao.query.order_by("created_at"))
