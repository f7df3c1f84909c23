"""Repository for the Order aggregate."""

from storefront.domain import storefront
from storefront.order.order import Order
from storefront.utils.queries import fetch_all


@storefront.repository(part_of=Order)
class OrderRepository:
    def in_number_order(self) -> list[Order]:
        """Every stored order, first placed first."""
        return fetch_all(self._dao.query.order_by("order_number"))
