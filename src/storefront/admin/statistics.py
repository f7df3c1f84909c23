"""Store statistics — read-only aggregates over orders and discount codes.

Nothing here keeps state of its own: every figure is recomputed from the
order store and the discount ledger on each call.
"""

from dataclasses import dataclass, field

from protean.utils.globals import current_domain

from storefront.discount import ledger
from storefront.discount.discount_code import DiscountCode
from storefront.order.order import Order
from storefront.order.repository import OrderRepository
from storefront.utils.money import round_money


@dataclass(frozen=True)
class StoreStats:
    items_purchased_count: int
    total_purchase_amount: float
    total_discount_amount: float
    total_orders: int
    discount_codes: list[DiscountCode] = field(default_factory=list)


def _orders() -> list[Order]:
    repo: OrderRepository = current_domain.repository_for(Order)
    return repo.in_number_order()


def order_count() -> int:
    return len(_orders())


def total_items_purchased() -> int:
    return sum(order.item_count for order in _orders())


def total_purchase_amount() -> float:
    """Revenue before discounts: the sum of order subtotals."""
    return round_money(sum(order.subtotal for order in _orders()))


def total_discount_amount() -> float:
    return round_money(sum(order.discount_amount or 0.0 for order in _orders()))


def all_discount_codes() -> list[DiscountCode]:
    """Every code in the ledger, used and unused, in the order it was issued."""
    return ledger.all_codes()


def store_stats() -> StoreStats:
    orders = _orders()
    return StoreStats(
        items_purchased_count=sum(order.item_count for order in orders),
        total_purchase_amount=round_money(sum(order.subtotal for order in orders)),
        total_discount_amount=round_money(sum(order.discount_amount or 0.0 for order in orders)),
        total_orders=len(orders),
        discount_codes=all_discount_codes(),
    )
