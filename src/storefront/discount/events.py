"""Domain events for the DiscountCode aggregate."""

from protean.fields import DateTime, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="DiscountCode")
class DiscountCodeIssued:
    """A discount code was minted as the reward for an nth order."""

    __version__ = 1

    code = String(required=True)
    order_number = Integer(required=True)
    discount_percent = Integer(required=True)
    issued_at = DateTime(required=True)


@storefront.event(part_of="DiscountCode")
class DiscountCodeRedeemed:
    """A discount code was applied to an order and can no longer be used."""

    __version__ = 1

    code = String(required=True)
    used_at = DateTime(required=True)
