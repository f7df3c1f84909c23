"""Discount code generation — command and handler.

Used by the discount API to ask the ledger for the reward code of a given
order number. Non-qualifying order numbers yield no code.
"""

from protean import handle
from protean.fields import Integer
from protean.utils.globals import current_domain

from storefront.discount import ledger
from storefront.discount.discount_code import DiscountCode
from storefront.domain import storefront


@storefront.command(part_of="DiscountCode")
class GenerateDiscountCode:
    order_number = Integer(required=True, min_value=1)


@storefront.command_handler(part_of=DiscountCode)
class GenerateDiscountCodeHandler:
    @handle(GenerateDiscountCode)
    def generate_discount_code(self, command):
        discount_code = ledger.generate_code(command.order_number)
        return discount_code.code if discount_code else None


def issue_code(order_number) -> DiscountCode | None:
    """Generate (or fetch) the reward code for ``order_number``."""
    code = current_domain.process(GenerateDiscountCode(order_number=order_number), asynchronous=False)
    if code is None:
        return None
    return current_domain.repository_for(DiscountCode).get(code)
