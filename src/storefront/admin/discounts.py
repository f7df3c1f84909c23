"""Manual discount generation for store administrators.

Unlike the ledger's ``generate_code``, the admin trigger reports what it did:
minted a new code, found the code already minted for that order, or skipped a
non-qualifying order number.
"""

from enum import Enum

from protean import handle
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from storefront.discount import ledger
from storefront.discount.discount_code import DiscountCode
from storefront.discount.policy import nth_order_interval
from storefront.domain import logger, storefront


class GenerationOutcome(Enum):
    GENERATED = "generated"
    EXISTING = "existing"
    SKIPPED = "skipped"


@storefront.value_object
class GenerationReport:
    outcome = String(required=True, choices=GenerationOutcome)
    message = String(required=True, max_length=255)
    order_number = Integer(required=True)
    code = String(max_length=50)

    @property
    def success(self):
        return self.outcome != GenerationOutcome.SKIPPED.value


@storefront.command(part_of="DiscountCode")
class GenerateDiscount:
    """Admin request to mint the reward code for a specific order number."""

    order_number = Integer(required=True, min_value=1)


@storefront.command_handler(part_of=DiscountCode)
class AdminDiscountHandler:
    @handle(GenerateDiscount)
    def generate_discount(self, command):
        order_number = command.order_number
        interval = nth_order_interval()

        if order_number % interval != 0:
            return GenerationReport(
                outcome=GenerationOutcome.SKIPPED.value,
                order_number=order_number,
                message=(
                    f"Order number {order_number} is not a multiple of {interval}. "
                    f"Discount codes are only generated for every {interval}th order."
                ),
            )

        existing = current_domain.repository_for(DiscountCode).find_for_order(order_number)
        if existing is not None:
            return GenerationReport(
                outcome=GenerationOutcome.EXISTING.value,
                order_number=order_number,
                code=existing.code,
                message=f"Discount code already exists for order {order_number}",
            )

        discount_code = ledger.generate_code(order_number)
        logger.info("Discount code generated by admin", code=discount_code.code, order_number=order_number)
        return GenerationReport(
            outcome=GenerationOutcome.GENERATED.value,
            order_number=order_number,
            code=discount_code.code,
            message=f"Discount code generated successfully for order {order_number}",
        )


def generate_discount(order_number) -> GenerationReport:
    return current_domain.process(GenerateDiscount(order_number=order_number), asynchronous=False)
