"""Discount ledger — validates, redeems and mints discount codes.

The ledger is the authority on code state. Validation is soft: expected
outcomes (blank, unknown or used codes) come back as a ``CodeValidation``
rather than an exception. Misuse such as redeeming a code twice raises.
"""

import random
from decimal import Decimal

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Boolean, Integer, String
from protean.utils.globals import current_domain

from storefront.discount.discount_code import DiscountCode, normalize_code
from storefront.discount.policy import discount_percent, nth_order_interval
from storefront.discount.repository import DiscountCodeRepository
from storefront.domain import logger, storefront
from storefront.utils.money import round_money

CODE_PREFIX = "DISCOUNT-"
MAX_GENERATION_ATTEMPTS = 100


class DiscountCodeSpaceExhausted(RuntimeError):
    """No unused code string could be found within the attempt budget."""


@storefront.value_object
class CodeValidation:
    """Outcome of checking whether a code can be applied to an order."""

    valid = Boolean(default=False)
    discount_percent = Integer()
    message = String(required=True, max_length=255)


def _repository() -> DiscountCodeRepository:
    return current_domain.repository_for(DiscountCode)


def validate_code(code) -> CodeValidation:
    """Check that ``code`` exists and has not been used yet. Never raises."""
    normalized = normalize_code(code)
    if not normalized:
        return CodeValidation(valid=False, message="Discount code is required")

    discount_code = _repository().find_by_code(normalized)
    if discount_code is None:
        return CodeValidation(valid=False, message="Invalid discount code")

    if discount_code.is_used:
        return CodeValidation(valid=False, message="Discount code has already been used")

    return CodeValidation(
        valid=True,
        discount_percent=discount_code.discount_percent,
        message="Discount code is valid",
    )


def generate_code(order_number) -> DiscountCode | None:
    """Mint the reward code for ``order_number`` if it is an nth order.

    Returns None for non-qualifying order numbers and the already-minted code
    when one exists for ``order_number``.
    """
    if isinstance(order_number, bool) or not isinstance(order_number, int) or order_number <= 0:
        raise ValidationError({"order_number": ["Invalid order number"]})

    if order_number % nth_order_interval() != 0:
        return None

    repo = _repository()
    existing = repo.find_for_order(order_number)
    if existing is not None:
        return existing

    discount_code = DiscountCode.issue(
        code=_unique_code(repo),
        order_number=order_number,
        discount_percent=discount_percent(),
    )
    repo.add(discount_code)

    logger.info(
        "Discount code issued",
        code=discount_code.code,
        order_number=order_number,
        discount_percent=discount_code.discount_percent,
    )
    return discount_code


def _unique_code(repo):
    for _ in range(MAX_GENERATION_ATTEMPTS):
        candidate = f"{CODE_PREFIX}{random.randint(1000, 9999)}"
        if repo.find_by_code(candidate) is None:
            return candidate

    logger.error("Discount code space exhausted", attempts=MAX_GENERATION_ATTEMPTS)
    raise DiscountCodeSpaceExhausted(
        f"Failed to generate a unique discount code after {MAX_GENERATION_ATTEMPTS} attempts"
    )


def mark_used(code) -> DiscountCode:
    """Redeem ``code``. Raises if the code is unknown or already used."""
    repo = _repository()
    discount_code = repo.find_by_code(code)
    if discount_code is None:
        raise ObjectNotFoundError(f"Discount code {code} not found")

    discount_code.mark_used()
    repo.add(discount_code)

    logger.info("Discount code redeemed", code=discount_code.code)
    return discount_code


def most_recent_unused() -> DiscountCode | None:
    return _repository().most_recent_unused()


def discount_percent_for(code) -> int:
    discount_code = _repository().find_by_code(code)
    if discount_code is None:
        raise ObjectNotFoundError(f"Discount code {code} not found")
    return discount_code.discount_percent


def all_codes() -> list[DiscountCode]:
    return _repository().in_issue_order()


def calculate_discount_amount(subtotal, percent) -> float:
    """``percent`` of ``subtotal``, rounded half-up to cents."""
    return round_money(Decimal(str(subtotal)) * Decimal(str(percent)) / Decimal(100))
