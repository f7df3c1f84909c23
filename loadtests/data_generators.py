"""Faker-based payloads for the storefront load test journeys.

Payloads match the field names of the API's Pydantic request schemas.
"""

import random
import uuid

from faker import Faker

fake = Faker()

# A small catalogue so carts regularly merge quantities of the same product.
PRODUCT_IDS = [f"prod-{n:03d}" for n in range(1, 21)]


def product_name() -> str:
    return f"{fake.color_name()} {fake.word().capitalize()}"[:255]


def cart_item_data(product_id: str | None = None) -> dict:
    """Generate an AddToCartRequest payload."""
    return {
        "product_id": product_id or random.choice(PRODUCT_IDS),
        "name": product_name(),
        "unit_price": round(random.uniform(1.0, 250.0), 2),
        "quantity": random.randint(1, 4),
    }


def bogus_discount_code() -> str:
    """A code string the ledger has almost certainly never issued."""
    return f"BOGUS-{uuid.uuid4().hex[:6].upper()}"
