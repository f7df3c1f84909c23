"""Pydantic request/response schemas for the Storefront API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands and aggregates.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class CartItemSchema(BaseModel):
    id: str
    product_id: str
    name: str
    unit_price: float
    quantity: int


class CartIdResponse(BaseModel):
    cart_id: str


class CartResponse(BaseModel):
    id: str
    items: list[CartItemSchema]
    total: float


class AddToCartRequest(BaseModel):
    product_id: str
    name: str
    unit_price: float = Field(ge=0)
    quantity: int = Field(ge=1, default=1)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "prod-123",
                    "name": "Laptop",
                    "unit_price": 999.99,
                    "quantity": 2,
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Checkout & Orders
# ---------------------------------------------------------------------------
class CheckoutRequest(BaseModel):
    cart_id: str
    discount_code: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "cart_id": "0b6f6a2e-8f0c-4d8e-9a51-0c7f1b1a2d3e",
                    "discount_code": "DISCOUNT-1234",
                }
            ]
        }
    }


class OrderItemSchema(BaseModel):
    product_id: str
    name: str
    unit_price: float
    quantity: int


class OrderResponse(BaseModel):
    id: str
    cart_id: str
    order_number: int
    items: list[OrderItemSchema]
    subtotal: float
    discount_code: str | None = None
    discount_amount: float
    total: float
    created_at: datetime


# ---------------------------------------------------------------------------
# Discount codes
# ---------------------------------------------------------------------------
class DiscountCodeSchema(BaseModel):
    code: str
    discount_percent: int
    is_used: bool
    order_number: int
    created_at: datetime
    used_at: datetime | None = None


class CodeValidationResponse(BaseModel):
    valid: bool
    discount_percent: int | None = None
    message: str


class GenerateDiscountRequest(BaseModel):
    order_number: int

    model_config = {"json_schema_extra": {"examples": [{"order_number": 5}]}}


class GenerationReportResponse(BaseModel):
    success: bool
    outcome: str
    message: str
    discount_code: DiscountCodeSchema | None = None


# ---------------------------------------------------------------------------
# Admin
# ---------------------------------------------------------------------------
class StoreStatsResponse(BaseModel):
    items_purchased_count: int
    total_purchase_amount: float
    discount_codes: list[DiscountCodeSchema]
    total_discount_amount: float
    total_orders: int
