"""FastAPI routes for the Storefront domain — carts, checkout, discounts, admin."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from storefront.admin.discounts import generate_discount
from storefront.admin.statistics import store_stats
from storefront.api.schemas import (
    AddToCartRequest,
    CartIdResponse,
    CartItemSchema,
    CartResponse,
    CheckoutRequest,
    CodeValidationResponse,
    DiscountCodeSchema,
    GenerateDiscountRequest,
    GenerationReportResponse,
    OrderItemSchema,
    OrderResponse,
    StoreStatsResponse,
)
from storefront.cart.items import AddToCart, RemoveFromCart
from storefront.cart.management import get_cart
from storefront.checkout.checkout import get_order, process_checkout
from storefront.discount import ledger
from storefront.discount.discount_code import DiscountCode
from storefront.discount.generation import issue_code


def _cart_response(cart) -> CartResponse:
    return CartResponse(
        id=str(cart.id),
        items=[
            CartItemSchema(
                id=str(item.id),
                product_id=item.product_id,
                name=item.name,
                unit_price=item.unit_price,
                quantity=item.quantity,
            )
            for item in cart.items
        ],
        total=cart.total,
    )


def _order_response(order) -> OrderResponse:
    return OrderResponse(
        id=str(order.id),
        cart_id=str(order.cart_id),
        order_number=order.order_number,
        items=[
            OrderItemSchema(
                product_id=item.product_id,
                name=item.name,
                unit_price=item.unit_price,
                quantity=item.quantity,
            )
            for item in order.items
        ],
        subtotal=order.subtotal,
        discount_code=order.discount_code,
        discount_amount=order.discount_amount,
        total=order.total,
        created_at=order.created_at,
    )


def _code_schema(discount_code) -> DiscountCodeSchema:
    return DiscountCodeSchema(
        code=discount_code.code,
        discount_percent=discount_code.discount_percent,
        is_used=bool(discount_code.is_used),
        order_number=discount_code.order_number,
        created_at=discount_code.created_at,
        used_at=discount_code.used_at,
    )


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/carts", tags=["carts"])


@cart_router.post("", status_code=201, response_model=CartIdResponse)
async def create_cart() -> CartIdResponse:
    cart = get_cart()
    return CartIdResponse(cart_id=str(cart.id))


@cart_router.get("/{cart_id}", response_model=CartResponse)
async def read_cart(cart_id: str) -> CartResponse:
    return _cart_response(get_cart(cart_id))


@cart_router.post("/{cart_id}/items", response_model=CartResponse)
async def add_cart_item(cart_id: str, body: AddToCartRequest) -> CartResponse:
    command = AddToCart(
        cart_id=cart_id,
        product_id=body.product_id,
        name=body.name,
        unit_price=body.unit_price,
        quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return _cart_response(get_cart(cart_id))


@cart_router.delete("/{cart_id}/items/{item_id}", response_model=CartResponse)
async def remove_cart_item(cart_id: str, item_id: str) -> CartResponse:
    command = RemoveFromCart(
        cart_id=cart_id,
        item_id=item_id,
    )
    current_domain.process(command, asynchronous=False)
    return _cart_response(get_cart(cart_id))


# ---------------------------------------------------------------------------
# Checkout & Order Routers
# ---------------------------------------------------------------------------
checkout_router = APIRouter(prefix="/checkout", tags=["checkout"])


@checkout_router.post("", status_code=201, response_model=OrderResponse)
async def checkout(body: CheckoutRequest) -> OrderResponse:
    order = process_checkout(body.cart_id, discount_code=body.discount_code)
    return _order_response(order)


order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("/{order_id}", response_model=OrderResponse)
async def read_order(order_id: str) -> OrderResponse:
    return _order_response(get_order(order_id))


# ---------------------------------------------------------------------------
# Discount Router
# ---------------------------------------------------------------------------
discount_router = APIRouter(prefix="/discounts", tags=["discounts"])


@discount_router.get("/validate/{code}", response_model=CodeValidationResponse)
async def validate_discount_code(code: str) -> CodeValidationResponse:
    validation = ledger.validate_code(code)
    return CodeValidationResponse(
        valid=bool(validation.valid),
        discount_percent=validation.discount_percent,
        message=validation.message,
    )


@discount_router.post("/generate", response_model=DiscountCodeSchema | None)
async def generate_discount_code(body: GenerateDiscountRequest) -> DiscountCodeSchema | None:
    discount_code = issue_code(body.order_number)
    return _code_schema(discount_code) if discount_code else None


# ---------------------------------------------------------------------------
# Admin Router
# ---------------------------------------------------------------------------
admin_router = APIRouter(prefix="/admin", tags=["admin"])


@admin_router.get("/stats", response_model=StoreStatsResponse)
async def read_store_stats() -> StoreStatsResponse:
    stats = store_stats()
    return StoreStatsResponse(
        items_purchased_count=stats.items_purchased_count,
        total_purchase_amount=stats.total_purchase_amount,
        discount_codes=[_code_schema(code) for code in stats.discount_codes],
        total_discount_amount=stats.total_discount_amount,
        total_orders=stats.total_orders,
    )


@admin_router.post("/discounts/generate", response_model=GenerationReportResponse)
async def admin_generate_discount(body: GenerateDiscountRequest) -> GenerationReportResponse:
    report = generate_discount(body.order_number)
    discount_code = current_domain.repository_for(DiscountCode).get(report.code) if report.code else None
    return GenerationReportResponse(
        success=report.success,
        outcome=report.outcome,
        message=report.message,
        discount_code=_code_schema(discount_code) if discount_code else None,
    )
