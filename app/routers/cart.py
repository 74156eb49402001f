# =============================================================================
# app/routers/cart.py - Cart Endpoints
# =============================================================================
# Prices a cart against the current catalog and checks discount codes.
# =============================================================================

from fastapi import APIRouter
from pydantic import BaseModel, Field

from app.dependencies import ServicesDep, SettingsDep
from core.models.promotion import DiscountResult
from core.models.store import CartItem, CartSummary
from core.services.catalog_service import CatalogService
from core.services.discount_service import validate_discount_code
from core.services.store_service import cart_summary

router = APIRouter()


class CartLineRequest(BaseModel):
    service_id: str = Field(..., examples=["s1"])
    quantity: int = Field(default=1, ge=1)


class CartSummaryRequest(BaseModel):
    items: list[CartLineRequest] = Field(default_factory=list)
    discount_code: str | None = Field(default=None, examples=["WELCOME10"])


class DiscountCheckRequest(BaseModel):
    code: str = Field(..., min_length=1, examples=["WELCOME10"])
    order_total: int = Field(..., ge=0, description="Order amount in whole Naira")


@router.post("/summary", response_model=CartSummary)
async def summarize_cart(
    request: CartSummaryRequest,
    services: ServicesDep,
    config: SettingsDep,
):
    """
    Price a cart.

    Returns the priced lines, subtotal, discount, service fee and grand
    total. A rejected discount code leaves the discount at 0 and explains
    why in `discount_message`.
    Returns 404 SERVICE_NOT_FOUND if any service id is unknown.
    """
    items = [
        CartItem(
            service=CatalogService.get_service(line.service_id, services=services),
            quantity=line.quantity,
        )
        for line in request.items
    ]
    return cart_summary(
        items,
        fee_percent=config.SERVICE_FEE_PERCENT,
        discount_code=request.discount_code,
    )


@router.post("/discount", response_model=DiscountResult)
async def check_discount(request: DiscountCheckRequest):
    """Check a discount code against an order total."""
    return validate_discount_code(request.code, request.order_total)
