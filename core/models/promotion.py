# =============================================================================
# core/models/promotion.py - Discount Code Schemas
# =============================================================================
# A discount code takes either a percentage or a fixed Naira amount off an
# order. Codes can carry a minimum order, a usage limit and an expiry date.
# =============================================================================

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class DiscountType(str, Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


class DiscountCode(BaseModel):
    """
    A promotion row.

    Example:
        {
            "id": "dc1",
            "code": "WELCOME10",
            "type": "percentage",
            "value": 10,
            "min_order": 50000,
            "max_uses": 100,
            "used_count": 45,
            "expires_at": "2026-12-31",
            "active": true
        }
    """

    id: str = Field(..., min_length=1)
    code: str = Field(..., min_length=1, description="Stored upper-case")
    type: DiscountType
    value: int = Field(..., gt=0, description="Percent, or whole Naira for fixed codes")

    min_order: int | None = Field(default=None, ge=0)
    max_uses: int | None = Field(default=None, ge=1)
    used_count: int = Field(default=0, ge=0)

    # Last day the code can be used
    expires_at: date | None = None
    active: bool = True

    model_config = {"frozen": True}

    @field_validator("code")
    @classmethod
    def upper_case_code(cls, v: str) -> str:
        return v.strip().upper()


class DiscountResult(BaseModel):
    """Outcome of checking a code against an order total."""

    valid: bool
    discount: int = Field(default=0, ge=0, description="Whole Naira taken off")
    message: str
    code: str | None = None
