# =============================================================================
# core/models/receipt.py - Receipt Schemas
# =============================================================================
# A receipt is recorded once a checkout has been paid. Rendering it (PDF,
# print) happens elsewhere; these models only describe the stored record.
# =============================================================================

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class ReceiptStatus(str, Enum):
    PAID = "paid"
    REFUNDED = "refunded"


class ReceiptItem(BaseModel):
    """One priced line on a receipt."""

    name: str
    quantity: int = Field(..., ge=1)
    unit_price: int = Field(..., ge=0)
    total: int = Field(..., ge=0)
    vendor_name: str | None = None
    category: str | None = None


class ReceiptCreate(BaseModel):
    """
    Input for recording a receipt.

    Receipt number and payment reference are generated by the service.
    """

    user_id: str
    booking_id: str | None = None
    customer_name: str
    customer_email: str
    event_type: str
    event_date: str
    venue: str | None = None
    payment_method: str = "card"
    subtotal: int = Field(..., ge=0)
    service_fee: int = Field(default=0, ge=0)
    vat_amount: int = Field(default=0, ge=0)
    discount_amount: int = Field(default=0, ge=0)
    total_amount: int = Field(..., ge=0)
    items: list[ReceiptItem] = Field(default_factory=list)


class Receipt(BaseModel):
    """A stored receipt as returned by the database."""

    id: str
    receipt_number: str
    customer_name: str
    customer_email: str
    event_type: str
    event_date: str
    venue: str | None = None
    payment_reference: str
    payment_method: str = "card"
    subtotal: float = 0
    service_fee: float = 0
    vat_amount: float = 0
    discount_amount: float = 0
    total_amount: float = 0
    currency: str = "NGN"
    status: ReceiptStatus = ReceiptStatus.PAID
    items: list[ReceiptItem] = Field(default_factory=list)
    created_at: datetime | None = None
    payment_date: datetime | None = None
