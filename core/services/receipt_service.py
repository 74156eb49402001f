# =============================================================================
# core/services/receipt_service.py - Receipt Business Logic
# =============================================================================
# Records paid checkouts in the `receipts` table.
# =============================================================================

import logging
import random
import string
from datetime import datetime
from typing import Any, Sequence
from uuid import UUID

from app.config import settings
from core.models.receipt import Receipt, ReceiptCreate, ReceiptItem, ReceiptStatus
from core.models.store import CartItem
from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import format_price, normalize_uuid

logger = logging.getLogger(__name__)

PAYMENT_REFERENCE_CHARS = string.ascii_uppercase + string.digits
PAYMENT_REFERENCE_LENGTH = 12


def generate_receipt_number(now: datetime | None = None) -> str:
    """
    Receipt number for the current year.

    Example:
        generate_receipt_number()  # "INV-2026-04821"
    """
    year = (now or datetime.utcnow()).year
    return f"INV-{year}-{random.randint(0, 99999):05d}"


def generate_payment_reference() -> str:
    """Random reference such as "PAY-7KQ2M9XW4ZB1"."""
    suffix = "".join(random.choices(PAYMENT_REFERENCE_CHARS, k=PAYMENT_REFERENCE_LENGTH))
    return f"PAY-{suffix}"


def receipt_items_from_cart(cart: Sequence[CartItem]) -> list[ReceiptItem]:
    """One receipt line per cart item."""
    return [
        ReceiptItem(
            name=item.service.name,
            quantity=item.quantity,
            unit_price=item.service.price,
            total=item.line_total,
            vendor_name=item.service.vendor_name,
            category=item.service.category.value,
        )
        for item in cart
    ]


class ReceiptService:
    """Service for receipt operations."""

    @staticmethod
    def create_receipt(params: ReceiptCreate) -> Receipt:
        """
        Record a paid receipt.

        Args:
            params: Checkout totals and line items

        Returns:
            The stored Receipt

        Raises:
            SupabaseClientError: If the insert fails
        """
        client = SupabaseClient.get_client()
        now = datetime.utcnow()

        data = {
            "user_id": normalize_uuid(params.user_id),
            "booking_id": params.booking_id,
            "receipt_number": generate_receipt_number(now),
            "customer_name": params.customer_name,
            "customer_email": params.customer_email,
            "event_type": params.event_type,
            "event_date": params.event_date,
            "venue": params.venue,
            "payment_reference": generate_payment_reference(),
            "payment_method": params.payment_method,
            "subtotal": params.subtotal,
            "service_fee": params.service_fee,
            "vat_amount": params.vat_amount,
            "discount_amount": params.discount_amount,
            "total_amount": params.total_amount,
            "currency": settings.CURRENCY,
            "status": ReceiptStatus.PAID.value,
            "items": [item.model_dump() for item in params.items],
            "created_at": now.isoformat(),
            "payment_date": now.isoformat(),
        }

        try:
            response = (
                client.table("receipts")
                .insert(data)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to create receipt: {e}")
            raise SupabaseClientError(
                message=f"Failed to create receipt: {e}",
                code="INSERT_RECEIPT_FAILED",
                suggestion="The payment went through; retry recording the receipt",
                details={"user_id": params.user_id, "booking_id": params.booking_id}
            )

        if not response.data:
            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_NO_DATA"
            )

        row = response.data[0]
        logger.info(f"Recorded receipt {row.get('receipt_number')} for {format_price(params.total_amount)}")
        return ReceiptService._dict_to_receipt(row, items=params.items)

    @staticmethod
    def fetch_user_receipts(user_id: str | UUID) -> list[Receipt]:
        """
        A user's receipts, newest first.

        Raises:
            SupabaseClientError: If the query fails
        """
        user_id_str = normalize_uuid(user_id)
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table("receipts")
                .select("*")
                .eq("user_id", user_id_str)
                .order("created_at", desc=True)
                .execute()
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch receipts: {e}",
                code="FETCH_RECEIPTS_FAILED",
                details={"user_id": user_id_str}
            )

        return [ReceiptService._dict_to_receipt(row) for row in response.data or []]

    @staticmethod
    def _dict_to_receipt(
        data: dict[str, Any],
        items: Sequence[ReceiptItem] | None = None,
    ) -> Receipt:
        """Convert a receipts row to a Receipt."""
        return Receipt(
            id=str(data["id"]),
            receipt_number=data["receipt_number"],
            customer_name=data["customer_name"],
            customer_email=data["customer_email"],
            event_type=data["event_type"],
            event_date=data["event_date"],
            venue=data.get("venue"),
            payment_reference=data["payment_reference"],
            payment_method=data.get("payment_method") or "card",
            subtotal=float(data.get("subtotal") or 0),
            service_fee=float(data.get("service_fee") or 0),
            vat_amount=float(data.get("vat_amount") or 0),
            discount_amount=float(data.get("discount_amount") or 0),
            total_amount=float(data.get("total_amount") or 0),
            currency=data.get("currency") or settings.CURRENCY,
            status=data.get("status") or ReceiptStatus.PAID,
            items=list(items) if items is not None else data.get("items") or [],
            created_at=data.get("created_at"),
            payment_date=data.get("payment_date"),
        )
