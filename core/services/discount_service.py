# =============================================================================
# core/services/discount_service.py - Discount Code Validation
# =============================================================================
# Checks a shopper-entered code against an order total:
#
#   1. The code exists and is active (case-insensitive)
#   2. It hasn't expired
#   3. It hasn't hit its usage limit
#   4. The order meets the code's minimum
#
# A valid percentage code takes value% of the order, rounded half-up; a
# fixed code takes its value, never more than the order itself.
# =============================================================================

import logging
from datetime import datetime

from pydantic import ValidationError

from app.config import settings
from app.exceptions import CatalogUnavailableError
from core.data.promotions import DISCOUNT_CODES
from core.models.promotion import DiscountCode, DiscountResult, DiscountType
from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import format_price, round_half_up

logger = logging.getLogger(__name__)


def find_discount_code(code: str) -> DiscountCode | None:
    """
    Look up an active code.

    Reads the bundled sample codes or the `promotions` table, following
    settings.CATALOG_SOURCE.

    Raises:
        CatalogUnavailableError: If the promotions table can't be read
    """
    wanted = code.strip().upper()
    if not wanted:
        return None

    if not settings.uses_supabase_catalog:
        return next((dc for dc in DISCOUNT_CODES if dc.code == wanted and dc.active), None)

    try:
        row = SupabaseClient.fetch_promotion(wanted)
    except SupabaseClientError as e:
        raise CatalogUnavailableError(e.message)
    if row is None:
        return None

    try:
        return DiscountCode.model_validate(row)
    except ValidationError as e:
        logger.warning(f"Ignoring invalid promotion row {row.get('id')!r}: {e.error_count()} errors")
        return None


def discount_amount(discount_code: DiscountCode, order_total: int) -> int:
    if discount_code.type == DiscountType.PERCENTAGE:
        return int(round_half_up(order_total * discount_code.value / 100))
    return min(discount_code.value, order_total)


def validate_discount_code(
    code: str,
    order_total: int,
    now: datetime | None = None,
) -> DiscountResult:
    """
    Check a code against an order total.

    Args:
        code: Code as typed by the shopper
        order_total: Order amount the discount applies to (whole Naira)
        now: Current time (defaults to utcnow)

    Returns:
        DiscountResult; `discount` is 0 whenever `valid` is False

    Example:
        validate_discount_code("welcome10", 750_000).discount  # 75000
    """
    discount_code = find_discount_code(code)
    if discount_code is None:
        return DiscountResult(valid=False, message="Invalid discount code")

    today = (now or datetime.utcnow()).date()
    if discount_code.expires_at and today > discount_code.expires_at:
        return DiscountResult(valid=False, message="This code has expired", code=discount_code.code)

    if discount_code.max_uses and discount_code.used_count >= discount_code.max_uses:
        return DiscountResult(
            valid=False,
            message="This code has reached its usage limit",
            code=discount_code.code,
        )

    if discount_code.min_order and order_total < discount_code.min_order:
        return DiscountResult(
            valid=False,
            message=f"Minimum order of {format_price(discount_code.min_order)} required",
            code=discount_code.code,
        )

    if discount_code.type == DiscountType.PERCENTAGE:
        label = f"{discount_code.value}%"
    else:
        label = format_price(discount_code.value)

    return DiscountResult(
        valid=True,
        discount=discount_amount(discount_code, order_total),
        message=f"{label} discount applied!",
        code=discount_code.code,
    )
