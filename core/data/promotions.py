# =============================================================================
# core/data/promotions.py - Sample Discount Codes
# =============================================================================
# Used when CATALOG_SOURCE is "static"; Supabase deployments keep codes in
# the `promotions` table.
# =============================================================================

from datetime import date

from core.models.promotion import DiscountCode, DiscountType

DISCOUNT_CODES: list[DiscountCode] = [
    DiscountCode(
        id="dc1",
        code="WELCOME10",
        type=DiscountType.PERCENTAGE,
        value=10,
        min_order=50_000,
        max_uses=100,
        used_count=45,
        expires_at=date(2026, 12, 31),
    ),
    DiscountCode(
        id="dc2",
        code="SUMMER2024",
        type=DiscountType.PERCENTAGE,
        value=15,
        min_order=100_000,
        max_uses=50,
        used_count=23,
        expires_at=date(2024, 8, 31),
    ),
    DiscountCode(
        id="dc3",
        code="FLAT50K",
        type=DiscountType.FIXED,
        value=50_000,
        min_order=500_000,
        max_uses=20,
        used_count=8,
    ),
]
