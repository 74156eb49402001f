# =============================================================================
# tests/test_discount_service.py - Discount Code Tests
# =============================================================================
# Run with: pytest tests/test_discount_service.py -v
# =============================================================================

from datetime import date, datetime
from unittest.mock import MagicMock, patch

import pytest

from app.exceptions import CatalogUnavailableError
from core.data.catalog import SERVICES
from core.models.promotion import DiscountCode, DiscountType
from core.models.store import CartItem
from core.services.discount_service import find_discount_code, validate_discount_code
from core.services.store_service import cart_summary

NOW = datetime(2026, 10, 19, 12, 0)

CATERING = next(s for s in SERVICES if s.id == "s8")   # 750,000


@pytest.fixture
def codes(monkeypatch):
    """Replace the sample codes with a list the test controls."""

    def _install(*discount_codes: DiscountCode) -> None:
        monkeypatch.setattr("core.services.discount_service.DISCOUNT_CODES", list(discount_codes))

    return _install


@pytest.fixture
def supabase_promotions():
    """Read promotions from Supabase instead of the sample list."""
    with patch("core.services.discount_service.settings", MagicMock(uses_supabase_catalog=True)):
        yield


# =============================================================================
# Validation Tests
# =============================================================================

class TestValidateDiscountCode:
    """Tests for validate_discount_code() against the sample codes."""

    def test_unknown_code(self):
        result = validate_discount_code("NOPE", 750_000, now=NOW)

        assert not result.valid
        assert result.discount == 0
        assert result.message == "Invalid discount code"

    def test_blank_code(self):
        assert not validate_discount_code("   ", 750_000, now=NOW).valid

    def test_percentage_code(self):
        """10% of ₦750,000."""
        result = validate_discount_code("WELCOME10", 750_000, now=NOW)

        assert result.valid
        assert result.discount == 75_000
        assert result.message == "10% discount applied!"
        assert result.code == "WELCOME10"

    def test_code_is_case_insensitive(self):
        assert validate_discount_code(" welcome10 ", 750_000, now=NOW).discount == 75_000

    def test_fixed_code(self):
        result = validate_discount_code("FLAT50K", 600_000, now=NOW)

        assert result.valid
        assert result.discount == 50_000
        assert result.message == "₦50,000 discount applied!"

    def test_expired_code(self):
        result = validate_discount_code("SUMMER2024", 200_000, now=NOW)

        assert not result.valid
        assert result.discount == 0
        assert result.message == "This code has expired"

    def test_code_is_usable_on_its_expiry_date(self):
        result = validate_discount_code("SUMMER2024", 200_000, now=datetime(2024, 8, 31, 23, 59))

        assert result.valid
        assert result.discount == 30_000

    def test_below_minimum_order(self):
        result = validate_discount_code("WELCOME10", 40_000, now=NOW)

        assert not result.valid
        assert result.discount == 0
        assert result.message == "Minimum order of ₦50,000 required"

    def test_minimum_order_is_inclusive(self):
        assert validate_discount_code("FLAT50K", 500_000, now=NOW).valid


class TestDiscountCodeLimits:
    """Cases the sample codes don't cover."""

    def test_exhausted_code(self, codes):
        codes(DiscountCode(
            id="dc9", code="LAST5", type=DiscountType.PERCENTAGE, value=5,
            max_uses=10, used_count=10,
        ))

        result = validate_discount_code("LAST5", 100_000, now=NOW)

        assert not result.valid
        assert result.discount == 0
        assert result.message == "This code has reached its usage limit"

    def test_inactive_code_is_invalid(self, codes):
        codes(DiscountCode(id="dc9", code="OFF", type=DiscountType.FIXED, value=1_000, active=False))

        assert validate_discount_code("OFF", 100_000, now=NOW).message == "Invalid discount code"

    def test_fixed_discount_never_exceeds_order(self, codes):
        codes(DiscountCode(id="dc9", code="BIG", type=DiscountType.FIXED, value=50_000))

        assert validate_discount_code("BIG", 20_000, now=NOW).discount == 20_000

    def test_percentage_rounds_half_up(self, codes):
        """15% of ₦5 is ₦0.75 -> ₦1; 10% of ₦5 is ₦0.50 -> ₦1."""
        codes(
            DiscountCode(id="a", code="P15", type=DiscountType.PERCENTAGE, value=15),
            DiscountCode(id="b", code="P10", type=DiscountType.PERCENTAGE, value=10),
        )

        assert validate_discount_code("P15", 5, now=NOW).discount == 1
        assert validate_discount_code("P10", 5, now=NOW).discount == 1

    def test_stored_codes_are_upper_case(self):
        code = DiscountCode(id="x", code=" spring ", type=DiscountType.FIXED, value=1)

        assert code.code == "SPRING"


# =============================================================================
# Supabase Lookup Tests
# =============================================================================

class TestPromotionLookup:
    """find_discount_code() against the promotions table."""

    def test_reads_promotions_table(self, mock_supabase, supabase_promotions):
        query = mock_supabase.table.return_value
        query.execute.return_value.data = [{
            "id": "p1",
            "code": "EASTER",
            "type": "fixed",
            "value": 25000,
            "min_order": None,
            "max_uses": None,
            "used_count": 0,
            "expires_at": "2027-04-30",
            "active": True,
        }]

        code = find_discount_code("easter")

        assert code.code == "EASTER"
        assert code.expires_at == date(2027, 4, 30)
        mock_supabase.table.assert_called_with("promotions")
        query.eq.assert_any_call("code", "EASTER")
        query.eq.assert_any_call("active", True)

    def test_missing_promotion(self, mock_supabase, supabase_promotions):
        mock_supabase.table.return_value.execute.return_value.data = []

        assert find_discount_code("EASTER") is None
        assert not validate_discount_code("EASTER", 100_000, now=NOW).valid

    def test_invalid_row_is_ignored(self, mock_supabase, supabase_promotions):
        mock_supabase.table.return_value.execute.return_value.data = [
            {"id": "p1", "code": "BROKEN", "type": "bogus", "value": 0}
        ]

        assert find_discount_code("BROKEN") is None

    def test_database_error(self, mock_supabase, supabase_promotions):
        mock_supabase.table.return_value.execute.side_effect = Exception("timeout")

        with pytest.raises(CatalogUnavailableError):
            find_discount_code("EASTER")


# =============================================================================
# Cart Pricing With Discounts
# =============================================================================

class TestCartSummaryDiscount:
    """cart_summary() with a discount code."""

    def test_valid_code_reduces_grand_total(self):
        summary = cart_summary([CartItem(service=CATERING)], discount_code="welcome10", now=NOW)

        assert summary.subtotal == 750_000
        assert summary.discount == 75_000
        assert summary.service_fee == 37_500
        assert summary.grand_total == 712_500
        assert summary.discount_code == "WELCOME10"
        assert summary.discount_message == "10% discount applied!"

    def test_rejected_code_prices_without_discount(self):
        summary = cart_summary([CartItem(service=CATERING)], discount_code="SUMMER2024", now=NOW)

        assert summary.discount == 0
        assert summary.grand_total == 787_500
        assert summary.discount_message == "This code has expired"

    def test_no_code(self):
        summary = cart_summary([CartItem(service=CATERING)])

        assert summary.discount == 0
        assert summary.discount_code is None
        assert summary.discount_message is None
