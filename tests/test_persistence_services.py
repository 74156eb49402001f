# =============================================================================
# tests/test_persistence_services.py - Persistence Services and Supabase Client
# =============================================================================
# The Supabase client is replaced by a MagicMock (see conftest.mock_supabase);
# these tests check what gets written and how rows come back.
#
# Run with: pytest tests/test_persistence_services.py -v
# =============================================================================

import re
from datetime import datetime
from unittest.mock import patch

import pytest

from app.config import settings
from app.exceptions import BookingNotFoundError
from core.data.catalog import SERVICES
from core.models.receipt import ReceiptCreate, ReceiptStatus
from core.models.store import Booking, BookingStatus, CartItem, SavedPlan
from core.services.booking_service import BookingService
from core.services.package_service import generate_event_packages
from core.services.plan_service import EventPlanService
from core.services.receipt_service import (
    ReceiptService,
    generate_payment_reference,
    generate_receipt_number,
    receipt_items_from_cart,
)
from lib.supabase_client import SupabaseClient, SupabaseClientError

CATERING = next(s for s in SERVICES if s.id == "s8")
DECOR = next(s for s in SERVICES if s.id == "s10")


def query(mock_supabase):
    """The chained query builder shared by every table() call."""
    return mock_supabase.table.return_value


# =============================================================================
# Booking Service Tests
# =============================================================================

class TestBookingService:
    """Tests for BookingService."""

    def test_create_booking(self, mock_supabase, sample_booking_row):
        query(mock_supabase).execute.return_value.data = [sample_booking_row]
        booking = Booking(
            id="booking-001",
            services=[CartItem(service=CATERING, quantity=1)],
            event_type="wedding",
            event_date="2026-12-12",
            guest_count=150,
            total_amount=750_000,
        )

        row = BookingService.create_booking(booking, user_id="user-123")

        assert row["id"] == "booking-001"
        mock_supabase.table.assert_called_with("bookings")
        inserted = query(mock_supabase).insert.call_args[0][0]
        assert inserted["user_id"] == "user-123"
        assert inserted["vendor_id"] == "v2"
        assert inserted["service_id"] == "s8"
        assert inserted["total_price"] == 750_000
        assert inserted["status"] == "pending"
        assert inserted["services"] == [{"service_id": "s8", "quantity": 1, "notes": None}]

    def test_create_booking_without_data(self, mock_supabase):
        query(mock_supabase).execute.return_value.data = []
        booking = Booking(id="b1", event_type="party", event_date="2026-11-01")

        with pytest.raises(SupabaseClientError) as exc_info:
            BookingService.create_booking(booking)

        assert exc_info.value.code == "INSERT_NO_DATA"

    def test_create_booking_database_error(self, mock_supabase):
        query(mock_supabase).execute.side_effect = Exception("connection reset")
        booking = Booking(id="b1", event_type="party", event_date="2026-11-01")

        with pytest.raises(SupabaseClientError) as exc_info:
            BookingService.create_booking(booking)

        assert exc_info.value.code == "INSERT_BOOKING_FAILED"
        assert exc_info.value.details == {"booking_id": "b1"}

    def test_update_status(self, mock_supabase, sample_booking_row):
        query(mock_supabase).execute.return_value.data = [{**sample_booking_row, "status": "confirmed"}]

        row = BookingService.update_booking_status("booking-001", BookingStatus.CONFIRMED)

        assert row["status"] == "confirmed"
        update = query(mock_supabase).update.call_args[0][0]
        assert update["status"] == "confirmed"
        assert "updated_at" in update
        query(mock_supabase).eq.assert_called_with("id", "booking-001")

    def test_update_status_of_missing_booking(self, mock_supabase):
        query(mock_supabase).execute.return_value.data = []

        with pytest.raises(BookingNotFoundError):
            BookingService.update_booking_status("nope", BookingStatus.CANCELLED)

    def test_list_user_bookings_newest_first(self, mock_supabase, sample_booking_row):
        query(mock_supabase).execute.return_value.data = [sample_booking_row]

        rows = BookingService.list_user_bookings("user-123")

        assert rows == [sample_booking_row]
        query(mock_supabase).order.assert_called_with("created_at", desc=True)

    def test_get_missing_booking(self, mock_supabase):
        query(mock_supabase).execute.side_effect = Exception("PGRST116: 0 rows")

        with pytest.raises(BookingNotFoundError):
            BookingService.get_booking("nope")


# =============================================================================
# Event Plan Service Tests
# =============================================================================

class TestEventPlanService:
    """Tests for EventPlanService."""

    def make_plan(self) -> SavedPlan:
        packages = generate_event_packages("wedding", "", "", "medium", "", "moderate")
        return SavedPlan(
            id="plan-1",
            name="Our Wedding",
            event_type="wedding",
            theme="romantic-garden",
            color_palette="blush-rose",
            guest_size="medium",
            venue_type="outdoor-garden",
            budget="moderate",
            created_at=datetime(2026, 10, 1, 9, 0, 0),
            packages=packages,
        )

    def test_create_plan_round_trips_packages(self, mock_supabase):
        plan = self.make_plan()
        # Echo the inserted row back, as Supabase does
        query(mock_supabase).insert.side_effect = lambda row: (
            setattr(query(mock_supabase).execute.return_value, "data", [row]) or query(mock_supabase)
        )

        saved = EventPlanService.create_plan(plan, user_id="user-123")

        inserted = query(mock_supabase).insert.call_args[0][0]
        assert inserted["user_id"] == "user-123"
        assert inserted["colors"] == "blush-rose"
        assert inserted["venue"] == "outdoor-garden"
        assert saved == plan

    def test_get_plan(self, mock_supabase):
        query(mock_supabase).execute.return_value.data = {
            "id": "plan-1",
            "name": "Office Party",
            "event_type": "corporate",
            "budget": "budget",
            "packages": [],
            "created_at": "2026-10-01T09:00:00+00:00",
        }

        plan = EventPlanService.get_plan("plan-1")

        assert plan.name == "Office Party"
        assert plan.packages == []

    def test_get_missing_plan_returns_none(self, mock_supabase):
        query(mock_supabase).execute.side_effect = Exception("PGRST116: 0 rows")

        assert EventPlanService.get_plan("missing") is None

    def test_get_plan_database_error(self, mock_supabase):
        query(mock_supabase).execute.side_effect = Exception("timeout")

        with pytest.raises(SupabaseClientError) as exc_info:
            EventPlanService.get_plan("plan-1")

        assert exc_info.value.code == "FETCH_PLAN_FAILED"

    def test_list_user_plans(self, mock_supabase):
        query(mock_supabase).execute.return_value.data = [
            {"id": "p2", "name": "B", "event_type": "birthday", "created_at": "2026-10-02T00:00:00"},
            {"id": "p1", "name": "A", "event_type": "wedding", "created_at": "2026-10-01T00:00:00"},
        ]

        plans = EventPlanService.list_user_plans("user-123")

        assert [p.id for p in plans] == ["p2", "p1"]
        query(mock_supabase).order.assert_called_with("created_at", desc=True)

    def test_delete_plan(self, mock_supabase):
        EventPlanService.delete_plan("plan-1")

        query(mock_supabase).delete.assert_called_once()
        query(mock_supabase).eq.assert_called_with("id", "plan-1")


# =============================================================================
# Receipt Service Tests
# =============================================================================

class TestReceiptHelpers:
    """Tests for receipt numbers, references and line items."""

    def test_receipt_number_format(self):
        number = generate_receipt_number(datetime(2026, 3, 1))

        assert re.fullmatch(r"INV-2026-\d{5}", number)

    def test_payment_reference_format(self):
        reference = generate_payment_reference()

        assert re.fullmatch(r"PAY-[A-Z0-9]{12}", reference)

    def test_receipt_items_from_cart(self):
        items = receipt_items_from_cart([
            CartItem(service=CATERING, quantity=2),
            CartItem(service=DECOR),
        ])

        assert [(i.name, i.quantity, i.unit_price, i.total) for i in items] == [
            (CATERING.name, 2, 750_000, 1_500_000),
            (DECOR.name, 1, 300_000, 300_000),
        ]
        assert items[0].vendor_name == "Divine Catering Co."
        assert items[1].category == "decorations"


class TestReceiptService:
    """Tests for ReceiptService."""

    def make_params(self) -> ReceiptCreate:
        return ReceiptCreate(
            user_id="user-123",
            booking_id="booking-001",
            customer_name="Ada Obi",
            customer_email="ada@example.com",
            event_type="wedding",
            event_date="2026-12-12",
            subtotal=750_000,
            service_fee=37_500,
            total_amount=787_500,
            items=receipt_items_from_cart([CartItem(service=CATERING)]),
        )

    def test_create_receipt(self, mock_supabase, sample_receipt_row):
        query(mock_supabase).execute.return_value.data = [sample_receipt_row]

        receipt = ReceiptService.create_receipt(self.make_params())

        inserted = query(mock_supabase).insert.call_args[0][0]
        assert inserted["status"] == "paid"
        assert inserted["currency"] == "NGN"
        assert inserted["vat_amount"] == 0
        assert re.fullmatch(r"INV-\d{4}-\d{5}", inserted["receipt_number"])
        assert inserted["payment_reference"].startswith("PAY-")
        assert inserted["items"][0]["total"] == 750_000

        assert receipt.status == ReceiptStatus.PAID
        assert receipt.total_amount == 787_500
        assert receipt.items[0].name == CATERING.name

    def test_create_receipt_database_error(self, mock_supabase):
        query(mock_supabase).execute.side_effect = Exception("insert failed")

        with pytest.raises(SupabaseClientError) as exc_info:
            ReceiptService.create_receipt(self.make_params())

        assert exc_info.value.code == "INSERT_RECEIPT_FAILED"

    def test_fetch_user_receipts(self, mock_supabase, sample_receipt_row):
        query(mock_supabase).execute.return_value.data = [sample_receipt_row]

        receipts = ReceiptService.fetch_user_receipts("user-123")

        assert [r.receipt_number for r in receipts] == ["INV-2026-00042"]
        assert receipts[0].service_fee == 37_500
        query(mock_supabase).order.assert_called_with("created_at", desc=True)


# =============================================================================
# Supabase Client Tests
# =============================================================================

class TestSupabaseClient:
    """Tests for the client singleton."""

    def setup_method(self):
        SupabaseClient.reset()

    def teardown_method(self):
        SupabaseClient.reset()

    def test_client_is_created_once(self):
        with patch("lib.supabase_client.create_client") as create:
            first = SupabaseClient.get_client()
            second = SupabaseClient.get_client()

        assert first is second
        create.assert_called_once_with(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_KEY)

    def test_client_init_failure(self):
        with patch("lib.supabase_client.create_client", side_effect=Exception("bad url")):
            with pytest.raises(SupabaseClientError) as exc_info:
                SupabaseClient.get_client()

        assert exc_info.value.code == "CLIENT_INIT_FAILED"
        assert exc_info.value.suggestion

    def test_upsert_rows(self, mock_supabase):
        query(mock_supabase).execute.return_value.data = [{"id": "s1"}, {"id": "s2"}]

        written = SupabaseClient.upsert_rows("services", [{"id": "s1"}, {"id": "s2"}])

        assert written == 2
        query(mock_supabase).upsert.assert_called_once_with(
            [{"id": "s1"}, {"id": "s2"}], on_conflict="id"
        )

    def test_upsert_nothing(self):
        assert SupabaseClient.upsert_rows("services", []) == 0

    def test_fetch_promotion_upper_cases_code(self, mock_supabase):
        query(mock_supabase).execute.return_value.data = [{"id": "p1", "code": "EASTER"}]

        row = SupabaseClient.fetch_promotion(" easter ")

        assert row["id"] == "p1"
        mock_supabase.table.assert_called_with("promotions")
        query(mock_supabase).eq.assert_any_call("code", "EASTER")

    def test_fetch_missing_promotion(self, mock_supabase):
        query(mock_supabase).execute.return_value.data = []

        assert SupabaseClient.fetch_promotion("EASTER") is None

    def test_fetch_promotion_error(self, mock_supabase):
        query(mock_supabase).execute.side_effect = Exception("timeout")

        with pytest.raises(SupabaseClientError) as exc_info:
            SupabaseClient.fetch_promotion("EASTER")

        assert exc_info.value.code == "FETCH_PROMOTION_FAILED"


class TestSupabaseClientWrites:
    """Tests for the single-row writes used by the catalog back-office."""

    def test_insert_row(self, mock_supabase):
        query(mock_supabase).execute.return_value.data = [{"id": "v9", "name": "New"}]

        row = SupabaseClient.insert_row("vendors", {"id": "v9", "name": "New"})

        assert row == {"id": "v9", "name": "New"}
        mock_supabase.table.assert_called_with("vendors")

    def test_insert_row_without_data(self, mock_supabase):
        query(mock_supabase).execute.return_value.data = []

        with pytest.raises(SupabaseClientError) as exc_info:
            SupabaseClient.insert_row("vendors", {"id": "v9"})

        assert exc_info.value.code == "INSERT_NO_DATA"

    def test_insert_row_error(self, mock_supabase):
        query(mock_supabase).execute.side_effect = Exception("duplicate key")

        with pytest.raises(SupabaseClientError) as exc_info:
            SupabaseClient.insert_row("vendors", {"id": "v1"})

        assert exc_info.value.code == "INSERT_FAILED"
        assert exc_info.value.details == {"table": "vendors", "id": "v1"}

    def test_update_row(self, mock_supabase):
        query(mock_supabase).execute.return_value.data = [{"id": "s1", "price": 10}]

        row = SupabaseClient.update_row("services", "s1", {"price": 10})

        assert row["price"] == 10
        query(mock_supabase).update.assert_called_once_with({"price": 10})
        query(mock_supabase).eq.assert_called_with("id", "s1")

    def test_update_missing_row(self, mock_supabase):
        query(mock_supabase).execute.return_value.data = []

        assert SupabaseClient.update_row("services", "nope", {"price": 10}) is None

    def test_update_row_error(self, mock_supabase):
        query(mock_supabase).execute.side_effect = Exception("bad column")

        with pytest.raises(SupabaseClientError) as exc_info:
            SupabaseClient.update_row("services", "s1", {"colour": "red"})

        assert exc_info.value.code == "UPDATE_FAILED"

    def test_delete_row(self, mock_supabase):
        query(mock_supabase).execute.return_value.data = [{"id": "s1"}]

        assert SupabaseClient.delete_row("services", "s1") is True
        query(mock_supabase).delete.assert_called_once()

    def test_delete_missing_row(self, mock_supabase):
        query(mock_supabase).execute.return_value.data = []

        assert SupabaseClient.delete_row("services", "nope") is False

    def test_delete_row_error(self, mock_supabase):
        query(mock_supabase).execute.side_effect = Exception("violates foreign key constraint")

        with pytest.raises(SupabaseClientError) as exc_info:
            SupabaseClient.delete_row("vendors", "v1")

        assert exc_info.value.code == "DELETE_FAILED"
        assert exc_info.value.suggestion
