# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides a small service factory and a mocked Supabase client
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("CATALOG_SOURCE", "static")
os.environ.setdefault("ADMIN_API_KEY", "test-admin-key-0123456789")

from unittest.mock import MagicMock, patch

import pytest

from core.models.catalog import Service


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def make_service():
    """Factory for Service models with sensible defaults."""

    def _make(
        service_id: str,
        category: str,
        price: int,
        rating: float = 4.5,
        vendor_id: str = "v1",
        features: list[str] | None = None,
        available: bool = True,
    ) -> Service:
        return Service(
            id=service_id,
            name=f"Service {service_id}",
            category=category,
            description=f"Description for {service_id}",
            price=price,
            rating=rating,
            vendor_id=vendor_id,
            vendor_name=f"Vendor {vendor_id}",
            features=features if features is not None else [f"{service_id}-feature"],
            available=available,
        )

    return _make


@pytest.fixture
def mock_supabase():
    """
    Patch SupabaseClient.get_client with a MagicMock.

    Query builder calls chain on the same mock, so tests set
    `mock_supabase.execute.return_value.data` (via the `table()` chain) to
    control what the database returns.
    """
    client = MagicMock()
    query = client.table.return_value
    # Every builder method returns the same query object
    for method in ("select", "insert", "update", "upsert", "delete", "eq", "order", "limit", "single"):
        getattr(query, method).return_value = query

    with patch("lib.supabase_client.SupabaseClient.get_client", return_value=client):
        yield client


@pytest.fixture
def sample_booking_row():
    """A bookings row as returned by Supabase."""
    return {
        "id": "booking-001",
        "user_id": "user-123",
        "vendor_id": "v2",
        "service_id": "s8",
        "event_type": "wedding",
        "event_date": "2026-12-12",
        "venue": "Eko Hotel",
        "guest_count": 150,
        "total_price": 750000,
        "status": "pending",
        "created_at": "2026-10-01T09:00:00+00:00",
    }


@pytest.fixture
def sample_receipt_row():
    """A receipts row as returned by Supabase."""
    return {
        "id": "receipt-001",
        "user_id": "user-123",
        "booking_id": "booking-001",
        "receipt_number": "INV-2026-00042",
        "customer_name": "Ada Obi",
        "customer_email": "ada@example.com",
        "event_type": "wedding",
        "event_date": "2026-12-12",
        "venue": None,
        "payment_reference": "PAY-ABCDEF123456",
        "payment_method": "card",
        "subtotal": "750000",
        "service_fee": "37500",
        "vat_amount": "0",
        "discount_amount": "0",
        "total_amount": "787500",
        "currency": "NGN",
        "status": "paid",
        "items": [],
        "created_at": "2026-10-01T09:00:00+00:00",
        "payment_date": "2026-10-01T09:00:00+00:00",
    }
