# =============================================================================
# tests/test_catalog_admin_service.py - Catalog Back-Office Tests
# =============================================================================
# Writes go through the mocked Supabase client (see conftest.mock_supabase).
#
# Run with: pytest tests/test_catalog_admin_service.py -v
# =============================================================================

from unittest.mock import MagicMock, patch

import pytest
from pydantic import ValidationError

from app.exceptions import (
    CatalogReadOnlyError,
    CatalogWriteError,
    CategoryNotFoundError,
    ServiceNotFoundError,
    VendorNotFoundError,
)
from core.data.catalog import VENDORS
from core.models.catalog import (
    CategoryCreate,
    CategoryUpdate,
    ServiceCategory,
    ServiceCreate,
    ServiceUpdate,
    VendorCreate,
    VendorUpdate,
)
from core.services.catalog_admin_service import CatalogAdminService

DIVINE = next(v for v in VENDORS if v.id == "v2")


def query(mock_supabase):
    return mock_supabase.table.return_value


def echo_inserts(mock_supabase):
    """Make insert().execute() return the row that was inserted."""
    q = query(mock_supabase)

    def _execute():
        return MagicMock(data=[q.insert.call_args[0][0]])

    q.execute.side_effect = _execute


@pytest.fixture
def writable_catalog():
    with patch("core.services.catalog_admin_service.settings", MagicMock(uses_supabase_catalog=True)):
        yield


@pytest.fixture
def known_vendor():
    with patch("core.services.catalog_service.CatalogService.get_vendor", return_value=DIVINE) as get_vendor:
        yield get_vendor


SERVICE_ROW = {
    "id": "s8",
    "name": "Premium Catering",
    "category": "catering",
    "price": 800000,
    "vendor_id": "v2",
    "vendor_name": "Divine Catering Co.",
    "rating": 4.8,
}


# =============================================================================
# Read-Only Catalog
# =============================================================================

class TestReadOnlyCatalog:
    """The bundled sample catalog refuses every write."""

    def test_create_service_refused(self, mock_supabase):
        with pytest.raises(CatalogReadOnlyError):
            CatalogAdminService.create_service(
                ServiceCreate(name="x", category="catering", vendor_id="v2", price=1)
            )

        mock_supabase.table.assert_not_called()

    def test_delete_vendor_refused(self, mock_supabase):
        with pytest.raises(CatalogReadOnlyError) as exc_info:
            CatalogAdminService.delete_vendor("v1")

        assert exc_info.value.status_code == 409
        mock_supabase.table.assert_not_called()


# =============================================================================
# Services
# =============================================================================

class TestServiceAdmin:
    """Tests for service create / update / delete."""

    def test_create_service(self, mock_supabase, writable_catalog, known_vendor):
        echo_inserts(mock_supabase)

        service = CatalogAdminService.create_service(ServiceCreate(
            name="Small Chops Platter",
            category="catering",
            vendor_id="v2",
            price=150_000,
            features=["Puff-puff", "Samosa"],
        ))

        assert service.id.startswith("service-")
        assert service.vendor_name == "Divine Catering Co."
        assert service.rating == 4.5
        assert service.review_count == 0
        assert service.price_type == "fixed"
        mock_supabase.table.assert_called_with("services")
        inserted = query(mock_supabase).insert.call_args[0][0]
        assert inserted["category"] == "catering"
        assert inserted["features"] == ["Puff-puff", "Samosa"]
        known_vendor.assert_called_once_with("v2")

    def test_create_service_for_unknown_vendor(self, mock_supabase, writable_catalog):
        with patch(
            "core.services.catalog_service.CatalogService.get_vendor",
            side_effect=VendorNotFoundError("v99"),
        ):
            with pytest.raises(VendorNotFoundError):
                CatalogAdminService.create_service(
                    ServiceCreate(name="x", category="catering", vendor_id="v99", price=1)
                )

        query(mock_supabase).insert.assert_not_called()

    def test_create_service_database_error(self, mock_supabase, writable_catalog, known_vendor):
        query(mock_supabase).execute.side_effect = Exception("duplicate key")

        with pytest.raises(CatalogWriteError) as exc_info:
            CatalogAdminService.create_service(
                ServiceCreate(name="x", category="catering", vendor_id="v2", price=1)
            )

        assert exc_info.value.details["table"] == "services"

    def test_update_service_writes_only_sent_fields(self, mock_supabase, writable_catalog):
        query(mock_supabase).execute.return_value.data = [SERVICE_ROW]

        service = CatalogAdminService.update_service("s8", ServiceUpdate(price=800_000))

        assert service.price == 800_000
        query(mock_supabase).update.assert_called_once_with({"price": 800_000})
        query(mock_supabase).eq.assert_called_with("id", "s8")

    def test_moving_service_refreshes_vendor_name(self, mock_supabase, writable_catalog, known_vendor):
        query(mock_supabase).execute.return_value.data = [SERVICE_ROW]

        CatalogAdminService.update_service("s8", ServiceUpdate(vendor_id="v2"))

        query(mock_supabase).update.assert_called_once_with(
            {"vendor_id": "v2", "vendor_name": "Divine Catering Co."}
        )

    def test_update_missing_service(self, mock_supabase, writable_catalog):
        query(mock_supabase).execute.return_value.data = []

        with pytest.raises(ServiceNotFoundError):
            CatalogAdminService.update_service("nope", ServiceUpdate(available=False))

    def test_empty_update_is_rejected(self):
        with pytest.raises(ValidationError):
            ServiceUpdate()

    def test_delete_service(self, mock_supabase, writable_catalog):
        query(mock_supabase).execute.return_value.data = [SERVICE_ROW]

        CatalogAdminService.delete_service("s8")

        query(mock_supabase).delete.assert_called_once()
        query(mock_supabase).eq.assert_called_with("id", "s8")

    def test_delete_missing_service(self, mock_supabase, writable_catalog):
        query(mock_supabase).execute.return_value.data = []

        with pytest.raises(ServiceNotFoundError):
            CatalogAdminService.delete_service("nope")


# =============================================================================
# Vendors
# =============================================================================

class TestVendorAdmin:
    """Tests for vendor create / update / delete."""

    def test_create_vendor(self, mock_supabase, writable_catalog):
        echo_inserts(mock_supabase)

        vendor = CatalogAdminService.create_vendor(
            VendorCreate(name="Royal Décor", specialty="Event Decorations")
        )

        assert vendor.id.startswith("vendor-")
        assert vendor.rating == 4.5
        assert vendor.portfolio == []
        inserted = query(mock_supabase).insert.call_args[0][0]
        assert inserted["active"] is True
        assert inserted["verified"] is False
        mock_supabase.table.assert_called_with("vendors")

    def test_suspend_vendor(self, mock_supabase, writable_catalog):
        query(mock_supabase).execute.return_value.data = [
            {"id": "v5", "name": "SoundWave Entertainment", "active": False}
        ]

        vendor = CatalogAdminService.update_vendor("v5", VendorUpdate(active=False))

        assert vendor.id == "v5"
        query(mock_supabase).update.assert_called_once_with({"active": False})

    def test_update_missing_vendor(self, mock_supabase, writable_catalog):
        query(mock_supabase).execute.return_value.data = []

        with pytest.raises(VendorNotFoundError):
            CatalogAdminService.update_vendor("v99", VendorUpdate(verified=True))

    def test_delete_referenced_vendor(self, mock_supabase, writable_catalog):
        query(mock_supabase).execute.side_effect = Exception("violates foreign key constraint")

        with pytest.raises(CatalogWriteError) as exc_info:
            CatalogAdminService.delete_vendor("v2")

        assert exc_info.value.code == "CATALOG_WRITE_FAILED"


# =============================================================================
# Categories
# =============================================================================

class TestCategoryAdmin:
    """Tests for category create / update / delete."""

    def test_create_category(self, mock_supabase, writable_catalog):
        echo_inserts(mock_supabase)

        category = CatalogAdminService.create_category(
            CategoryCreate(id="concerts", name="Concerts", icon="Music")
        )

        assert category.id == ServiceCategory.CONCERTS
        assert query(mock_supabase).insert.call_args[0][0]["id"] == "concerts"

    def test_unknown_category_id_is_rejected(self):
        with pytest.raises(ValidationError):
            CategoryCreate(id="funerals", name="Funerals")

    def test_rename_category(self, mock_supabase, writable_catalog):
        query(mock_supabase).execute.return_value.data = [{"id": "rentals", "name": "Equipment Rentals"}]

        category = CatalogAdminService.update_category(
            ServiceCategory.RENTALS, CategoryUpdate(name="Equipment Rentals")
        )

        assert category.name == "Equipment Rentals"
        query(mock_supabase).eq.assert_called_with("id", "rentals")

    def test_delete_missing_category(self, mock_supabase, writable_catalog):
        query(mock_supabase).execute.return_value.data = []

        with pytest.raises(CategoryNotFoundError):
            CatalogAdminService.delete_category(ServiceCategory.CONCERTS)
