# =============================================================================
# core/services/catalog_admin_service.py - Catalog Back-Office
# =============================================================================
# Create, update and delete categories, vendors and services in Supabase.
#
# Writes only make sense when the catalog is read from Supabase; with the
# bundled sample catalog every write is refused with CatalogReadOnlyError.
# =============================================================================

import logging
from typing import Any
from uuid import uuid4

from app.config import settings
from app.exceptions import (
    CatalogReadOnlyError,
    CatalogWriteError,
    CategoryNotFoundError,
    ServiceNotFoundError,
    VendorNotFoundError,
)
from core.models.catalog import (
    Category,
    CategoryCreate,
    CategoryUpdate,
    Service,
    ServiceCategory,
    ServiceCreate,
    ServiceUpdate,
    Vendor,
    VendorCreate,
    VendorUpdate,
)
from core.services.catalog_service import CatalogService
from lib.supabase_client import SupabaseClient, SupabaseClientError

logger = logging.getLogger(__name__)

# New listings start here until real reviews come in
NEW_LISTING_RATING = 4.5


def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex[:12]}"


class CatalogAdminService:
    """
    Service for catalog writes.

    Every method raises CatalogReadOnlyError unless CATALOG_SOURCE is
    "supabase", and CatalogWriteError when the database rejects a write.
    """

    # -------------------------------------------------------------------------
    # Plumbing
    # -------------------------------------------------------------------------

    @staticmethod
    def _require_writable() -> None:
        if not settings.uses_supabase_catalog:
            raise CatalogReadOnlyError()

    @staticmethod
    def _insert(table: str, row: dict[str, Any]) -> dict[str, Any]:
        CatalogAdminService._require_writable()
        try:
            return SupabaseClient.insert_row(table, row)
        except SupabaseClientError as e:
            logger.error(f"Admin insert into {table} failed: {e}")
            raise CatalogWriteError(table, e.message)

    @staticmethod
    def _update(table: str, row_id: str, updates: dict[str, Any]) -> dict[str, Any] | None:
        CatalogAdminService._require_writable()
        try:
            return SupabaseClient.update_row(table, row_id, updates)
        except SupabaseClientError as e:
            logger.error(f"Admin update of {table}/{row_id} failed: {e}")
            raise CatalogWriteError(table, e.message)

    @staticmethod
    def _delete(table: str, row_id: str) -> bool:
        CatalogAdminService._require_writable()
        try:
            return SupabaseClient.delete_row(table, row_id)
        except SupabaseClientError as e:
            logger.error(f"Admin delete of {table}/{row_id} failed: {e}")
            raise CatalogWriteError(table, e.message)

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    @staticmethod
    def create_service(params: ServiceCreate) -> Service:
        """
        Add a service listing.

        The vendor name is copied from the vendor record; rating starts at
        4.5 with no reviews.

        Raises:
            VendorNotFoundError: If vendor_id is unknown
        """
        CatalogAdminService._require_writable()
        vendor = CatalogService.get_vendor(params.vendor_id)

        row = {
            "id": _new_id("service"),
            **params.model_dump(mode="json"),
            "vendor_name": vendor.name,
            "rating": NEW_LISTING_RATING,
            "review_count": 0,
        }
        return Service.model_validate(CatalogAdminService._insert("services", row))

    @staticmethod
    def update_service(service_id: str, params: ServiceUpdate) -> Service:
        """
        Change some fields of a service.

        Moving a service to another vendor refreshes its vendor name.

        Raises:
            ServiceNotFoundError: If no service has this id
            VendorNotFoundError: If the new vendor_id is unknown
        """
        CatalogAdminService._require_writable()
        updates = params.changes()
        if "vendor_id" in updates:
            updates["vendor_name"] = CatalogService.get_vendor(updates["vendor_id"]).name

        row = CatalogAdminService._update("services", service_id, updates)
        if row is None:
            raise ServiceNotFoundError(service_id)
        return Service.model_validate(row)

    @staticmethod
    def delete_service(service_id: str) -> None:
        if not CatalogAdminService._delete("services", service_id):
            raise ServiceNotFoundError(service_id)

    # -------------------------------------------------------------------------
    # Vendors
    # -------------------------------------------------------------------------

    @staticmethod
    def create_vendor(params: VendorCreate) -> Vendor:
        row = {
            "id": _new_id("vendor"),
            **params.model_dump(mode="json"),
            "portfolio": [],
            "rating": NEW_LISTING_RATING,
            "review_count": 0,
        }
        return Vendor.model_validate(CatalogAdminService._insert("vendors", row))

    @staticmethod
    def update_vendor(vendor_id: str, params: VendorUpdate) -> Vendor:
        """
        Change some fields of a vendor.

        Services keep the vendor name they were saved with.

        Raises:
            VendorNotFoundError: If no vendor has this id
        """
        row = CatalogAdminService._update("vendors", vendor_id, params.changes())
        if row is None:
            raise VendorNotFoundError(vendor_id)
        return Vendor.model_validate(row)

    @staticmethod
    def delete_vendor(vendor_id: str) -> None:
        if not CatalogAdminService._delete("vendors", vendor_id):
            raise VendorNotFoundError(vendor_id)

    # -------------------------------------------------------------------------
    # Categories
    # -------------------------------------------------------------------------

    @staticmethod
    def create_category(params: CategoryCreate) -> Category:
        row = params.model_dump(mode="json")
        return Category.model_validate(CatalogAdminService._insert("categories", row))

    @staticmethod
    def update_category(category_id: ServiceCategory, params: CategoryUpdate) -> Category:
        row = CatalogAdminService._update("categories", category_id.value, params.changes())
        if row is None:
            raise CategoryNotFoundError(category_id.value)
        return Category.model_validate(row)

    @staticmethod
    def delete_category(category_id: ServiceCategory) -> None:
        if not CatalogAdminService._delete("categories", category_id.value):
            raise CategoryNotFoundError(category_id.value)
