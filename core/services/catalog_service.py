# =============================================================================
# core/services/catalog_service.py - Catalog Business Logic
# =============================================================================
# Read access to categories, vendors and services, plus search.
# The catalog comes either from the bundled sample data or from Supabase,
# depending on settings.CATALOG_SOURCE.
# =============================================================================

import logging
from typing import Any, Sequence

from pydantic import ValidationError

from app.config import settings
from app.exceptions import (
    CatalogUnavailableError,
    ServiceNotFoundError,
    VendorNotFoundError,
)
from core.data.builder import (
    BUDGET_RANGES,
    COLOR_PALETTES,
    EVENT_THEMES,
    EVENT_TYPE_CATEGORIES,
    GUEST_SIZE_RANGES,
    VENUE_TYPES,
)
from core.data.catalog import CATEGORIES, SERVICES, VENDORS
from core.models.builder import BuilderOptions
from core.models.catalog import Category, Service, Vendor
from lib.supabase_client import SupabaseClient, SupabaseClientError

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Service for catalog lookups.

    Provides a clean interface between API routes and the catalog source.
    """

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    @staticmethod
    def _validate_rows(rows: list[dict[str, Any]], model: type, kind: str) -> list:
        """Validate raw rows, skipping (and logging) any that don't fit the model."""
        valid = []
        for row in rows:
            try:
                valid.append(model.model_validate(row))
            except ValidationError as e:
                logger.warning(f"Skipping invalid {kind} row {row.get('id')!r}: {e.error_count()} errors")
        return valid

    @staticmethod
    def list_categories() -> list[Category]:
        if not settings.uses_supabase_catalog:
            return list(CATEGORIES)
        try:
            rows = SupabaseClient.fetch_categories()
        except SupabaseClientError as e:
            raise CatalogUnavailableError(e.message)
        return CatalogService._validate_rows(rows, Category, "category")

    @staticmethod
    def list_vendors() -> list[Vendor]:
        if not settings.uses_supabase_catalog:
            return list(VENDORS)
        try:
            rows = SupabaseClient.fetch_vendors()
        except SupabaseClientError as e:
            raise CatalogUnavailableError(e.message)
        return CatalogService._validate_rows(rows, Vendor, "vendor")

    @staticmethod
    def list_services() -> list[Service]:
        """
        All services in the catalog.

        The bundled catalog is returned in its defined order (unavailable
        services included); Supabase returns available services, best rated
        first.
        """
        if not settings.uses_supabase_catalog:
            return list(SERVICES)
        try:
            rows = SupabaseClient.fetch_services()
        except SupabaseClientError as e:
            raise CatalogUnavailableError(e.message)
        return CatalogService._validate_rows(rows, Service, "service")

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    @staticmethod
    def get_service(service_id: str, services: Sequence[Service] | None = None) -> Service:
        """
        Get a service by ID.

        Raises:
            ServiceNotFoundError: If no service has this id
        """
        catalog = CatalogService.list_services() if services is None else services
        for service in catalog:
            if service.id == service_id:
                return service
        raise ServiceNotFoundError(service_id)

    @staticmethod
    def get_vendor(vendor_id: str) -> Vendor:
        """
        Get a vendor by ID.

        Raises:
            VendorNotFoundError: If no vendor has this id
        """
        if settings.uses_supabase_catalog:
            try:
                row = SupabaseClient.fetch_vendor(vendor_id)
            except SupabaseClientError as e:
                raise CatalogUnavailableError(e.message)
            if row is None:
                raise VendorNotFoundError(vendor_id)
            return Vendor.model_validate(row)

        for vendor in VENDORS:
            if vendor.id == vendor_id:
                return vendor
        raise VendorNotFoundError(vendor_id)

    @staticmethod
    def services_by_category(category_id: str) -> list[Service]:
        return [s for s in CatalogService.list_services() if s.category == category_id]

    @staticmethod
    def services_by_vendor(vendor_id: str) -> list[Service]:
        return [s for s in CatalogService.list_services() if s.vendor_id == vendor_id]

    @staticmethod
    def search_services(query: str = "", category_id: str | None = None) -> list[Service]:
        """
        Search services by free text, optionally within one category.

        Matching is a case-insensitive substring test against the service
        name, description, vendor name and category id.

        Args:
            query: Text to look for (empty matches everything)
            category_id: Restrict to this category first

        Returns:
            Matching services in catalog order
        """
        results = CatalogService.list_services()

        if category_id:
            results = [s for s in results if s.category == category_id]

        if query:
            needle = query.lower()
            results = [
                s for s in results
                if needle in s.name.lower()
                or needle in s.description.lower()
                or needle in s.vendor_name.lower()
                or needle in s.category.value.lower()
            ]

        return results

    # -------------------------------------------------------------------------
    # Builder Options
    # -------------------------------------------------------------------------

    @staticmethod
    def builder_options() -> BuilderOptions:
        """Every lookup table offered by the event builder."""
        return BuilderOptions(
            event_types=EVENT_TYPE_CATEGORIES,
            themes=EVENT_THEMES,
            color_palettes=COLOR_PALETTES,
            guest_sizes=GUEST_SIZE_RANGES,
            venue_types=VENUE_TYPES,
            budgets=BUDGET_RANGES,
        )
