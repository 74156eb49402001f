# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase database operations.
# It implements the singleton pattern to reuse a single client connection
# and provides specialized methods for:
# - Reading the marketplace catalog (categories, vendors, services)
# - Seeding the catalog into a fresh project
# - Looking up promotion codes
# - Admin writes to catalog rows
#
# Bookings, event plans and receipts are written by their own services in
# core/services/, which borrow the shared client from here.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   rows = SupabaseClient.fetch_services()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from supabase import create_client, Client

from app.config import settings
from lib.utils import ApplicationError, normalize_uuid

# Set up logging for this module
logger = logging.getLogger(__name__)


class SupabaseClientError(ApplicationError):
    """
    Error during Supabase operations.

    Carries a code and a suggestion so callers can tell HOW to fix the
    problem, not just WHAT failed.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, suggestion=suggestion, details=details)

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


def is_not_found(error: Exception) -> bool:
    """True when PostgREST reports that a .single() query matched no rows."""
    return "PGRST116" in str(error)


class SupabaseClient:
    """
    Typed wrapper for Supabase database operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        services = SupabaseClient.fetch_services()
        vendors = SupabaseClient.fetch_vendors()
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        This is appropriate for server-side operations.

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached client (used by tests and after key rotation)."""
        cls._instance = None

    # -------------------------------------------------------------------------
    # Catalog
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_categories(cls) -> list[dict[str, Any]]:
        """
        Fetch all service categories ordered by name.

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table("categories")
                .select("*")
                .order("name")
                .execute()
            )
            categories = response.data or []
            logger.debug(f"Fetched {len(categories)} categories")
            return categories

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch categories: {e}",
                code="FETCH_CATEGORIES_FAILED",
                suggestion="Check that the categories table exists and is readable",
            )

    @classmethod
    def fetch_vendors(cls, active_only: bool = True) -> list[dict[str, Any]]:
        """
        Fetch vendors, best rated first.

        Args:
            active_only: Skip vendors whose `active` flag is false

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            query = client.table("vendors").select("*")
            if active_only:
                query = query.eq("active", True)
            response = query.order("rating", desc=True).execute()

            vendors = response.data or []
            logger.debug(f"Fetched {len(vendors)} vendors")
            return vendors

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch vendors: {e}",
                code="FETCH_VENDORS_FAILED",
                suggestion="Check that the vendors table exists and is readable",
                details={"active_only": active_only}
            )

    @classmethod
    def fetch_vendor(cls, vendor_id: str) -> dict[str, Any] | None:
        """
        Fetch a single vendor by ID.

        Returns:
            Vendor dict, or None if not found

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()
        vendor_id_str = normalize_uuid(vendor_id)

        try:
            response = (
                client.table("vendors")
                .select("*")
                .eq("id", vendor_id_str)
                .single()
                .execute()
            )
            return response.data

        except Exception as e:
            if is_not_found(e):
                return None
            raise SupabaseClientError(
                message=f"Failed to fetch vendor: {e}",
                code="FETCH_VENDOR_FAILED",
                details={"vendor_id": vendor_id_str}
            )

    @classmethod
    def fetch_services(cls, available_only: bool = True) -> list[dict[str, Any]]:
        """
        Fetch services, best rated first.

        Args:
            available_only: Only return services currently marked available

        Returns:
            List of service dicts (snake_case columns matching core.models.Service)

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            query = client.table("services").select("*")
            if available_only:
                query = query.eq("available", True)
            response = query.order("rating", desc=True).execute()

            services = response.data or []
            logger.debug(f"Fetched {len(services)} services")
            return services

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch services: {e}",
                code="FETCH_SERVICES_FAILED",
                suggestion="Check that the services table exists and is readable",
                details={"available_only": available_only}
            )

    # -------------------------------------------------------------------------
    # Seeding
    # -------------------------------------------------------------------------

    @classmethod
    def upsert_rows(cls, table: str, rows: list[dict[str, Any]]) -> int:
        """
        Insert or update rows keyed on their `id` column.

        Args:
            table: Table name ("categories", "vendors" or "services")
            rows: Row dicts, each with an `id`

        Returns:
            Number of rows written

        Raises:
            SupabaseClientError: If the upsert fails
        """
        if not rows:
            return 0

        client = cls.get_client()

        try:
            response = (
                client.table(table)
                .upsert(rows, on_conflict="id")
                .execute()
            )
            written = len(response.data or [])
            logger.info(f"Upserted {written} rows into {table}")
            return written

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to upsert into {table}: {e}",
                code="UPSERT_FAILED",
                suggestion=f"Check that the {table} table has an 'id' primary key",
                details={"table": table, "row_count": len(rows)}
            )

    # -------------------------------------------------------------------------
    # Promotions
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_promotion(cls, code: str) -> dict[str, Any] | None:
        """
        Fetch an active promotion by code (codes are stored upper-case).

        Returns:
            Promotion dict, or None if no active promotion has this code

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()
        code_upper = code.strip().upper()

        try:
            response = (
                client.table("promotions")
                .select("*")
                .eq("code", code_upper)
                .eq("active", True)
                .limit(1)
                .execute()
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch promotion: {e}",
                code="FETCH_PROMOTION_FAILED",
                suggestion="Check that the promotions table exists and is readable",
                details={"code": code_upper}
            )

        rows = response.data or []
        return rows[0] if rows else None

    # -------------------------------------------------------------------------
    # Catalog Administration
    # -------------------------------------------------------------------------

    @classmethod
    def insert_row(cls, table: str, row: dict[str, Any]) -> dict[str, Any]:
        """
        Insert one row and return it as stored.

        Raises:
            SupabaseClientError: If the insert fails or returns nothing
        """
        client = cls.get_client()

        try:
            response = client.table(table).insert(row).execute()
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to insert into {table}: {e}",
                code="INSERT_FAILED",
                suggestion="Check that the id is not already taken",
                details={"table": table, "id": row.get("id")}
            )

        if not response.data:
            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_NO_DATA",
                details={"table": table, "id": row.get("id")}
            )

        logger.info(f"Inserted {row.get('id')} into {table}")
        return response.data[0]

    @classmethod
    def update_row(
        cls,
        table: str,
        row_id: str,
        updates: dict[str, Any],
    ) -> dict[str, Any] | None:
        """
        Update one row by id.

        Returns:
            The updated row, or None if no row has this id

        Raises:
            SupabaseClientError: If the update fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table(table)
                .update(updates)
                .eq("id", row_id)
                .execute()
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to update {table}: {e}",
                code="UPDATE_FAILED",
                details={"table": table, "id": row_id, "fields": sorted(updates)}
            )

        if not response.data:
            return None

        logger.info(f"Updated {row_id} in {table}: {sorted(updates)}")
        return response.data[0]

    @classmethod
    def delete_row(cls, table: str, row_id: str) -> bool:
        """
        Delete one row by id.

        Returns:
            True if a row was deleted, False if no row had this id

        Raises:
            SupabaseClientError: If the delete fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table(table)
                .delete()
                .eq("id", row_id)
                .execute()
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to delete from {table}: {e}",
                code="DELETE_FAILED",
                suggestion="Rows still referenced by other tables can't be deleted",
                details={"table": table, "id": row_id}
            )

        deleted = bool(response.data)
        if deleted:
            logger.info(f"Deleted {row_id} from {table}")
        return deleted
