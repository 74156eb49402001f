# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error carries a machine-readable code and, where possible, a
# suggestion telling the client how to recover.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class EventsHubException(Exception):
    """
    Base exception for the EventsHub API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "EVENTSHUB_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Catalog Exceptions
# =============================================================================

class ServiceNotFoundError(EventsHubException):
    """Raised when a service ID doesn't exist in the catalog."""

    def __init__(self, service_id: str):
        super().__init__(
            message=f"Service not found: {service_id}",
            code="SERVICE_NOT_FOUND",
            status_code=404,
            suggestion="List available services with GET /api/v1/catalog/services",
            details={"service_id": service_id}
        )


class VendorNotFoundError(EventsHubException):
    """Raised when a vendor ID doesn't exist in the registry."""

    def __init__(self, vendor_id: str):
        super().__init__(
            message=f"Vendor not found: {vendor_id}",
            code="VENDOR_NOT_FOUND",
            status_code=404,
            suggestion="List vendors with GET /api/v1/catalog/vendors",
            details={"vendor_id": vendor_id}
        )


class CatalogUnavailableError(EventsHubException):
    """Raised when the remote catalog cannot be loaded."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Failed to load catalog: {error}",
            code="CATALOG_UNAVAILABLE",
            status_code=503,
            suggestion="Try again later or switch CATALOG_SOURCE to 'static'",
            details={"error": error}
        )


class CategoryNotFoundError(EventsHubException):
    """Raised when a category row doesn't exist."""

    def __init__(self, category_id: str):
        super().__init__(
            message=f"Category not found: {category_id}",
            code="CATEGORY_NOT_FOUND",
            status_code=404,
            suggestion="List categories with GET /api/v1/catalog/categories",
            details={"category_id": category_id}
        )


# =============================================================================
# Admin Exceptions
# =============================================================================

class AdminDisabledError(EventsHubException):
    """Raised when admin routes are called but no admin key is configured."""

    def __init__(self):
        super().__init__(
            message="Admin API is disabled",
            code="ADMIN_DISABLED",
            status_code=403,
            suggestion="Set ADMIN_API_KEY to enable the admin routes",
        )


class AdminUnauthorizedError(EventsHubException):
    """Raised when the X-Admin-Key header is missing or wrong."""

    def __init__(self):
        super().__init__(
            message="Invalid or missing admin key",
            code="ADMIN_UNAUTHORIZED",
            status_code=401,
            suggestion="Send the configured key in the X-Admin-Key header",
        )


class CatalogReadOnlyError(EventsHubException):
    """Raised on admin writes while the bundled sample catalog is in use."""

    def __init__(self):
        super().__init__(
            message="The bundled sample catalog is read-only",
            code="CATALOG_READ_ONLY",
            status_code=409,
            suggestion="Set CATALOG_SOURCE=supabase to manage the catalog",
        )


class CatalogWriteError(EventsHubException):
    """Raised when an admin write to the catalog tables fails."""

    def __init__(self, table: str, error: str):
        super().__init__(
            message=f"Failed to write to {table}: {error}",
            code="CATALOG_WRITE_FAILED",
            status_code=500,
            suggestion="Check the row for duplicate ids or rows that still reference it",
            details={"table": table, "error": error}
        )


# =============================================================================
# Booking / Plan Exceptions
# =============================================================================

class BookingNotFoundError(EventsHubException):
    """Raised when a booking ID doesn't exist."""

    def __init__(self, booking_id: str):
        super().__init__(
            message=f"Booking not found: {booking_id}",
            code="BOOKING_NOT_FOUND",
            status_code=404,
            suggestion="Check that the booking_id is correct",
            details={"booking_id": booking_id}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def eventshub_exception_handler(
    request: Request,
    exc: EventsHubException
) -> JSONResponse:
    """
    Convert EventsHubException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )
