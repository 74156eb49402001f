# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application:
# - UUID normalization for Supabase queries
# - Naira price formatting and half-up rounding
# - ApplicationError base class
# =============================================================================

import math
from typing import Any
from uuid import UUID


# =============================================================================
# UUID Utilities
# =============================================================================

def normalize_uuid(value: str | UUID) -> str:
    """
    Normalize a UUID to string format.

    Example:
        booking_id = normalize_uuid(uuid_obj)  # "550e8400-..."
        booking_id = normalize_uuid("550e8400-...")  # "550e8400-..."
    """
    return str(value) if isinstance(value, UUID) else value


# =============================================================================
# Money & Rounding
# =============================================================================

def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round a non-negative number half-up (2.5 -> 3, 4.85 -> 4.9).

    Python's round() uses banker's rounding, which would turn 0.5 into 0.
    Prices and ratings here are always shown rounded away from the midpoint.

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        Rounded value (float; use int() for whole amounts)
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def format_price(amount: int | float) -> str:
    """
    Format a whole-Naira amount for display.

    Example:
        format_price(1500000)  # "₦1,500,000"
    """
    return f"₦{int(round_half_up(amount)):,}"


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for application-specific errors.

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging

    Example:
        class MyServiceError(ApplicationError):
            def __init__(self, message: str, **kwargs):
                super().__init__(message, code="MY_SERVICE_ERROR", **kwargs)
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "code": self.code,
            "message": self.message,
            "suggestion": self.suggestion,
            "details": self.details,
        }
