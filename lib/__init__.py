# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Typed Supabase wrapper for database operations
# - recommendation_parser.py: Free-text event description -> builder ids
# - utils.py: Shared utilities (error handling, UUID normalization, rounding)
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.recommendation_parser import has_valid_recommendation, parse_recommendations
from lib.utils import ApplicationError, format_price, normalize_uuid, round_half_up

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # Parser
    "parse_recommendations",
    "has_valid_recommendation",
    # Utils
    "ApplicationError",
    "format_price",
    "normalize_uuid",
    "round_half_up",
]
