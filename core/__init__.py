# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - models/: Pydantic schemas for data validation
# - data/: Static reference data (sample catalog, builder lookups)
# - services/: Package generation, catalog, storefront state, bookings
#
# Code in this package should NOT import from FastAPI routers.
# This keeps the logic testable and reusable.
# =============================================================================
