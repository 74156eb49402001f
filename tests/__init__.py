# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the EventsHub API:
# - test_package_service.py: Budget-tiered package generator
# - test_store_service.py: Storefront reducer, cart pricing, effects
# - test_catalog_service.py: Catalog lookups and search
# - test_recommendation_parser.py: Free-text description parsing
# - test_persistence_services.py: Bookings, saved plans, receipts (mocked DB)
# - test_models.py: Pydantic model validation
# - test_api.py: HTTP endpoints
#
# Run tests with: pytest
# =============================================================================
