# =============================================================================
# core/data/ - Static Reference Data
# =============================================================================
# - catalog.py: Sample categories, vendors and services
# - builder.py: Event builder lookup tables
# - promotions.py: Sample discount codes
# =============================================================================
