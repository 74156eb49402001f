# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - catalog.py: Categories, vendors and services
# - builder.py: Event builder options and package generation
# - planner.py: Free-text event description parsing
# - cart.py: Cart pricing
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import catalog
from . import builder
from . import planner
from . import cart

__all__ = [
    "health",
    "catalog",
    "builder",
    "planner",
    "cart",
]
