# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .catalog_service import CatalogService
from .package_service import generate_event_packages
from .store_service import Store, SupabaseEffectHandler, cart_summary, reduce
from .booking_service import BookingService
from .plan_service import EventPlanService
from .receipt_service import ReceiptService
from .discount_service import validate_discount_code
from .catalog_admin_service import CatalogAdminService

__all__ = [
    "CatalogService",
    "generate_event_packages",
    "Store",
    "SupabaseEffectHandler",
    "cart_summary",
    "reduce",
    "BookingService",
    "EventPlanService",
    "ReceiptService",
    "validate_discount_code",
    "CatalogAdminService",
]
