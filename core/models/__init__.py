# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - catalog.py: Categories, vendors and services
# - builder.py: Event builder lookups and generated packages
# - store.py: Shopper state, actions and persistence effects
# - receipt.py: Stored receipts
# - promotion.py: Discount codes
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Catalog Models
# -----------------------------------------------------------------------------
from .catalog import (
    Category,
    CategoryCreate,
    CategoryUpdate,
    PriceType,
    Service,
    ServiceCategory,
    ServiceCreate,
    ServiceUpdate,
    Vendor,
    VendorCreate,
    VendorUpdate,
)

# -----------------------------------------------------------------------------
# Builder Models
# -----------------------------------------------------------------------------
from .builder import (
    BudgetRange,
    BuilderOptions,
    ColorPalette,
    EventTheme,
    EventTypeCategory,
    GeneratedPackage,
    GuestSizeRange,
    PackageRequest,
    PackageTier,
    Recommendation,
    VenueType,
)

# -----------------------------------------------------------------------------
# Store Models
# -----------------------------------------------------------------------------
from .store import (
    Action,
    AddBooking,
    AddPackageToCart,
    AddSavedPlan,
    AddToCart,
    AddToWishlist,
    Booking,
    BookingStatus,
    CartItem,
    CartLine,
    CartSummary,
    ClearCart,
    DeleteSavedPlan,
    Effect,
    Login,
    Logout,
    PersistBooking,
    PersistBookingStatus,
    PersistSavedPlan,
    RemoveFromCart,
    RemoveFromWishlist,
    RemoveSavedPlan,
    SavedPlan,
    SetSearchQuery,
    SetSelectedCategory,
    StoreState,
    Transition,
    UpdateBookingStatus,
    UpdateCartQuantity,
    User,
)

# -----------------------------------------------------------------------------
# Receipt Models
# -----------------------------------------------------------------------------
from .receipt import (
    Receipt,
    ReceiptCreate,
    ReceiptItem,
    ReceiptStatus,
)

# -----------------------------------------------------------------------------
# Promotion Models
# -----------------------------------------------------------------------------
from .promotion import (
    DiscountCode,
    DiscountResult,
    DiscountType,
)

__all__ = [
    # Catalog
    "Category",
    "CategoryCreate",
    "CategoryUpdate",
    "PriceType",
    "Service",
    "ServiceCategory",
    "ServiceCreate",
    "ServiceUpdate",
    "Vendor",
    "VendorCreate",
    "VendorUpdate",
    # Builder
    "BudgetRange",
    "BuilderOptions",
    "ColorPalette",
    "EventTheme",
    "EventTypeCategory",
    "GeneratedPackage",
    "GuestSizeRange",
    "PackageRequest",
    "PackageTier",
    "Recommendation",
    "VenueType",
    # Store
    "Action",
    "AddBooking",
    "AddPackageToCart",
    "AddSavedPlan",
    "AddToCart",
    "AddToWishlist",
    "Booking",
    "BookingStatus",
    "CartItem",
    "CartLine",
    "CartSummary",
    "ClearCart",
    "DeleteSavedPlan",
    "Effect",
    "Login",
    "Logout",
    "PersistBooking",
    "PersistBookingStatus",
    "PersistSavedPlan",
    "RemoveFromCart",
    "RemoveFromWishlist",
    "RemoveSavedPlan",
    "SavedPlan",
    "SetSearchQuery",
    "SetSelectedCategory",
    "StoreState",
    "Transition",
    "UpdateBookingStatus",
    "UpdateCartQuantity",
    "User",
    # Receipt
    "Receipt",
    "ReceiptCreate",
    "ReceiptItem",
    "ReceiptStatus",
    # Promotion
    "DiscountCode",
    "DiscountResult",
    "DiscountType",
]
