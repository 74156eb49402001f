# =============================================================================
# core/models/store.py - Storefront State Schemas
# =============================================================================
# These models describe the shopper's session state and the messages that
# change it:
# - StoreState: user, cart, wishlist, bookings, saved plans, search
# - Actions: Requests for a state transition (AddToCart, AddBooking, ...)
# - Effects: Persistence work to run after a transition (PersistBooking, ...)
#
# Transitions are computed by core.services.store_service.reduce(), which
# never touches the database. Effects are executed separately.
# =============================================================================

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from .builder import GeneratedPackage
from .catalog import Service


# =============================================================================
# State Records
# =============================================================================

class User(BaseModel):
    id: str
    name: str
    email: str
    avatar: str | None = None

    model_config = {"frozen": True}


class CartItem(BaseModel):
    """A service in the cart with its quantity and optional event details."""

    service: Service
    quantity: int = Field(default=1, ge=1)
    event_date: str | None = None
    event_type: str | None = None
    notes: str | None = None

    model_config = {"frozen": True}

    @property
    def line_total(self) -> int:
        return self.service.price * self.quantity


class BookingStatus(str, Enum):
    """
    Lifecycle of a booking.

    Flow: pending -> confirmed -> in-progress -> completed
    Any state before completed may move to cancelled.
    """
    PENDING = "pending"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Booking(BaseModel):
    id: str
    services: list[CartItem] = Field(default_factory=list)
    event_type: str
    event_date: str
    venue: str = ""
    budget: int = Field(default=0, ge=0)
    guest_count: int = Field(default=0, ge=0)
    status: BookingStatus = BookingStatus.PENDING
    total_amount: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    customer_name: str = ""
    customer_email: str = ""
    customer_phone: str = ""

    model_config = {"frozen": True}


class SavedPlan(BaseModel):
    """An event-builder session kept for later, with its generated packages."""

    id: str
    name: str
    event_type: str
    theme: str = ""
    color_palette: str = ""
    guest_size: str = ""
    venue_type: str = ""
    budget: str = ""
    event_date: str | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    packages: list[GeneratedPackage] = Field(default_factory=list)

    model_config = {"frozen": True}


class StoreState(BaseModel):
    """
    Complete shopper state.

    Instances are never modified in place; every transition returns a new
    StoreState.
    """

    user: User | None = None
    cart: list[CartItem] = Field(default_factory=list)
    wishlist: list[Service] = Field(default_factory=list)
    bookings: list[Booking] = Field(default_factory=list)
    saved_plans: list[SavedPlan] = Field(default_factory=list)
    search_query: str = ""
    selected_category: str | None = None

    model_config = {"frozen": True}

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None


# =============================================================================
# Actions
# =============================================================================

class Login(BaseModel):
    type: Literal["login"] = "login"
    user: User


class Logout(BaseModel):
    type: Literal["logout"] = "logout"


class AddToCart(BaseModel):
    type: Literal["add_to_cart"] = "add_to_cart"
    service: Service
    quantity: int = Field(default=1, ge=1)


class AddPackageToCart(BaseModel):
    type: Literal["add_package_to_cart"] = "add_package_to_cart"
    package: GeneratedPackage


class RemoveFromCart(BaseModel):
    type: Literal["remove_from_cart"] = "remove_from_cart"
    service_id: str


class UpdateCartQuantity(BaseModel):
    type: Literal["update_cart_quantity"] = "update_cart_quantity"
    service_id: str
    quantity: int


class ClearCart(BaseModel):
    type: Literal["clear_cart"] = "clear_cart"


class AddToWishlist(BaseModel):
    type: Literal["add_to_wishlist"] = "add_to_wishlist"
    service: Service


class RemoveFromWishlist(BaseModel):
    type: Literal["remove_from_wishlist"] = "remove_from_wishlist"
    service_id: str


class AddBooking(BaseModel):
    type: Literal["add_booking"] = "add_booking"
    booking: Booking


class UpdateBookingStatus(BaseModel):
    type: Literal["update_booking_status"] = "update_booking_status"
    booking_id: str
    status: BookingStatus


class AddSavedPlan(BaseModel):
    type: Literal["add_saved_plan"] = "add_saved_plan"
    plan: SavedPlan


class RemoveSavedPlan(BaseModel):
    type: Literal["remove_saved_plan"] = "remove_saved_plan"
    plan_id: str


class SetSearchQuery(BaseModel):
    type: Literal["set_search_query"] = "set_search_query"
    query: str


class SetSelectedCategory(BaseModel):
    type: Literal["set_selected_category"] = "set_selected_category"
    category: str | None = None


Action = Annotated[
    Union[
        Login,
        Logout,
        AddToCart,
        AddPackageToCart,
        RemoveFromCart,
        UpdateCartQuantity,
        ClearCart,
        AddToWishlist,
        RemoveFromWishlist,
        AddBooking,
        UpdateBookingStatus,
        AddSavedPlan,
        RemoveSavedPlan,
        SetSearchQuery,
        SetSelectedCategory,
    ],
    Field(discriminator="type"),
]


# =============================================================================
# Effects
# =============================================================================

class PersistBooking(BaseModel):
    type: Literal["persist_booking"] = "persist_booking"
    user_id: str | None = None
    booking: Booking


class PersistBookingStatus(BaseModel):
    type: Literal["persist_booking_status"] = "persist_booking_status"
    booking_id: str
    status: BookingStatus


class PersistSavedPlan(BaseModel):
    type: Literal["persist_saved_plan"] = "persist_saved_plan"
    user_id: str | None = None
    plan: SavedPlan


class DeleteSavedPlan(BaseModel):
    type: Literal["delete_saved_plan"] = "delete_saved_plan"
    plan_id: str


Effect = Annotated[
    Union[PersistBooking, PersistBookingStatus, PersistSavedPlan, DeleteSavedPlan],
    Field(discriminator="type"),
]


class Transition(BaseModel):
    """Result of applying one action: the next state plus pending effects."""

    state: StoreState
    effects: list[Effect] = Field(default_factory=list)


class CartLine(BaseModel):
    service_id: str
    name: str
    unit_price: int
    quantity: int
    total: int


class CartSummary(BaseModel):
    """
    Priced cart.

    The discount comes off the subtotal; the service fee is charged on the
    subtotal before any discount.

    Example:
        {"subtotal": 750000, "discount": 75000, "service_fee": 37500, "grand_total": 712500}
    """

    lines: list[CartLine] = Field(default_factory=list)
    subtotal: int = 0
    discount: int = 0
    discount_code: str | None = None
    discount_message: str | None = None
    service_fee: int = 0
    grand_total: int = 0
