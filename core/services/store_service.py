# =============================================================================
# core/services/store_service.py - Storefront State Transitions
# =============================================================================
# Cart, wishlist, bookings and saved plans.
#
# State changes and persistence are kept apart:
# - reduce(state, action) is pure: it returns the next state and a list of
#   effects describing what must be written to the database
# - Store.dispatch() commits the new state, then hands each effect to an
#   EffectHandler (SupabaseEffectHandler in production)
#
# Usage:
#   store = Store(effect_handler=SupabaseEffectHandler())
#   store.dispatch(AddToCart(service=service, quantity=2))
#   cart_summary(store.state.cart).grand_total
# =============================================================================

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable, Sequence

from core.models.store import (
    Action,
    AddBooking,
    AddPackageToCart,
    AddSavedPlan,
    AddToCart,
    AddToWishlist,
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
    SetSearchQuery,
    SetSelectedCategory,
    StoreState,
    Transition,
    UpdateBookingStatus,
    UpdateCartQuantity,
)
from core.models.catalog import Service
from lib.utils import ApplicationError, round_half_up

logger = logging.getLogger(__name__)

DEFAULT_SERVICE_FEE_PERCENT = 5


class UnknownActionError(ApplicationError):
    """Raised when reduce() receives something that isn't a store action."""

    def __init__(self, action: object):
        super().__init__(
            message=f"Unknown store action: {type(action).__name__}",
            code="UNKNOWN_ACTION",
            suggestion="Dispatch one of the action models from core.models.store",
        )


# =============================================================================
# Cart Helpers
# =============================================================================

def _add_service(cart: list[CartItem], service: Service, quantity: int) -> list[CartItem]:
    """Add a service, merging quantities if it is already in the cart."""
    if any(item.service.id == service.id for item in cart):
        return [
            item.model_copy(update={"quantity": item.quantity + quantity})
            if item.service.id == service.id else item
            for item in cart
        ]
    return [*cart, CartItem(service=service, quantity=quantity)]


# =============================================================================
# Transition Handlers
# =============================================================================
# Each handler takes the current state and an action and returns a Transition.

def _login(state: StoreState, action: Login) -> Transition:
    return Transition(state=state.model_copy(update={"user": action.user}))


def _logout(state: StoreState, action: Logout) -> Transition:
    # Wishlist and saved plans survive a logout; cart and bookings do not
    return Transition(state=state.model_copy(update={"user": None, "cart": [], "bookings": []}))


def _add_to_cart(state: StoreState, action: AddToCart) -> Transition:
    cart = _add_service(state.cart, action.service, action.quantity)
    return Transition(state=state.model_copy(update={"cart": cart}))


def _add_package_to_cart(state: StoreState, action: AddPackageToCart) -> Transition:
    cart = state.cart
    for service in action.package.services:
        cart = _add_service(cart, service, 1)
    return Transition(state=state.model_copy(update={"cart": cart}))


def _remove_from_cart(state: StoreState, action: RemoveFromCart) -> Transition:
    cart = [item for item in state.cart if item.service.id != action.service_id]
    return Transition(state=state.model_copy(update={"cart": cart}))


def _update_cart_quantity(state: StoreState, action: UpdateCartQuantity) -> Transition:
    if action.quantity <= 0:
        return _remove_from_cart(state, RemoveFromCart(service_id=action.service_id))
    cart = [
        item.model_copy(update={"quantity": action.quantity})
        if item.service.id == action.service_id else item
        for item in state.cart
    ]
    return Transition(state=state.model_copy(update={"cart": cart}))


def _clear_cart(state: StoreState, action: ClearCart) -> Transition:
    return Transition(state=state.model_copy(update={"cart": []}))


def _add_to_wishlist(state: StoreState, action: AddToWishlist) -> Transition:
    if is_in_wishlist(state, action.service.id):
        return Transition(state=state)
    wishlist = [*state.wishlist, action.service]
    return Transition(state=state.model_copy(update={"wishlist": wishlist}))


def _remove_from_wishlist(state: StoreState, action: RemoveFromWishlist) -> Transition:
    wishlist = [s for s in state.wishlist if s.id != action.service_id]
    return Transition(state=state.model_copy(update={"wishlist": wishlist}))


def _add_booking(state: StoreState, action: AddBooking) -> Transition:
    bookings = [*state.bookings, action.booking]
    user_id = state.user.id if state.user else None
    return Transition(
        state=state.model_copy(update={"bookings": bookings}),
        effects=[PersistBooking(user_id=user_id, booking=action.booking)],
    )


def _update_booking_status(state: StoreState, action: UpdateBookingStatus) -> Transition:
    bookings = [
        b.model_copy(update={"status": action.status}) if b.id == action.booking_id else b
        for b in state.bookings
    ]
    return Transition(
        state=state.model_copy(update={"bookings": bookings}),
        effects=[PersistBookingStatus(booking_id=action.booking_id, status=action.status)],
    )


def _add_saved_plan(state: StoreState, action: AddSavedPlan) -> Transition:
    saved_plans = [*state.saved_plans, action.plan]
    user_id = state.user.id if state.user else None
    return Transition(
        state=state.model_copy(update={"saved_plans": saved_plans}),
        effects=[PersistSavedPlan(user_id=user_id, plan=action.plan)],
    )


def _remove_saved_plan(state: StoreState, action: RemoveSavedPlan) -> Transition:
    saved_plans = [p for p in state.saved_plans if p.id != action.plan_id]
    return Transition(
        state=state.model_copy(update={"saved_plans": saved_plans}),
        effects=[DeleteSavedPlan(plan_id=action.plan_id)],
    )


def _set_search_query(state: StoreState, action: SetSearchQuery) -> Transition:
    return Transition(state=state.model_copy(update={"search_query": action.query}))


def _set_selected_category(state: StoreState, action: SetSelectedCategory) -> Transition:
    return Transition(state=state.model_copy(update={"selected_category": action.category}))


_HANDLERS: dict[type, Callable[[StoreState, Action], Transition]] = {
    Login: _login,
    Logout: _logout,
    AddToCart: _add_to_cart,
    AddPackageToCart: _add_package_to_cart,
    RemoveFromCart: _remove_from_cart,
    UpdateCartQuantity: _update_cart_quantity,
    ClearCart: _clear_cart,
    AddToWishlist: _add_to_wishlist,
    RemoveFromWishlist: _remove_from_wishlist,
    AddBooking: _add_booking,
    UpdateBookingStatus: _update_booking_status,
    AddSavedPlan: _add_saved_plan,
    RemoveSavedPlan: _remove_saved_plan,
    SetSearchQuery: _set_search_query,
    SetSelectedCategory: _set_selected_category,
}


def reduce(state: StoreState, action: Action) -> Transition:
    """
    Apply one action to a state.

    Pure function: `state` is left untouched and nothing is written to the
    database. Persistence work is returned as `Transition.effects`.

    Raises:
        UnknownActionError: If `action` is not a store action model
    """
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise UnknownActionError(action)
    return handler(state, action)


# =============================================================================
# Queries
# =============================================================================

def is_in_wishlist(state: StoreState, service_id: str) -> bool:
    return any(s.id == service_id for s in state.wishlist)


def cart_total(state: StoreState) -> int:
    """Sum of price x quantity over the cart (no fees)."""
    return sum(item.line_total for item in state.cart)


def cart_summary(
    items: Sequence[CartItem],
    fee_percent: int = DEFAULT_SERVICE_FEE_PERCENT,
    discount_code: str | None = None,
    now: datetime | None = None,
) -> CartSummary:
    """
    Price a cart.

    The service fee is `fee_percent` of the subtotal, rounded half-up to a
    whole Naira. A discount code is checked against the subtotal; a
    rejected code prices the cart without a discount and reports why in
    `discount_message`.

    Example:
        cart_summary([CartItem(service=catering, quantity=1)]).service_fee  # 37500
    """
    lines = [
        CartLine(
            service_id=item.service.id,
            name=item.service.name,
            unit_price=item.service.price,
            quantity=item.quantity,
            total=item.line_total,
        )
        for item in items
    ]
    subtotal = sum(line.total for line in lines)
    service_fee = int(round_half_up(subtotal * fee_percent / 100))

    discount = 0
    discount_message = None
    if discount_code:
        # Imported here so reduce() stays importable without settings
        from core.services.discount_service import validate_discount_code

        result = validate_discount_code(discount_code, subtotal, now=now)
        discount = result.discount
        discount_message = result.message
        discount_code = result.code or discount_code.strip().upper()

    return CartSummary(
        lines=lines,
        subtotal=subtotal,
        discount=discount,
        discount_code=discount_code or None,
        discount_message=discount_message,
        service_fee=service_fee,
        grand_total=subtotal - discount + service_fee,
    )


# =============================================================================
# Effect Handling
# =============================================================================

class EffectHandler(ABC):
    """Executes persistence effects produced by reduce()."""

    @abstractmethod
    def handle(self, effect: Effect) -> None:
        ...


class SupabaseEffectHandler(EffectHandler):
    """Writes bookings and saved plans through the Supabase-backed services."""

    def handle(self, effect: Effect) -> None:
        # Imported here so reduce() stays importable without a database
        from core.services.booking_service import BookingService
        from core.services.plan_service import EventPlanService

        if isinstance(effect, PersistBooking):
            BookingService.create_booking(effect.booking, user_id=effect.user_id)
        elif isinstance(effect, PersistBookingStatus):
            BookingService.update_booking_status(effect.booking_id, effect.status)
        elif isinstance(effect, PersistSavedPlan):
            EventPlanService.create_plan(effect.plan, user_id=effect.user_id)
        elif isinstance(effect, DeleteSavedPlan):
            EventPlanService.delete_plan(effect.plan_id)
        else:
            raise TypeError(f"Unsupported effect: {type(effect).__name__}")


class Store:
    """
    Holds the current StoreState and runs effects after each transition.

    Without an effect handler, effects are queued in `pending_effects`
    until flush() is called with one.
    """

    def __init__(
        self,
        state: StoreState | None = None,
        effect_handler: EffectHandler | None = None,
    ):
        self._state = state or StoreState()
        self._effect_handler = effect_handler
        self.pending_effects: list[Effect] = []

    @property
    def state(self) -> StoreState:
        return self._state

    def dispatch(self, action: Action) -> StoreState:
        """
        Apply an action, then run its effects.

        The new state is committed before any effect runs. If an effect
        fails, the error is logged and re-raised; the state change stands
        and the remaining effects stay queued.

        Returns:
            The new state
        """
        transition = reduce(self._state, action)
        self._state = transition.state
        self.pending_effects.extend(transition.effects)

        if self._effect_handler is not None:
            self.flush(self._effect_handler)

        return self._state

    def flush(self, effect_handler: EffectHandler) -> int:
        """
        Run queued effects in order.

        Returns:
            Number of effects executed
        """
        executed = 0
        while self.pending_effects:
            effect = self.pending_effects[0]
            try:
                effect_handler.handle(effect)
            except Exception as e:
                logger.error(f"Effect {effect.type} failed: {e}")
                raise
            self.pending_effects.pop(0)
            executed += 1
        return executed
