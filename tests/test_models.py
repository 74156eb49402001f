# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the models to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Frozen records cannot be modified
# - Actions parse from JSON through their `type` tag
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import TypeAdapter, ValidationError

from core.models import (
    Action,
    AddToCart,
    BookingStatus,
    BudgetRange,
    CartItem,
    GeneratedPackage,
    GuestSizeRange,
    PackageTier,
    PriceType,
    ReceiptCreate,
    Service,
    ServiceCategory,
    StoreState,
    UpdateBookingStatus,
)


SERVICE_DATA = {
    "id": "s8",
    "name": "Premium Wedding Catering",
    "category": "catering",
    "price": 750000,
    "rating": 4.9,
    "vendor_id": "v2",
    "features": ["3-Course Meal", "Service Staff"],
}


# =============================================================================
# Catalog Model Tests
# =============================================================================

class TestService:
    """Tests for the Service model."""

    def test_valid_service(self):
        service = Service(**SERVICE_DATA)

        assert service.category == ServiceCategory.CATERING
        assert service.price_type == PriceType.STARTING
        assert service.available is True

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            Service(**{**SERVICE_DATA, "category": "fireworks"})

    @pytest.mark.parametrize("field,value", [
        ("price", -1),
        ("rating", 5.1),
        ("rating", -0.1),
        ("id", ""),
    ])
    def test_out_of_range_values_rejected(self, field, value):
        with pytest.raises(ValidationError):
            Service(**{**SERVICE_DATA, field: value})

    def test_service_is_frozen(self):
        service = Service(**SERVICE_DATA)

        with pytest.raises(ValidationError):
            service.price = 1


# =============================================================================
# Builder Model Tests
# =============================================================================

class TestRanges:
    """Tests for the range lookups."""

    def test_budget_range_bounds_are_inclusive(self):
        budget = BudgetRange(id="moderate", label="Moderate", min=500_000, max=1_500_000)

        assert budget.contains(500_000)
        assert budget.contains(1_500_000)
        assert not budget.contains(1_500_001)

    def test_guest_size_contains(self):
        size = GuestSizeRange(id="small", label="Small", min=51, max=100)

        assert size.contains(51)
        assert not size.contains(50)


class TestGeneratedPackage:
    """Tests for the GeneratedPackage model."""

    def base(self, **overrides):
        data = {
            "id": "pkg-essential",
            "name": "Essential Package",
            "tier": "essential",
            "description": "Starter",
            "total_price": 750000,
            "services": [SERVICE_DATA],
            "delivery_timeline": "2-3 weeks",
            "avg_rating": 4.9,
        }
        data.update(overrides)
        return data

    def test_valid_package(self):
        package = GeneratedPackage(**self.base())

        assert package.tier == PackageTier.ESSENTIAL
        assert package.services[0].id == "s8"

    def test_more_than_eight_features_rejected(self):
        with pytest.raises(ValidationError):
            GeneratedPackage(**self.base(features=[f"f{i}" for i in range(9)]))

    def test_unknown_tier_rejected(self):
        with pytest.raises(ValidationError):
            GeneratedPackage(**self.base(tier="platinum"))

    def test_serializes_tier_as_string(self):
        data = GeneratedPackage(**self.base()).model_dump(mode="json")

        assert data["tier"] == "essential"
        assert data["services"][0]["category"] == "catering"


# =============================================================================
# Store Model Tests
# =============================================================================

class TestStoreModels:
    """Tests for store state and actions."""

    def test_cart_item_line_total(self):
        item = CartItem(service=Service(**SERVICE_DATA), quantity=2)

        assert item.line_total == 1_500_000

    def test_cart_item_quantity_must_be_positive(self):
        with pytest.raises(ValidationError):
            CartItem(service=Service(**SERVICE_DATA), quantity=0)

    def test_empty_state(self):
        state = StoreState()

        assert not state.is_authenticated
        assert state.cart == []
        assert state.search_query == ""

    def test_action_parses_by_type(self):
        adapter = TypeAdapter(Action)

        action = adapter.validate_python({"type": "add_to_cart", "service": SERVICE_DATA, "quantity": 3})

        assert isinstance(action, AddToCart)
        assert action.quantity == 3

    def test_booking_status_action(self):
        action = TypeAdapter(Action).validate_python(
            {"type": "update_booking_status", "booking_id": "b1", "status": "in-progress"}
        )

        assert isinstance(action, UpdateBookingStatus)
        assert action.status == BookingStatus.IN_PROGRESS

    def test_unknown_action_type_rejected(self):
        with pytest.raises(ValidationError):
            TypeAdapter(Action).validate_python({"type": "checkout"})


class TestReceiptCreate:
    def test_negative_totals_rejected(self):
        with pytest.raises(ValidationError):
            ReceiptCreate(
                user_id="u1",
                customer_name="Ada",
                customer_email="ada@example.com",
                event_type="wedding",
                event_date="2026-12-12",
                subtotal=-1,
                total_amount=0,
            )
