# =============================================================================
# core/models/builder.py - Event Builder Schemas
# =============================================================================
# These models support the event builder wizard:
# - Lookup descriptors (themes, palettes, guest sizes, venues, budgets,
#   event types) chosen step by step by the customer
# - GeneratedPackage: One priced tier of services proposed for the event
# - Recommendation: Builder ids extracted from a free-text description
#
# Flow:
# 1. Customer picks event type, theme, colours, guests, venue and budget
# 2. The package generator proposes up to three tiers
# 3. A chosen package is copied into the cart or saved as a plan
# =============================================================================

from enum import Enum

from pydantic import BaseModel, Field

from .catalog import Service, ServiceCategory, Vendor


# =============================================================================
# Lookup Descriptors
# =============================================================================

class EventTheme(BaseModel):
    id: str
    name: str
    description: str = ""
    icon: str = ""

    model_config = {"frozen": True}


class ColorPalette(BaseModel):
    id: str
    name: str
    colors: list[str] = Field(default_factory=list)
    primary: str = ""

    model_config = {"frozen": True}


class GuestSizeRange(BaseModel):
    """Guest count bucket, inclusive on both ends."""

    id: str
    label: str
    range: str = ""
    min: int = Field(..., ge=0)
    max: int = Field(..., ge=0)
    icon: str = ""

    model_config = {"frozen": True}

    def contains(self, guest_count: int) -> bool:
        return self.min <= guest_count <= self.max


class VenueType(BaseModel):
    id: str
    name: str
    icon: str = ""
    description: str = ""

    model_config = {"frozen": True}


class BudgetRange(BaseModel):
    """
    Budget bucket in whole Naira.

    `max` is the spending ceiling the package generator allocates against.
    """

    id: str
    label: str
    range: str = ""
    min: int = Field(..., ge=0)
    max: int = Field(..., ge=0)

    model_config = {"frozen": True}

    def contains(self, amount: float) -> bool:
        return self.min <= amount <= self.max


class EventTypeCategory(BaseModel):
    """An event type and the service categories that matter most for it."""

    id: str
    name: str
    icon: str = ""
    category_ids: list[ServiceCategory] = Field(
        default_factory=list,
        description="Priority categories, filled first when building packages"
    )

    model_config = {"frozen": True}


class BuilderOptions(BaseModel):
    """Every choice offered by the event builder, in display order."""

    event_types: list[EventTypeCategory]
    themes: list[EventTheme]
    color_palettes: list[ColorPalette]
    guest_sizes: list[GuestSizeRange]
    venue_types: list[VenueType]
    budgets: list[BudgetRange]


# =============================================================================
# Generated Packages
# =============================================================================

class PackageTier(str, Enum):
    """
    Package quality/price levels, in output order.

    - essential: 30% of the budget ceiling, cheapest services first
    - standard: 60% of the budget ceiling, best-rated services first
    - premium: the whole budget ceiling, best-rated services first
    """
    ESSENTIAL = "essential"
    STANDARD = "standard"
    PREMIUM = "premium"


class GeneratedPackage(BaseModel):
    """
    A priced bundle of services proposed for one tier.

    Packages are display artifacts: they are built once per request and
    never modified afterwards.
    """

    id: str = Field(..., description="Deterministic package id")
    name: str
    tier: PackageTier
    description: str
    total_price: int = Field(..., ge=0, description="Sum of service prices (Naira)")
    services: list[Service] = Field(default_factory=list)
    vendors: list[Vendor] = Field(default_factory=list)
    delivery_timeline: str
    avg_rating: float = Field(..., ge=0.0, le=5.0)
    features: list[str] = Field(
        default_factory=list,
        max_length=8,
        description="First eight features across the chosen services"
    )

    model_config = {"frozen": True}


class PackageRequest(BaseModel):
    """
    Builder selections sent to the package generator.

    Theme, colour palette and venue type are carried along for the plan
    but do not influence which services are selected.
    """

    event_type_id: str = Field(..., examples=["wedding"])
    theme_id: str = Field(default="", examples=["classic-elegance"])
    color_palette_id: str = Field(default="", examples=["gold-ivory"])
    guest_size_id: str = Field(..., examples=["medium"])
    venue_type_id: str = Field(default="", examples=["outdoor-garden"])
    budget_id: str = Field(..., examples=["moderate"])


# =============================================================================
# Free-text Recommendations
# =============================================================================

class Recommendation(BaseModel):
    """Builder ids recognised in a free-text event description."""

    event_type: str | None = None
    theme: str | None = None
    color_palette: str | None = None
    guest_size: str | None = None
    venue_type: str | None = None
    budget: str | None = None
