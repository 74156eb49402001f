# =============================================================================
# core/models/catalog.py - Catalog Schemas
# =============================================================================
# These models describe the marketplace's reference data:
# - Category: One of the nine service categories
# - Vendor: A business offering one or more services
# - Service: A bookable offering with a whole-Naira price
# - *Create / *Update: Admin inputs for writing catalog rows
#
# Catalog rows coming from Supabase are validated through these models
# before anything else touches them.
# =============================================================================

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class ServiceCategory(str, Enum):
    """The nine service categories known to the marketplace."""
    WEDDINGS = "weddings"
    BIRTHDAYS = "birthdays"
    CORPORATE = "corporate"
    BABY_SHOWERS = "baby-showers"
    CONCERTS = "concerts"
    CATERING = "catering"
    DECORATIONS = "decorations"
    PHOTOGRAPHY = "photography"
    RENTALS = "rentals"


class PriceType(str, Enum):
    """
    How a service's price should be read.

    - fixed: The price is the final price
    - starting: The price is a "from" price
    - hourly: The price is charged per hour
    """
    FIXED = "fixed"
    STARTING = "starting"
    HOURLY = "hourly"


class Category(BaseModel):
    """A browsable service category."""

    id: ServiceCategory
    name: str
    icon: str = ""
    description: str = ""

    model_config = {"frozen": True}


class Vendor(BaseModel):
    """
    A vendor in the marketplace registry.

    Example:
        {
            "id": "v2",
            "name": "Divine Catering Co.",
            "specialty": "Catering Services",
            "rating": 4.8,
            "location": "Abuja, Nigeria",
            "verified": true
        }
    """

    id: str = Field(..., min_length=1, description="Vendor identifier")
    name: str = Field(..., min_length=1)
    specialty: str = ""
    bio: str = ""
    avatar: str = ""
    portfolio: list[str] = Field(default_factory=list)
    rating: float = Field(default=0.0, ge=0.0, le=5.0)
    review_count: int = Field(default=0, ge=0)
    location: str = ""
    verified: bool = False

    model_config = {"frozen": True}


class Service(BaseModel):
    """
    A bookable service.

    Prices are whole Naira (not kobo), so totals are exact integer sums.

    Example:
        {
            "id": "s10",
            "name": "Luxury Floral Arrangements",
            "category": "decorations",
            "price": 300000,
            "rating": 4.9,
            "vendor_id": "v4",
            "features": ["Fresh Flowers", "Custom Designs"],
            "available": true
        }
    """

    id: str = Field(..., min_length=1, description="Service identifier")
    name: str = Field(..., min_length=1)
    category: ServiceCategory = Field(..., description="Service category id")
    description: str = ""
    short_description: str = ""

    price: int = Field(..., ge=0, description="Price in whole Naira")
    price_type: PriceType = PriceType.STARTING

    rating: float = Field(default=0.0, ge=0.0, le=5.0)
    review_count: int = Field(default=0, ge=0)

    images: list[str] = Field(default_factory=list)
    vendor_id: str = Field(..., description="Owning vendor id")
    vendor_name: str = ""
    location: str = ""

    # Order matters: package features are taken from the front of this list
    features: list[str] = Field(default_factory=list)
    available: bool = True

    model_config = {"frozen": True}


# =============================================================================
# Admin Inputs
# =============================================================================
# Create models carry what an admin types in; ids, vendor names, ratings and
# review counts are filled in server-side. Update models are partial: only
# the fields sent are written.

class _PartialUpdate(BaseModel):
    """Base for PATCH bodies: at least one field must be set."""

    @model_validator(mode="after")
    def require_a_change(self):
        if not self.model_dump(exclude_none=True):
            raise ValueError("Send at least one field to update")
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True, mode="json")


class CategoryCreate(BaseModel):
    id: ServiceCategory
    name: str = Field(..., min_length=1)
    icon: str = ""
    description: str = ""


class CategoryUpdate(_PartialUpdate):
    name: str | None = Field(default=None, min_length=1)
    icon: str | None = None
    description: str | None = None


class VendorCreate(BaseModel):
    """
    A new vendor.

    Example:
        {"name": "Royal Décor", "specialty": "Event Decorations", "location": "Lagos, Nigeria"}
    """

    name: str = Field(..., min_length=1)
    specialty: str = ""
    bio: str = ""
    avatar: str = ""
    location: str = ""
    verified: bool = False
    active: bool = True


class VendorUpdate(_PartialUpdate):
    name: str | None = Field(default=None, min_length=1)
    specialty: str | None = None
    bio: str | None = None
    avatar: str | None = None
    location: str | None = None
    verified: bool | None = None
    active: bool | None = None


class ServiceCreate(BaseModel):
    """
    A new service listing.

    Example:
        {
            "name": "Small Chops Platter",
            "category": "catering",
            "vendor_id": "v2",
            "price": 150000,
            "price_type": "fixed"
        }
    """

    name: str = Field(..., min_length=1)
    category: ServiceCategory
    vendor_id: str = Field(..., min_length=1)
    description: str = ""
    short_description: str = ""
    price: int = Field(..., ge=0, description="Price in whole Naira")
    price_type: PriceType = PriceType.FIXED
    location: str = ""
    features: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    available: bool = True


class ServiceUpdate(_PartialUpdate):
    name: str | None = Field(default=None, min_length=1)
    category: ServiceCategory | None = None
    vendor_id: str | None = Field(default=None, min_length=1)
    description: str | None = None
    short_description: str | None = None
    price: int | None = Field(default=None, ge=0)
    price_type: PriceType | None = None
    location: str | None = None
    features: list[str] | None = None
    images: list[str] | None = None
    available: bool | None = None
