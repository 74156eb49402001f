# =============================================================================
# core/services/package_service.py - Budget-Tiered Package Generator
# =============================================================================
# Proposes up to three event packages (essential, standard, premium) from the
# service catalog.
#
# Pipeline:
# 1. Resolve the budget, guest size and event type ids from the lookup tables
# 2. Keep available services in the relevant categories
# 3. Greedily fill each tier's envelope, one service per category
# 4. Price and describe each non-empty selection
#
# Every failure degrades to an empty result: unknown ids give [], a tier
# with nothing affordable is left out. Nothing here raises or does I/O.
# =============================================================================

from __future__ import annotations

import logging
from typing import Iterable, NamedTuple, Sequence

from core.data.builder import BUDGET_RANGES, EVENT_TYPE_CATEGORIES, GUEST_SIZE_RANGES
from core.data.catalog import SERVICES, VENDORS
from core.models.builder import (
    BudgetRange,
    EventTypeCategory,
    GeneratedPackage,
    GuestSizeRange,
    PackageTier,
)
from core.models.catalog import Service, ServiceCategory, Vendor
from lib.utils import round_half_up

logger = logging.getLogger(__name__)


# Considered for every event type, on top of the event's own categories
ALWAYS_RELEVANT_CATEGORIES: tuple[ServiceCategory, ...] = (
    ServiceCategory.CATERING,
    ServiceCategory.DECORATIONS,
    ServiceCategory.PHOTOGRAPHY,
    ServiceCategory.CONCERTS,
    ServiceCategory.RENTALS,
)

# Filled after the priority categories, in this order. Rentals are never backfilled.
BACKFILL_CATEGORIES: tuple[ServiceCategory, ...] = (
    ServiceCategory.CATERING,
    ServiceCategory.DECORATIONS,
    ServiceCategory.PHOTOGRAPHY,
    ServiceCategory.CONCERTS,
)

TIER_BUDGET_PERCENT: dict[PackageTier, int] = {
    PackageTier.ESSENTIAL: 30,
    PackageTier.STANDARD: 60,
    PackageTier.PREMIUM: 100,
}

TIER_NAMES: dict[PackageTier, str] = {
    PackageTier.ESSENTIAL: "Essential Package",
    PackageTier.STANDARD: "Standard Package",
    PackageTier.PREMIUM: "Premium Package",
}

TIER_DESCRIPTIONS: dict[PackageTier, str] = {
    PackageTier.ESSENTIAL: "Perfect starter package for your {event}. Covers the basics with quality service.",
    PackageTier.STANDARD: "Our recommended package for your {event}. Great balance of value and quality.",
    PackageTier.PREMIUM: "The ultimate {event} experience. Premium services for an unforgettable event.",
}

TIER_TIMELINES: dict[PackageTier, str] = {
    PackageTier.ESSENTIAL: "2-3 weeks",
    PackageTier.STANDARD: "3-4 weeks",
    PackageTier.PREMIUM: "4-6 weeks",
}

MAX_PACKAGE_FEATURES = 8


class ResolvedRanges(NamedTuple):
    budget: BudgetRange
    guest_size: GuestSizeRange
    event_type: EventTypeCategory


# =============================================================================
# Range Resolver
# =============================================================================

def resolve_ranges(
    event_type_id: str,
    guest_size_id: str,
    budget_id: str,
) -> ResolvedRanges | None:
    """
    Look up the three descriptors that drive package generation.

    Returns:
        ResolvedRanges, or None if any id is unknown
    """
    budget = next((b for b in BUDGET_RANGES if b.id == budget_id), None)
    guest_size = next((g for g in GUEST_SIZE_RANGES if g.id == guest_size_id), None)
    event_type = next((e for e in EVENT_TYPE_CATEGORIES if e.id == event_type_id), None)

    if budget is None or guest_size is None or event_type is None:
        return None
    return ResolvedRanges(budget=budget, guest_size=guest_size, event_type=event_type)


# =============================================================================
# Candidate Filter
# =============================================================================

def filter_candidates(
    services: Iterable[Service],
    priority_categories: Sequence[ServiceCategory],
) -> list[Service]:
    """Available services whose category is always relevant or a priority."""
    relevant = set(ALWAYS_RELEVANT_CATEGORIES) | set(priority_categories)
    return [s for s in services if s.available and s.category in relevant]


def sort_by_rating(services: Iterable[Service]) -> list[Service]:
    """Best rated first; equal ratings keep catalog order."""
    return sorted(services, key=lambda s: s.rating, reverse=True)


def sort_by_price(services: Iterable[Service]) -> list[Service]:
    """Cheapest first; equal prices keep catalog order."""
    return sorted(services, key=lambda s: s.price)


# =============================================================================
# Tier Allocator
# =============================================================================

def select_services_for_budget(
    candidates: Sequence[Service],
    max_budget: int | float,
    priority_categories: Sequence[ServiceCategory],
) -> list[Service]:
    """
    Greedily fill a budget envelope with at most one service per category.

    Priority categories are visited first, then the backfill categories.
    For each category the first service in `candidates` order that still
    fits under `max_budget` is taken. A filled category is never revisited,
    even if a cheaper alternative would later leave room for more services.

    Args:
        candidates: Services already sorted in preference order
        max_budget: Spending ceiling for this tier
        priority_categories: Categories to fill before the backfill list

    Returns:
        Selected services in selection order (empty if nothing fits)
    """
    selected: list[Service] = []
    used_categories: set[ServiceCategory] = set()
    total_spent = 0

    def take_first_affordable(category: ServiceCategory) -> None:
        nonlocal total_spent
        for service in candidates:
            if service.category == category and total_spent + service.price <= max_budget:
                selected.append(service)
                used_categories.add(category)
                total_spent += service.price
                return

    for category in priority_categories:
        if category not in used_categories:
            take_first_affordable(category)

    for category in BACKFILL_CATEGORIES:
        if category not in used_categories:
            take_first_affordable(category)

    return selected


# =============================================================================
# Package Assembler
# =============================================================================

def average_rating(services: Sequence[Service]) -> float:
    """Mean rating rounded half-up to one decimal; 0 for no services."""
    if not services:
        return 0.0
    mean = sum(s.rating for s in services) / len(services)
    return round_half_up(mean, 1)


def collect_features(services: Sequence[Service], limit: int = MAX_PACKAGE_FEATURES) -> list[str]:
    """
    First `limit` features across the services, in service order.

    Duplicates are kept: two services both offering "MC Services" show it twice.
    """
    features = [feature for service in services for feature in service.features]
    return features[:limit]


def create_package(
    tier: PackageTier,
    selected_services: Sequence[Service],
    event_type_name: str,
    vendors: Sequence[Vendor] = VENDORS,
    package_id: str | None = None,
) -> GeneratedPackage:
    """
    Price and describe a tier's selected services.

    Args:
        tier: Package tier
        selected_services: Output of select_services_for_budget()
        event_type_name: Display name used in the description
        vendors: Vendor registry to resolve vendor ids against
        package_id: Explicit id (defaults to "pkg-<tier>")

    Returns:
        GeneratedPackage
    """
    vendor_ids = {s.vendor_id for s in selected_services}

    return GeneratedPackage(
        id=package_id or f"pkg-{tier.value}",
        name=TIER_NAMES[tier],
        tier=tier,
        description=TIER_DESCRIPTIONS[tier].format(event=event_type_name),
        total_price=sum(s.price for s in selected_services),
        services=list(selected_services),
        vendors=[v for v in vendors if v.id in vendor_ids],
        delivery_timeline=TIER_TIMELINES[tier],
        avg_rating=average_rating(selected_services),
        features=collect_features(selected_services),
    )


def tier_envelope(tier: PackageTier, max_budget: int) -> int:
    """Spending ceiling for a tier, in whole Naira."""
    return max_budget * TIER_BUDGET_PERCENT[tier] // 100


# =============================================================================
# Orchestrator
# =============================================================================

def generate_event_packages(
    event_type_id: str,
    theme_id: str,
    color_palette_id: str,
    guest_size_id: str,
    venue_type_id: str,
    budget_id: str,
    *,
    services: Sequence[Service] | None = None,
    vendors: Sequence[Vendor] | None = None,
) -> list[GeneratedPackage]:
    """
    Build the essential, standard and premium packages for an event.

    Theme, colour palette and venue type are accepted so the builder can
    pass its full selection, but they do not affect which services are
    chosen.

    Args:
        event_type_id: Event type id (e.g., "wedding")
        theme_id: Theme id (unused by the allocation)
        color_palette_id: Colour palette id (unused by the allocation)
        guest_size_id: Guest size id (must exist)
        venue_type_id: Venue type id (unused by the allocation)
        budget_id: Budget range id; its max is the premium envelope
        services: Catalog to allocate from (defaults to the sample catalog)
        vendors: Vendor registry (defaults to the sample vendors)

    Returns:
        0-3 packages in tier order; empty if any id is unknown or nothing fits

    Example:
        packages = generate_event_packages(
            "wedding", "classic-elegance", "gold-ivory", "medium", "outdoor-garden", "moderate"
        )
        [p.tier for p in packages]  # [essential, standard, premium]
    """
    resolved = resolve_ranges(event_type_id, guest_size_id, budget_id)
    if resolved is None:
        logger.debug(
            f"No packages: unknown selection event_type={event_type_id!r} "
            f"guest_size={guest_size_id!r} budget={budget_id!r}"
        )
        return []

    catalog = SERVICES if services is None else services
    registry = VENDORS if vendors is None else vendors

    priority = resolved.event_type.category_ids
    candidates = filter_candidates(catalog, priority)
    ordered = {
        PackageTier.ESSENTIAL: sort_by_price(candidates),
        PackageTier.STANDARD: sort_by_rating(candidates),
        PackageTier.PREMIUM: sort_by_rating(candidates),
    }

    packages: list[GeneratedPackage] = []
    for tier in PackageTier:
        envelope = tier_envelope(tier, resolved.budget.max)
        selected = select_services_for_budget(ordered[tier], envelope, priority)
        if not selected:
            continue
        packages.append(create_package(
            tier,
            selected,
            resolved.event_type.name,
            vendors=registry,
            package_id=f"pkg-{tier.value}-{event_type_id}-{budget_id}",
        ))

    logger.debug(
        f"Generated {len(packages)} packages for {event_type_id}/{budget_id} "
        f"from {len(candidates)} candidates"
    )
    return packages
