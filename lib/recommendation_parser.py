# =============================================================================
# lib/recommendation_parser.py - Free-Text Event Description Parser
# =============================================================================
# Pulls event-builder selections out of prose such as:
#
#   "A romantic garden wedding for 150 guests, budget around ₦1.2m"
#
# and returns the matching builder ids:
#
#   Recommendation(event_type="wedding", theme="romantic-garden",
#                  guest_size="medium", venue_type="outdoor-garden",
#                  budget="moderate")
#
# Matching is keyword based and runs against the builder lookup tables, so
# anything the tables don't know about is simply left unset.
# =============================================================================

import re

from core.data.builder import (
    BUDGET_RANGES,
    COLOR_PALETTES,
    EVENT_THEMES,
    EVENT_TYPE_CATEGORIES,
    GUEST_SIZE_RANGES,
    VENUE_TYPES,
)
from core.models.builder import Recommendation

GUEST_COUNT_RE = re.compile(r"(\d+)\s*(?:guests?|people|attendees)")
AMOUNT_RE = re.compile(
    r"(?:₦|ngn|n)?\s*(\d+(?:,\d{3})*(?:\.\d+)?)\s*(thousand|million|k|m)?\b"
)
GUEST_WORD_RE = re.compile(r"\s*(?:guests?|people|attendees)")

MULTIPLIERS = {
    "k": 1_000,
    "thousand": 1_000,
    "m": 1_000_000,
    "million": 1_000_000,
}

# Checked in order when no amount lands in a budget range
BUDGET_KEYWORDS: list[tuple[tuple[str, ...], str]] = [
    (("luxury", "high-end", "premium"), "luxury"),
    (("moderate", "mid-range"), "moderate"),
    (("budget", "affordable"), "budget"),
]

VENUE_KEYWORD_MIN_LENGTH = 4


def _match_event_type(text: str) -> str | None:
    for event_type in EVENT_TYPE_CATEGORIES:
        if event_type.name.lower() in text or event_type.id in text:
            return event_type.id
    return None


def _match_named(text: str, entries) -> str | None:
    """First entry whose name, or id with its first hyphen as a space, occurs."""
    for entry in entries:
        if entry.name.lower() in text or entry.id.replace("-", " ", 1) in text:
            return entry.id
    return None


def _match_guest_size(text: str) -> str | None:
    match = GUEST_COUNT_RE.search(text)
    if not match:
        return None
    count = int(match.group(1))
    for size in GUEST_SIZE_RANGES:
        if size.contains(count):
            return size.id
    return None


def _match_venue(text: str) -> str | None:
    for venue in VENUE_TYPES:
        keywords = re.split(r"[\s/]+", venue.name.lower())
        if any(len(kw) >= VENUE_KEYWORD_MIN_LENGTH and kw in text for kw in keywords):
            return venue.id
    return None


def parse_amount(number: str, unit: str | None) -> float:
    """
    Turn a matched number and unit into Naira.

    Bare numbers below 1,000 are read as millions ("a 2 budget" is ₦2M).
    """
    amount = float(number.replace(",", ""))
    if unit:
        return amount * MULTIPLIERS[unit]
    if amount < 1000:
        return amount * 1_000_000
    return amount


def _match_budget(text: str) -> str | None:
    for match in AMOUNT_RE.finditer(text):
        number, unit = match.group(1), match.group(2)
        # "150 guests" is a head count, not money
        if unit is None and GUEST_WORD_RE.match(text, match.end()):
            continue
        amount = parse_amount(number, unit)
        for budget in BUDGET_RANGES:
            if budget.contains(amount):
                return budget.id

    for keywords, budget_id in BUDGET_KEYWORDS:
        if any(kw in text for kw in keywords):
            return budget_id
    return None


def parse_recommendations(text: str) -> Recommendation:
    """
    Extract event-builder ids from free text.

    Args:
        text: Event description, chat reply, etc.

    Returns:
        Recommendation with every recognised field set
    """
    lowered = text.lower()
    return Recommendation(
        event_type=_match_event_type(lowered),
        theme=_match_named(lowered, EVENT_THEMES),
        color_palette=_match_named(lowered, COLOR_PALETTES),
        guest_size=_match_guest_size(lowered),
        venue_type=_match_venue(lowered),
        budget=_match_budget(lowered),
    )


def has_valid_recommendation(rec: Recommendation | None) -> bool:
    """True when there is enough to pre-fill the builder."""
    if rec is None:
        return False
    return bool(rec.event_type or rec.theme or rec.guest_size or rec.budget)
