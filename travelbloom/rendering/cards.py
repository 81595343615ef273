from __future__ import annotations

from collections.abc import Sequence

from ..catalog.models import Place
from .models import Card, ResultsHeader
from .surface import RenderSurface

PLACEHOLDER_IMAGE = "images/placeholder.jpg"
UNKNOWN_PLACE = "Unknown Place"
NO_DESCRIPTION = "No description available."
NO_RESULTS_MESSAGE = "No recommendations found for that search."
NO_MATCH_MESSAGE = 'No matches found. Try "beach", "temple", "country", or a country/city name.'

MAX_CARDS = 6
MIN_CARDS = 2


def select_window(
    items: Sequence[Place],
    max_cards: int = MAX_CARDS,
    min_cards: int = MIN_CARDS,
) -> list[Place]:
    """Leading slice of ``items`` to display.

    Shows up to ``max_cards`` but at least ``min_cards`` when that many exist.
    """
    size = max(min_cards, min(len(items), max_cards))
    return list(items[:size])


def build_card(place: Place, badge: str) -> Card:
    return Card(
        title=place.name or UNKNOWN_PLACE,
        description=place.description or NO_DESCRIPTION,
        image_url=place.image_url or PLACEHOLDER_IMAGE,
        badge=badge,
    )


def build_cards(
    items: Sequence[Place],
    badge: str,
    max_cards: int = MAX_CARDS,
    min_cards: int = MIN_CARDS,
) -> list[Card]:
    return [build_card(p, badge) for p in select_window(items, max_cards, min_cards)]


def build_header(query_raw: str | None, total_found: int, label: str | None) -> ResultsHeader | None:
    """Header shown above the cards; ``None`` hides it."""
    if not query_raw:
        return None
    category = f"Category: {label}" if label else "Category: (no match)"
    return ResultsHeader(
        title=f'Showing results for: "{query_raw}"',
        meta=f"{category} • Matches found: {total_found}",
    )


class ResultRenderer:
    """Replaces the rendered result set on a surface in one go."""

    def __init__(
        self,
        surface: RenderSurface,
        max_cards: int = MAX_CARDS,
        min_cards: int = MIN_CARDS,
    ) -> None:
        self.surface = surface
        self.max_cards = max_cards
        self.min_cards = min_cards

    def render(self, items: Sequence[Place], badge: str) -> list[Card]:
        if not items:
            self.surface.render_empty(NO_RESULTS_MESSAGE)
            return []
        cards = build_cards(items, badge, self.max_cards, self.min_cards)
        self.surface.render_cards(cards)
        return cards
