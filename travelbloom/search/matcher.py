from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..catalog.data_store import DataStore
from ..catalog.models import Country, Dataset
from ..clock.timezones import (
    infer_country_from_city_name,
    resolve_time_zone,
    resolve_time_zones,
)
from ..errors import DatasetNotReadyError, EmptyQueryError
from .models import ClockRequest, ClockTarget, MatchResult
from .normalize import normalize_query

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tier:
    """One named rule in the match precedence chain."""

    name: str
    resolve: Callable[[str, Dataset], MatchResult | None]


def _single_clock(country_name: str) -> ClockRequest:
    return ClockRequest(
        targets=[ClockTarget(label=country_name, time_zone=resolve_time_zone(country_name))],
    )


def _country_result(query: str, country: Country, tier: str) -> MatchResult:
    return MatchResult(
        items=list(country.cities),
        label=f"{country.name} (Cities)",
        badge=country.name,
        query=query,
        tier=tier,
        clock=_single_clock(country.name),
    )


# ---------------------------------------------------------------------------
# Tiers
# ---------------------------------------------------------------------------


def match_beaches(query: str, dataset: Dataset) -> MatchResult | None:
    if query != "beach":
        return None
    return MatchResult(
        items=list(dataset.beaches), label="Beaches", badge="Beaches",
        query=query, tier="beach",
    )


def match_temples(query: str, dataset: Dataset) -> MatchResult | None:
    if query != "temple":
        return None
    return MatchResult(
        items=list(dataset.temples), label="Temples", badge="Temples",
        query=query, tier="temple",
    )


def match_all_countries(query: str, dataset: Dataset) -> MatchResult | None:
    if query != "country":
        return None
    return MatchResult(
        items=dataset.all_cities(),
        label="Countries (Cities)",
        badge="Countries",
        query=query,
        tier="country",
        clock=ClockRequest(targets=resolve_time_zones(dataset.country_names()), multi=True),
    )


def match_country_exact(query: str, dataset: Dataset) -> MatchResult | None:
    for country in dataset.countries:
        if country.name.lower() == query:
            return _country_result(query, country, "country_exact")
    return None


def match_country_partial(query: str, dataset: Dataset) -> MatchResult | None:
    for country in dataset.countries:
        if query in country.name.lower():
            return _country_result(query, country, "country_partial")
    return None


def match_cities(query: str, dataset: Dataset) -> MatchResult | None:
    matched = [city for city in dataset.all_cities() if query in city.name.lower()]
    if not matched:
        return None

    inferred = infer_country_from_city_name(matched[0].name)
    return MatchResult(
        items=matched,
        label="City Results",
        badge="City",
        query=query,
        tier="city",
        clock=_single_clock(inferred) if inferred else None,
    )


# Keyword tiers come first so a country literally named "beach" never wins.
TIERS: tuple[Tier, ...] = (
    Tier("beach", match_beaches),
    Tier("temple", match_temples),
    Tier("country", match_all_countries),
    Tier("country_exact", match_country_exact),
    Tier("country_partial", match_country_partial),
    Tier("city", match_cities),
)


def match(query: str, dataset: Dataset, tiers: tuple[Tier, ...] = TIERS) -> MatchResult:
    """Resolve a normalized query; the first tier that answers wins."""
    if query:
        for tier in tiers:
            result = tier.resolve(query, dataset)
            if result is not None:
                logger.debug("Query %r resolved by tier %s (%d items)", query, tier.name, len(result.items))
                return result

    logger.debug("Query %r matched no tier", query)
    return MatchResult(query=query)


def search(raw: str | None, store: DataStore) -> MatchResult:
    """Validate raw input against the store, normalize it, and match it.

    Raises :class:`EmptyQueryError` for blank input and
    :class:`DatasetNotReadyError` while the dataset is not loaded.
    """
    if not (raw or "").strip():
        raise EmptyQueryError()

    dataset = store.dataset
    if dataset is None:
        raise DatasetNotReadyError()

    return match(normalize_query(raw), dataset)
