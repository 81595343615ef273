from __future__ import annotations

import pytest

from travelbloom.catalog.data_store import DataStore
from travelbloom.catalog.models import Dataset
from travelbloom.errors import DatasetNotReadyError, EmptyQueryError
from travelbloom.search.matcher import (
    TIERS,
    match,
    match_cities,
    match_country_exact,
    match_country_partial,
    search,
)


def _names(result):
    return [p.name for p in result.items]


# ── Keyword tiers ────────────────────────────────────────────────────────


@pytest.mark.parametrize("raw", ["beach", "beaches", "Beach ", "BEACHES!"])
def test_beach_keyword_variants_return_all_beaches(raw, store, dataset):
    result = search(raw, store)
    assert result.tier == "beach"
    assert result.label == "Beaches"
    assert result.items == list(dataset.beaches)
    assert result.clock is None


def test_temple_keyword(store, dataset):
    result = search("Temples", store)
    assert result.tier == "temple"
    assert result.label == "Temples"
    assert result.items == list(dataset.temples)


def test_country_keyword_flattens_cities_and_requests_multi_clock(store, dataset):
    result = search("countries", store)
    assert result.tier == "country"
    assert result.label == "Countries (Cities)"
    assert result.badge == "Countries"
    assert result.items == dataset.all_cities()
    assert result.clock.multi is True
    assert [t.label for t in result.clock.targets] == ["Japan", "Brazil", "Australia"]


def test_keyword_tiers_beat_country_names():
    dataset = Dataset.model_validate({
        "beaches": [{"name": "Maya Bay"}],
        "countries": [{"name": "Beach", "cities": [{"name": "Sandtown, Beach"}]}],
    })
    result = match("beach", dataset)
    assert result.tier == "beach"
    assert _names(result) == ["Maya Bay"]


# ── Country tiers ────────────────────────────────────────────────────────


def test_exact_country_beats_substring_match(store):
    result = search("japan", store)
    assert result.tier == "country_exact"
    assert result.label == "Japan (Cities)"
    assert _names(result) == ["Tokyo, Japan", "Kyoto, Japan"]
    assert result.clock.multi is False
    assert result.clock.targets[0].label == "Japan"
    assert result.clock.targets[0].time_zone == "Asia/Tokyo"


def test_partial_country_match_without_time_zone(store):
    result = search("region", store)
    assert result.tier == "country_partial"
    assert result.label == "Greater Japan Region (Cities)"
    assert result.clock.targets[0].time_zone is None


def test_partial_country_match_single_clock(store):
    result = search("bra", store)
    assert result.label == "Brazil (Cities)"
    assert result.clock.targets[0].time_zone == "America/Sao_Paulo"


# ── City tier ────────────────────────────────────────────────────────────


def test_city_match_collects_matches_across_countries(store):
    result = search("y", store)
    assert result.tier == "city"
    assert _names(result) == ["Tokyo, Japan", "Kyoto, Japan", "Sydney, Australia"]
    assert result.clock.targets[0].label == "Japan"


def test_city_match_label_and_inferred_clock(store):
    result = search("kyo", store)
    assert result.tier == "city"
    assert result.label == "City Results"
    assert result.badge == "City"
    assert _names(result) == ["Tokyo, Japan", "Kyoto, Japan"]
    assert result.clock.targets[0].label == "Japan"


def test_city_without_country_segment_stops_clock():
    dataset = Dataset.model_validate({
        "countries": [{"name": "Peru", "cities": [{"name": "Cusco"}]}],
    })
    result = match("cusco", dataset)
    assert result.tier == "city"
    assert result.clock is None


# ── No match / rejections ────────────────────────────────────────────────


def test_no_match_has_no_label(store):
    result = search("atlantis", store)
    assert result.label is None
    assert result.items == []
    assert result.tier == "no_match"
    assert not result.matched


def test_punctuation_only_query_matches_nothing(store):
    assert search("???", store).label is None


@pytest.mark.parametrize("raw", ["", "   ", None])
def test_blank_query_rejected(raw, store):
    with pytest.raises(EmptyQueryError):
        search(raw, store)


def test_unloaded_store_rejected():
    with pytest.raises(DatasetNotReadyError) as exc_info:
        search("beach", DataStore())
    assert "still loading" in exc_info.value.message


def test_blank_query_checked_before_readiness():
    with pytest.raises(EmptyQueryError):
        search("  ", DataStore())


# ── Tier table ───────────────────────────────────────────────────────────


def test_tier_order_is_explicit():
    assert [t.name for t in TIERS] == [
        "beach", "temple", "country", "country_exact", "country_partial", "city",
    ]


def test_tiers_can_run_in_isolation(dataset):
    assert match_country_exact("japa", dataset) is None
    assert match_country_partial("japa", dataset).label == "Greater Japan Region (Cities)"
    assert match_cities("rio", dataset).items[0].name == "Rio de Janeiro, Brazil"
    assert match_cities("nowhere", dataset) is None


def test_custom_tier_table(dataset):
    result = match("japan", dataset, tiers=(TIERS[-1],))
    assert result.tier == "city"
    assert len(result.items) == 3
