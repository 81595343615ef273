from __future__ import annotations

from collections.abc import Iterable

from ..search.models import ClockTarget

# Lower-cased country name -> IANA time zone
COUNTRY_TIME_ZONES: dict[str, str] = {
    "australia": "Australia/Sydney",
    "japan": "Asia/Tokyo",
    "brazil": "America/Sao_Paulo",
}


def resolve_time_zone(country_name: str | None) -> str | None:
    """Return the time zone for a country, or ``None`` if none is configured."""
    key = (country_name or "").lower().strip()
    return COUNTRY_TIME_ZONES.get(key)


def resolve_time_zones(country_names: Iterable[str | None]) -> list[ClockTarget]:
    """Clock targets for every distinct, configured country name, in order.

    Names are trimmed and deduplicated; blank names and countries without a
    configured zone are dropped.
    """
    seen: set[str] = set()
    targets: list[ClockTarget] = []
    for raw in country_names:
        name = (raw or "").strip()
        if not name or name in seen:
            continue
        seen.add(name)
        time_zone = resolve_time_zone(name)
        if time_zone:
            targets.append(ClockTarget(label=name, time_zone=time_zone))
    return targets


def infer_country_from_city_name(city_name: str | None) -> str | None:
    """Guess the country from a display name like ``"Kyoto, Japan"``.

    Purely syntactic: the last comma-separated segment wins, so a country
    whose own name contains a comma comes back truncated.
    """
    parts = (city_name or "").strip().split(",")
    if len(parts) < 2:
        return None
    return parts[-1].strip()
