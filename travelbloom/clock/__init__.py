"""
Country clock.

Responsibilities:
- Map the configured countries to IANA time zones.
- Infer a country from a "City, Country" display name.
- Keep at most one live clock display ticking at a time.
"""
