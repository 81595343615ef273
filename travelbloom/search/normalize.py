from __future__ import annotations

import re

_STRIP_RE = re.compile(r"[^\w\s-]")

_PLURAL_KEYWORDS: dict[str, str] = {
    "beaches": "beach",
    "temples": "temple",
    "countries": "country",
}


def normalize_query(raw: str | None) -> str:
    """Lowercase, drop punctuation (hyphens survive), trim, singularize keywords."""
    text = _STRIP_RE.sub("", (raw or "").lower()).strip()
    return _PLURAL_KEYWORDS.get(text, text)
