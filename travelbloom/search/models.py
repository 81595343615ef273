from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from ..catalog.models import Place
from ..rendering.models import Card, ResultsHeader


class ClockTarget(BaseModel):
    label: str
    time_zone: str | None = None


class ClockRequest(BaseModel):
    """What the clock should show after a search.

    A single request with no ``time_zone`` means the country is known but has
    no configured zone; a multi request with no targets hides the clock.
    """

    targets: list[ClockTarget] = Field(default_factory=list)
    multi: bool = False


class MatchResult(BaseModel):
    items: list[Place] = Field(default_factory=list)
    label: str | None = None
    badge: str | None = None
    query: str = ""
    tier: str = "no_match"
    clock: ClockRequest | None = None

    @property
    def matched(self) -> bool:
        return self.label is not None


class SearchRequest(BaseModel):
    query: str = Field(default="", max_length=200, description="Free-text keyword, country or city")


class SearchResponse(BaseModel):
    query: str
    label: str | None
    tier: str
    total_found: int
    header: ResultsHeader | None = None
    cards: list[Card] = Field(default_factory=list)
    message: str | None = None
    clock: str | None = None


class SocketMessage(BaseModel):
    action: Literal["search", "reset", "navigate"]
    query: str | None = None
    page: str | None = None
