from __future__ import annotations

from pydantic import BaseModel


class Card(BaseModel):
    title: str
    description: str
    image_url: str
    badge: str


class ResultsHeader(BaseModel):
    title: str
    meta: str
