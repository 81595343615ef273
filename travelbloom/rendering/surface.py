from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from .models import Card, ResultsHeader


class RenderSurface(Protocol):
    """Whatever presents results to the user (a browser page, a test log...)."""

    def set_header(self, header: ResultsHeader | None) -> None: ...

    def render_cards(self, cards: list[Card]) -> None: ...

    def render_empty(self, message: str) -> None: ...

    def set_time_box(self, text: str | None) -> None: ...

    def clear_input(self) -> None: ...


class CommandSurface:
    """Surface that turns every call into a JSON-ready command dict.

    ``emit`` receives the commands in call order, e.g. ``queue.put_nowait``
    for a websocket sender or ``list.append`` in tests.
    """

    def __init__(self, emit: Callable[[dict[str, Any]], None]) -> None:
        self._emit = emit

    def set_header(self, header: ResultsHeader | None) -> None:
        self._emit({"type": "header", "header": header.model_dump() if header else None})

    def render_cards(self, cards: list[Card]) -> None:
        self._emit({"type": "cards", "cards": [c.model_dump() for c in cards]})

    def render_empty(self, message: str) -> None:
        self._emit({"type": "empty", "message": message})

    def set_time_box(self, text: str | None) -> None:
        self._emit({"type": "clock", "text": text})

    def clear_input(self) -> None:
        self._emit({"type": "input", "value": ""})
