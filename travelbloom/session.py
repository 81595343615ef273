from __future__ import annotations

import logging

from .catalog.data_store import DataStore
from .clock.scheduler import ClockScheduler
from .config import DEFAULT_APP_CONFIG, AppConfig
from .errors import LOAD_FAILED_MESSAGE, TravelBloomError
from .rendering.cards import NO_MATCH_MESSAGE, ResultRenderer, build_header
from .rendering.surface import RenderSurface
from .search.matcher import search
from .search.models import MatchResult

logger = logging.getLogger(__name__)

HOME_PAGE = "home"


class SearchSession:
    """Application state for one page: the dataset, one clock, one surface.

    All methods are synchronous and must run on the event loop that owns
    the clock scheduler.
    """

    def __init__(
        self,
        store: DataStore,
        surface: RenderSurface,
        config: AppConfig = DEFAULT_APP_CONFIG,
    ) -> None:
        self.store = store
        self.surface = surface
        self.renderer = ResultRenderer(surface, config.max_cards, config.min_cards)
        self.scheduler = ClockScheduler(surface.set_time_box, interval=config.clock_interval)
        self.page = HOME_PAGE
        self.last_result: MatchResult | None = None

    def search(self, raw: str | None) -> MatchResult | None:
        """Run one search and render its outcome. Returns ``None`` when rejected."""
        try:
            result = search(raw, self.store)
        except TravelBloomError as exc:
            logger.info("Search rejected: %s", exc.message)
            self._hide_clock()
            self.surface.set_header(None)
            self.surface.render_empty(exc.message)
            self.last_result = None
            return None

        raw_text = (raw or "").strip()
        self.last_result = result

        if not result.matched:
            self._hide_clock()
            self.surface.set_header(build_header(raw_text, 0, None))
            self.surface.render_empty(NO_MATCH_MESSAGE)
            return result

        self.surface.set_header(build_header(raw_text, len(result.items), result.label))
        self.renderer.render(result.items, result.badge or result.label)
        self.scheduler.apply(result.clock)
        return result

    def reset(self) -> None:
        """Clear input, cards, empty state, header and clock."""
        self.surface.clear_input()
        self.surface.render_cards([])
        self.surface.set_header(None)
        self._hide_clock()
        self.last_result = None

    def navigate(self, page: str) -> None:
        self.page = page
        if page != HOME_PAGE:
            self.reset()

    def announce_load_failure(self) -> None:
        self.surface.render_empty(LOAD_FAILED_MESSAGE)

    def close(self) -> None:
        self.scheduler.stop()

    def _hide_clock(self) -> None:
        self.scheduler.stop()
        self.surface.set_time_box(None)
