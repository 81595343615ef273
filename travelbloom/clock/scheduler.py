from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from ..search.models import ClockRequest, ClockTarget

logger = logging.getLogger(__name__)

Display = Callable[[str | None], None]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_clock_time(time_zone: str, now: datetime | None = None) -> str:
    """12-hour wall-clock time in ``time_zone``, e.g. ``"3:07:09 PM"``."""
    moment = (now or _utcnow()).astimezone(ZoneInfo(time_zone))
    return moment.strftime("%I:%M:%S %p").lstrip("0")


def single_clock_text(label: str, time_zone: str, now: datetime | None = None) -> str:
    return f"Current time in {label}: {format_clock_time(time_zone, now)}"


def multi_clock_text(targets: Sequence[ClockTarget], now: datetime | None = None) -> str:
    lines = [f"{t.label}: {format_clock_time(t.time_zone, now)}" for t in targets]
    return "Current times:\n" + "\n".join(lines)


def not_configured_text(label: str) -> str:
    return f"Current time: (time zone not configured for {label})"


class ClockHandle:
    """Handle on one repeating clock task. ``cancel`` may be called any number of times."""

    def __init__(self, task: asyncio.Task) -> None:
        self._task = task
        self._cancelled = False

    @property
    def task(self) -> asyncio.Task:
        return self._task

    @property
    def active(self) -> bool:
        return not self._cancelled and not self._task.done()

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        self._task.cancel()


class ClockScheduler:
    """Runs at most one live clock display at a time.

    Starting a clock always cancels the running one first. Must be used from
    inside a running event loop.
    """

    def __init__(
        self,
        display: Display,
        interval: float = 1.0,
        now: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._display = display
        self._interval = interval
        self._now = now
        self._handle: ClockHandle | None = None

    @property
    def handle(self) -> ClockHandle | None:
        return self._handle

    @property
    def running(self) -> bool:
        return self._handle is not None and self._handle.active

    def start_single(self, label: str, time_zone: str | None) -> ClockHandle | None:
        self.stop()

        if not time_zone:
            self._display(not_configured_text(label))
            return None

        return self._run(lambda: single_clock_text(label, time_zone, self._now()))

    def start_multi(self, targets: Sequence[ClockTarget]) -> ClockHandle | None:
        self.stop()

        unique: list[ClockTarget] = []
        seen: set[str] = set()
        for target in targets:
            if target.time_zone and target.label not in seen:
                seen.add(target.label)
                unique.append(target)

        if not unique:
            self._display(None)
            return None

        return self._run(lambda: multi_clock_text(unique, self._now()))

    def apply(self, request: ClockRequest | None) -> ClockHandle | None:
        """Start whatever clock a search result asks for, or stop and hide."""
        if request is None:
            self.stop()
            self._display(None)
            return None
        if request.multi:
            return self.start_multi(request.targets)
        if not request.targets:
            self.stop()
            self._display(None)
            return None
        target = request.targets[0]
        return self.start_single(target.label, target.time_zone)

    def stop(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            logger.debug("Clock stopped")

    def _run(self, render: Callable[[], str]) -> ClockHandle:
        self._display(render())
        task = asyncio.get_running_loop().create_task(self._tick(render))
        self._handle = ClockHandle(task)
        logger.debug("Clock started (interval %.2fs)", self._interval)
        return self._handle

    async def _tick(self, render: Callable[[], str]) -> None:
        while True:
            await asyncio.sleep(self._interval)
            self._display(render())


def describe_clock(request: ClockRequest | None, now: datetime | None = None) -> str | None:
    """One-off rendering of the text a clock request would display first."""
    if request is None:
        return None
    if request.multi:
        targets = [t for t in request.targets if t.time_zone]
        return multi_clock_text(targets, now) if targets else None
    if not request.targets:
        return None
    target = request.targets[0]
    if not target.time_zone:
        return not_configured_text(target.label)
    return single_clock_text(target.label, target.time_zone, now)
