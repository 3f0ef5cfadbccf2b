"""Time sources and window helpers."""

from __future__ import annotations

import threading
from datetime import UTC, datetime, timedelta
from typing import Protocol


def now_utc() -> datetime:
    """Return current timezone-aware UTC datetime."""
    return datetime.now(tz=UTC)


class Clock(Protocol):
    """Anything that can tell the engine what time it is."""

    def now(self) -> datetime: ...


class SystemClock:
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return now_utc()


class ManualClock:
    """Clock that only moves when told to.

    Used by tests to pin operations to exact instants inside or outside an
    election's windows.
    """

    def __init__(self, start: datetime | None = None) -> None:
        self._now = start or now_utc()
        self._lock = threading.Lock()

    def now(self) -> datetime:
        with self._lock:
            return self._now

    def set(self, value: datetime) -> None:
        """Jump to an absolute instant."""
        with self._lock:
            self._now = value

    def advance(self, seconds: float = 0, **kwargs: float) -> datetime:
        """Move forward by ``seconds`` (plus any ``timedelta`` kwargs)."""
        with self._lock:
            self._now = self._now + timedelta(seconds=seconds, **kwargs)
            return self._now


def within(moment: datetime, start: datetime, end: datetime) -> bool:
    """Return True when ``moment`` lies in the closed interval [start, end]."""
    return start <= moment <= end


def as_duration(value: timedelta | int | float) -> timedelta:
    """Normalize a duration given as seconds or ``timedelta``."""
    if isinstance(value, timedelta):
        return value
    return timedelta(seconds=value)
