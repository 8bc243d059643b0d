"""Kernel time – Clock protocol + implementations."""
from __future__ import annotations

from datetime import UTC, date, datetime, time, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: source of the current instant, swappable in tests."""

    def now(self) -> datetime: ...


class SystemClock:
    """Production clock; every call reads the wall clock afresh."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """Test clock pinned to a fixed point in time."""

    def __init__(self, fixed: datetime) -> None:
        if fixed.tzinfo is None:
            raise ValueError("FrozenClock requires a timezone-aware datetime")
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)


def utc_now() -> datetime:
    """Shorthand for ``datetime.now(UTC)``."""
    return datetime.now(UTC)


def start_of_day_utc(day: date) -> datetime:
    """Anchor a calendar date at midnight UTC."""
    return datetime.combine(day, time.min, tzinfo=UTC)


__all__ = ["Clock", "FrozenClock", "SystemClock", "start_of_day_utc", "utc_now"]
