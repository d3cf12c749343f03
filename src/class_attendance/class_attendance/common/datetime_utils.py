from __future__ import annotations

from datetime import date, datetime

from ..core.enums import Weekday


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def weekday_name(day: date) -> str:
    """Name of the weekday ("Monday", ...) for a date."""
    # date.weekday() is Monday=0, Weekday starts on Sunday.
    return Weekday.names()[(day.weekday() + 1) % 7]
