from __future__ import annotations

from ...core.constants import MINUTES_PER_DAY
from .base import DurationCalculator


class MidnightDurationCalculator(DurationCalculator):
    """For 24-hour timetables: end < start means the slot runs past midnight."""

    def slot_minutes(self, start: int, end: int) -> int:
        if end < start:
            end += MINUTES_PER_DAY
        return max(end - start, 0)
