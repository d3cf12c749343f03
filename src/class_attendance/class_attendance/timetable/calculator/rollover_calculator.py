from __future__ import annotations

from ...core.constants import MIDDAY_ROLLOVER_MINUTES
from .base import DurationCalculator


class RolloverDurationCalculator(DurationCalculator):
    """Historical rule: end <= start means the slot crossed midday (+12h), not below 0."""

    def slot_minutes(self, start: int, end: int) -> int:
        if end <= start:
            end += MIDDAY_ROLLOVER_MINUTES
        return max(end - start, 0)
