from __future__ import annotations

from abc import ABC, abstractmethod


class DurationCalculator(ABC):
    """Calculator interface (Strategy Pattern for slot durations)."""

    @abstractmethod
    def slot_minutes(self, start: int, end: int) -> int:
        """Length of one slot given start/end in minutes since midnight."""
        raise NotImplementedError
