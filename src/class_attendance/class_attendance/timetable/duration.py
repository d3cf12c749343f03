from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.constants import MINUTES_PER_HOUR
from ..core.enums import DurationRule, Weekday
from .calculator.base import DurationCalculator
from .calculator.midnight_calculator import MidnightDurationCalculator
from .calculator.rollover_calculator import RolloverDurationCalculator
from .model import TimetableEntry
from .time_parser import ReferenceTimeParser, TimeParser


@dataclass(frozen=True)
class WeeklyHours:
    minutes: int
    label: str
    hours: str


def get_duration_calculator(rule: DurationRule | str = DurationRule.ROLLOVER) -> DurationCalculator:
    if DurationRule(rule) == DurationRule.MIDNIGHT:
        return MidnightDurationCalculator()
    return RolloverDurationCalculator()


def entry_minutes(
    entry: TimetableEntry,
    *,
    parser: Optional[TimeParser] = None,
    calculator: Optional[DurationCalculator] = None,
) -> int:
    """Length of a single occurrence of the entry."""
    parser = parser or ReferenceTimeParser()
    calculator = calculator or RolloverDurationCalculator()
    return calculator.slot_minutes(parser.to_minutes(entry.start_time), parser.to_minutes(entry.end_time))


def compute_total_weekly_minutes(
    entries: Iterable[TimetableEntry],
    *,
    parser: Optional[TimeParser] = None,
    calculator: Optional[DurationCalculator] = None,
) -> int:
    """Scheduled minutes per week: slot length times distinct weekdays, summed."""
    total = 0
    for entry in entries:
        total += entry_minutes(entry, parser=parser, calculator=calculator) * len(set(entry.days))
    return total


def minutes_per_day(
    entries: Iterable[TimetableEntry],
    *,
    parser: Optional[TimeParser] = None,
    calculator: Optional[DurationCalculator] = None,
) -> dict[str, int]:
    """Scheduled minutes for each weekday, Sunday first; days without classes are 0."""
    out = {day: 0 for day in Weekday.names()}
    for entry in entries:
        minutes = entry_minutes(entry, parser=parser, calculator=calculator)
        for day in set(entry.days):
            out[day] += minutes
    return out


def format_weekly_hours(total_minutes: int) -> WeeklyHours:
    total_minutes = int(total_minutes)
    h, m = divmod(total_minutes, MINUTES_PER_HOUR)
    return WeeklyHours(
        minutes=total_minutes,
        label=f"{h} h {m} m",
        hours=f"{total_minutes / MINUTES_PER_HOUR:.1f}",
    )
