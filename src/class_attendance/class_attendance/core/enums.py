from __future__ import annotations

from enum import Enum


class Weekday(str, Enum):
    """Recognized weekday names, in the order used for "today" lookups."""

    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(d.value for d in cls)


class MarkFilter(str, Enum):
    """Status filter for the attendance roster view."""

    ALL = "all"
    PRESENT = "present"
    ABSENT = "absent"
    UNMARKED = "unmarked"


class TimeParserKind(str, Enum):
    REFERENCE = "reference"
    STRICT = "strict"


class ScheduleOrdering(str, Enum):
    """How a daily schedule is sorted.

    LEXICOGRAPHIC compares the raw start-time strings and is only chronological
    when every entry uses zero-padded 24-hour HH:MM.
    """

    LEXICOGRAPHIC = "lexicographic"
    CHRONOLOGICAL = "chronological"


class DurationRule(str, Enum):
    ROLLOVER = "rollover"
    MIDNIGHT = "midnight"
