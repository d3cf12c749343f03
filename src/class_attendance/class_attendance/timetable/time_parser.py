"""Clock-time parsing for timetable strings.

Timetables store times as free-form text ("9:00", "14:00", "2:50pm"). Parsers
turn them into minutes since midnight. The reference parser keeps the
department's historical reading of those strings; the strict parser accepts
zero-padded 24-hour HH:MM only and can be swapped in through settings.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod

from ..core.constants import MINUTES_PER_DAY, MINUTES_PER_HOUR
from ..core.enums import TimeParserKind
from ..core.exceptions import TimeFormatError

CLOCK_PATTERN = re.compile(r"^\s*(\d{1,2})(?::(\d{2}))?\s*([ap]m)?\s*$", re.IGNORECASE)
STRICT_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


class TimeParser(ABC):
    """Strategy: clock string -> minutes since midnight, in [0, 1439]."""

    @abstractmethod
    def to_minutes(self, text: str) -> int:
        raise NotImplementedError


class ReferenceTimeParser(TimeParser):
    """H[:MM] or HH:MM with an optional am/pm suffix.

    With a suffix the hour is on a 12-hour clock (12am is midnight, 12pm is
    noon). Without one the hour is taken literally as 24-hour.
    """

    def to_minutes(self, text: str) -> int:
        m = CLOCK_PATTERN.match(text) if isinstance(text, str) else None
        if not m:
            raise TimeFormatError(f"Invalid time: {text!r}")

        hours = int(m.group(1))
        minutes = int(m.group(2) or 0)
        meridiem = (m.group(3) or "").lower()

        if minutes >= MINUTES_PER_HOUR:
            raise TimeFormatError(f"Invalid minutes in time: {text!r}")

        if meridiem:
            if not 1 <= hours <= 12:
                raise TimeFormatError(f"Invalid 12-hour time: {text!r}")
            if meridiem == "am" and hours == 12:
                hours = 0
            elif meridiem == "pm" and hours != 12:
                hours += 12

        total = hours * MINUTES_PER_HOUR + minutes
        if total >= MINUTES_PER_DAY:
            raise TimeFormatError(f"Time out of range: {text!r}")
        return total


class StrictTimeParser(TimeParser):
    def to_minutes(self, text: str) -> int:
        m = STRICT_PATTERN.match(text.strip()) if isinstance(text, str) else None
        if not m:
            raise TimeFormatError(f"Expected 24-hour HH:MM, got {text!r}")
        return int(m.group(1)) * MINUTES_PER_HOUR + int(m.group(2))


def get_time_parser(kind: TimeParserKind | str = TimeParserKind.REFERENCE) -> TimeParser:
    kind = TimeParserKind(kind)
    if kind == TimeParserKind.STRICT:
        return StrictTimeParser()
    return ReferenceTimeParser()


_default_parser = ReferenceTimeParser()


def parse_time_to_minutes(text: str) -> int:
    """Minutes since midnight for a timetable clock string.

    >>> parse_time_to_minutes("2:50pm")
    890
    """
    return _default_parser.to_minutes(text)


def is_clock_string(text: str) -> bool:
    """True when the reference parser can read `text` as a time of day."""
    try:
        _default_parser.to_minutes(text)
    except TimeFormatError:
        return False
    return True
