from __future__ import annotations

from ..core.enums import Weekday
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_weekday(value: str) -> str:
    if value not in Weekday.names():
        raise ValidationError(f"Unknown weekday: {value!r}")
    return value


def require_weekdays(values) -> tuple[str, ...]:
    days = tuple(values or ())
    if not days:
        raise ValidationError("A timetable entry needs at least one weekday")
    for d in days:
        require_weekday(d)
    if len(set(days)) != len(days):
        raise ValidationError(f"Duplicate weekday in {list(days)}")
    return days


def require_non_negative(value: int, field_name: str) -> int:
    if value is None or int(value) < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return int(value)
