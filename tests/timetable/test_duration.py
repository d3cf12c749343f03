import pytest

from src.class_attendance.class_attendance.timetable.calculator.midnight_calculator import MidnightDurationCalculator
from src.class_attendance.class_attendance.timetable.calculator.rollover_calculator import RolloverDurationCalculator
from src.class_attendance.class_attendance.timetable.duration import (
    compute_total_weekly_minutes,
    entry_minutes,
    format_weekly_hours,
    get_duration_calculator,
    minutes_per_day,
)
from src.class_attendance.class_attendance.timetable.model import TimetableEntry


def _entry(days, start, end, entry_id="TT"):
    return TimetableEntry(entry_id, tuple(days), start, end, "C001", "CS201")


def test_two_day_entry_contributes_fifty_minutes_each():
    entry = _entry(["Monday", "Thursday"], "2:00", "2:50")
    assert compute_total_weekly_minutes([entry]) == 100


def test_rollover_adds_twelve_hours_when_end_not_after_start():
    # 11:00 -> 1:00 reads as 11:00 -> 13:00
    entry = _entry(["Monday"], "11:00", "1:00")
    assert entry_minutes(entry) == 120


def test_equal_start_and_end_rolls_over_to_twelve_hours():
    entry = _entry(["Monday"], "9:00", "9:00")
    assert entry_minutes(entry) == 720


def test_duration_is_clamped_at_zero():
    # 23:00 -> 1:00 only gains 12h and is still negative
    entry = _entry(["Monday"], "23:00", "1:00")
    assert entry_minutes(entry) == 0
    assert compute_total_weekly_minutes([entry]) == 0


def test_total_is_order_independent_and_repeatable(timetable):
    forward = compute_total_weekly_minutes(timetable)
    backward = compute_total_weekly_minutes(list(reversed(timetable)))

    assert forward == backward == compute_total_weekly_minutes(timetable)
    # 4*60 + 2*60 + 3*60 + 1*60
    assert forward == 600


def test_empty_timetable_is_zero():
    assert compute_total_weekly_minutes([]) == 0


def test_midnight_calculator_is_swappable():
    entry = _entry(["Friday"], "22:00", "1:00")
    assert entry_minutes(entry, calculator=MidnightDurationCalculator()) == 180
    assert entry_minutes(entry, calculator=RolloverDurationCalculator()) == 0


def test_get_duration_calculator():
    assert isinstance(get_duration_calculator("midnight"), MidnightDurationCalculator)
    assert isinstance(get_duration_calculator(), RolloverDurationCalculator)


def test_minutes_per_day(timetable):
    per_day = minutes_per_day(timetable)

    assert list(per_day) == ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
    assert per_day["Monday"] == 120
    assert per_day["Tuesday"] == 180
    assert per_day["Friday"] == 120
    assert per_day["Sunday"] == 0
    assert sum(per_day.values()) == compute_total_weekly_minutes(timetable)


@pytest.mark.parametrize(
    "minutes, label, hours",
    [(0, "0 h 0 m", "0.0"), (100, "1 h 40 m", "1.7"), (600, "10 h 0 m", "10.0"), (50, "0 h 50 m", "0.8")],
)
def test_format_weekly_hours(minutes, label, hours):
    out = format_weekly_hours(minutes)
    assert out.minutes == minutes
    assert out.label == label
    assert out.hours == hours
