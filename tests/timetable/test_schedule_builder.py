from datetime import date

import pytest

from src.class_attendance.class_attendance.common.datetime_utils import weekday_name
from src.class_attendance.class_attendance.core.enums import ScheduleOrdering
from src.class_attendance.class_attendance.core.exceptions import ValidationError
from src.class_attendance.class_attendance.timetable.model import TimetableEntry
from src.class_attendance.class_attendance.timetable.schedule_builder import build_daily_schedule


def test_filters_and_sorts_by_start_time(timetable, subjects, classes):
    sessions = build_daily_schedule(timetable, subjects, classes, "Tuesday")

    assert [s.entry.entry_id for s in sessions] == ["TT001", "TT002", "TT003"]
    assert sessions[0].subject.name == "Data Structures"
    assert sessions[1].class_details.label == "CSE 2023-2027 B"


def test_day_without_classes_is_empty(timetable, subjects, classes):
    assert build_daily_schedule(timetable, subjects, classes, "Sunday") == []


def test_missing_subject_and_class_are_left_empty(subjects):
    entry = TimetableEntry("TT9", ("Monday",), "08:00", "09:00", "C999", "XX000")

    sessions = build_daily_schedule([entry], subjects, {}, "Monday")

    assert len(sessions) == 1
    assert sessions[0].subject is None
    assert sessions[0].class_details is None


def test_day_name_must_match_exactly(timetable, subjects, classes):
    with pytest.raises(ValidationError):
        build_daily_schedule(timetable, subjects, classes, "monday")


def test_default_order_compares_raw_strings(subjects, classes):
    morning = TimetableEntry("A", ("Monday",), "9:00", "9:50", "C001", "CS201")
    noon = TimetableEntry("B", ("Monday",), "12:20", "13:10", "C001", "CS201")

    lexicographic = build_daily_schedule([morning, noon], subjects, classes, "Monday")
    chronological = build_daily_schedule(
        [morning, noon], subjects, classes, "Monday", ordering=ScheduleOrdering.CHRONOLOGICAL
    )

    # "12:20" < "9:00" as strings
    assert [s.entry.entry_id for s in lexicographic] == ["B", "A"]
    assert [s.entry.entry_id for s in chronological] == ["A", "B"]


def test_attendance_path(timetable, subjects, classes):
    session = build_daily_schedule(timetable, subjects, classes, "Friday")[0]
    assert session.attendance_path == "/attendance/TT001/C001/CS201"


def test_weekday_name():
    assert weekday_name(date(2026, 10, 19)) == "Monday"
    assert weekday_name(date(2026, 10, 18)) == "Sunday"
    assert weekday_name(date(2026, 10, 24)) == "Saturday"
