from __future__ import annotations

from typing import Callable, Iterable, Mapping, Optional

from ..common.validators import require_weekday
from ..core.enums import ScheduleOrdering
from .model import ClassDetails, DailySession, Subject, TimetableEntry
from .time_parser import ReferenceTimeParser, TimeParser


def _sort_key(ordering: ScheduleOrdering, parser: Optional[TimeParser]) -> Callable[[DailySession], object]:
    if ordering == ScheduleOrdering.CHRONOLOGICAL:
        parser = parser or ReferenceTimeParser()
        return lambda s: parser.to_minutes(s.entry.start_time)
    # Raw string comparison: "9:00" sorts after "12:20".
    return lambda s: s.entry.start_time


def build_daily_schedule(
    timetable: Iterable[TimetableEntry],
    subjects: Iterable[Subject],
    classes_by_id: Mapping[str, ClassDetails],
    day_name: str,
    *,
    ordering: ScheduleOrdering | str = ScheduleOrdering.LEXICOGRAPHIC,
    parser: Optional[TimeParser] = None,
) -> list[DailySession]:
    """Sessions of the timetable that occur on `day_name`, sorted by start time.

    Subject and class are joined by code/id; a missing match leaves the field
    as None. Nothing is cached, call again when the day changes.
    """
    require_weekday(day_name)

    subjects_by_code: dict[str, Subject] = {}
    for subject in subjects:
        # First match wins when a code is listed twice.
        subjects_by_code.setdefault(subject.code, subject)

    sessions = [
        DailySession(
            entry=entry,
            subject=subjects_by_code.get(entry.subject_code),
            class_details=classes_by_id.get(entry.class_id),
        )
        for entry in timetable
        if entry.occurs_on(day_name)
    ]
    sessions.sort(key=_sort_key(ScheduleOrdering(ordering), parser))
    return sessions
