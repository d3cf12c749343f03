from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import now_local, weekday_name
from ..common.validators import require_non_empty, require_weekday
from ..core.enums import ScheduleOrdering
from ..core.exceptions import NotFoundError
from ..users.model import Identity
from ..users.service import require_identity
from .calculator.base import DurationCalculator
from .calculator.rollover_calculator import RolloverDurationCalculator
from .duration import WeeklyHours, compute_total_weekly_minutes, format_weekly_hours, minutes_per_day
from .model import DailySession, TeacherProfile
from .repository import ClassRepository, TeacherRepository
from .schedule_builder import build_daily_schedule
from .time_parser import ReferenceTimeParser, TimeParser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dashboard:
    teacher: TeacherProfile
    day: str
    sessions: list[DailySession]
    weekly_hours: WeeklyHours
    minutes_per_day: dict[str, int]


class DashboardService:
    """Use case: the teacher's dashboard for one selected day."""

    def __init__(
        self,
        teachers: TeacherRepository,
        classes: ClassRepository,
        *,
        parser: Optional[TimeParser] = None,
        calculator: Optional[DurationCalculator] = None,
        ordering: ScheduleOrdering = ScheduleOrdering.LEXICOGRAPHIC,
    ):
        self._teachers = teachers
        self._classes = classes
        self._parser = parser or ReferenceTimeParser()
        self._calculator = calculator or RolloverDurationCalculator()
        self._ordering = ScheduleOrdering(ordering)

    def get_teacher(self, teacher_id: str) -> TeacherProfile:
        teacher_id = require_non_empty(teacher_id, "Teacher ID")
        teacher = self._teachers.get_by_id(teacher_id)
        if not teacher:
            raise NotFoundError("Teacher not found")
        return teacher

    def teacher_for(self, identity: Optional[Identity]) -> TeacherProfile:
        identity = require_identity(identity)
        teacher = self._teachers.get_by_email(identity.email)
        if not teacher:
            logger.warning("No teacher profile for signed-in user %s", identity.email)
            raise NotFoundError("No teacher profile for this account")
        return teacher

    def load(self, identity: Optional[Identity], *, day: Optional[str] = None, today: Optional[date] = None) -> Dashboard:
        teacher = self.teacher_for(identity)
        day = require_weekday(day) if day else weekday_name(today or now_local().date())

        classes = self._classes.get_many([e.class_id for e in teacher.timetable])
        sessions = build_daily_schedule(
            teacher.timetable,
            teacher.subjects,
            classes,
            day,
            ordering=self._ordering,
            parser=self._parser,
        )
        total = compute_total_weekly_minutes(teacher.timetable, parser=self._parser, calculator=self._calculator)

        logger.info("Dashboard for %s on %s: %d session(s)", teacher.teacher_id, day, len(sessions))
        return Dashboard(
            teacher=teacher,
            day=day,
            sessions=sessions,
            weekly_hours=format_weekly_hours(total),
            minutes_per_day=minutes_per_day(teacher.timetable, parser=self._parser, calculator=self._calculator),
        )

    @staticmethod
    def teacher_to_ui(teacher: TeacherProfile) -> dict:
        return {
            "id": teacher.teacher_id,
            "name": teacher.name,
            "phone": teacher.phone,
            "email": teacher.email,
            "subjects": [
                {"id": s.subject_id, "code": s.code, "name": s.name, "credits": s.credits} for s in teacher.subjects
            ],
            "timetable": [
                {
                    "id": e.entry_id,
                    "day_of_week": list(e.days),
                    "start_time": e.start_time,
                    "end_time": e.end_time,
                    "class_id": e.class_id,
                    "subject_code": e.subject_code,
                    "classroom": e.classroom,
                }
                for e in teacher.timetable
            ],
        }

    def to_ui(self, dashboard: Dashboard) -> dict:
        def _session(s: DailySession) -> dict:
            return {
                "timetable_id": s.entry.entry_id,
                "start_time": s.entry.start_time,
                "end_time": s.entry.end_time,
                "classroom": s.entry.classroom or "-",
                "class_id": s.entry.class_id,
                "class_label": s.class_details.label if s.class_details else "-",
                "subject_code": s.entry.subject_code,
                "subject_name": s.subject.name if s.subject else "-",
                "attendance_url": s.attendance_path,
            }

        return {
            "teacher": self.teacher_to_ui(dashboard.teacher),
            "day": dashboard.day,
            "sessions": [_session(s) for s in dashboard.sessions],
            "weekly_hours": {
                "minutes": dashboard.weekly_hours.minutes,
                "label": dashboard.weekly_hours.label,
                "hours": dashboard.weekly_hours.hours,
            },
            "minutes_per_day": dashboard.minutes_per_day,
        }
