from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Mapping, Optional

from ..common.datetime_utils import now_local
from ..core.exceptions import NotFoundError, PersistenceError, ValidationError
from ..timetable.model import ClassDetails, Subject, TimetableEntry
from ..timetable.repository import ClassRepository, TeacherRepository
from ..users.model import Identity
from ..users.service import require_identity
from .model import SessionKey
from .repository import AttendanceRepository, StudentRepository
from .session import AttendanceSession

logger = logging.getLogger(__name__)

SAVE_FAILED_MESSAGE = "Failed to save attendance. Please try again."
LOAD_FAILED_MESSAGE = "Failed to load the class roster. Please try again."


@dataclass(frozen=True)
class OpenedSession:
    key: SessionKey
    entry: TimetableEntry
    subject: Optional[Subject]
    class_details: Optional[ClassDetails]
    session: AttendanceSession


@dataclass(frozen=True)
class SubmissionReceipt:
    session_id: int
    key: SessionKey
    session_date: date
    present: int
    absent: int
    total: int


class AttendanceService:
    """Use case: take attendance for one (timetable entry, class, subject)."""

    def __init__(
        self,
        teachers: TeacherRepository,
        classes: ClassRepository,
        students: StudentRepository,
        attendance: AttendanceRepository,
    ):
        self._teachers = teachers
        self._classes = classes
        self._students = students
        self._attendance = attendance

    def open_session(
        self,
        identity: Optional[Identity],
        key: SessionKey,
        *,
        state: Optional[Mapping[str, Mapping]] = None,
    ) -> OpenedSession:
        """Load the roster for `key`; with `state`, restore marks made earlier in the visit."""
        identity = require_identity(identity)

        teacher = self._teachers.get_by_email(identity.email)
        if not teacher:
            raise NotFoundError("No teacher profile for this account")

        entry = teacher.find_entry(key.timetable_id)
        if not entry or entry.class_id != key.class_id or entry.subject_code != key.subject_code:
            raise NotFoundError("Timetable entry not found")

        try:
            roster = self._students.list_for_class(key.class_id)
            class_details = self._classes.get_by_id(key.class_id)
        except PersistenceError:
            logger.exception("Loading roster for %s failed", key.path)
            raise PersistenceError(LOAD_FAILED_MESSAGE) from None

        if state is None:
            session = AttendanceSession(roster)
            logger.info("Opened %s for %s with %d student(s)", key.path, teacher.teacher_id, len(roster))
        else:
            session = AttendanceSession.from_state(roster, state)

        return OpenedSession(
            key=key,
            entry=entry,
            subject=teacher.find_subject(key.subject_code),
            class_details=class_details,
            session=session,
        )

    def submit(
        self,
        identity: Optional[Identity],
        opened: OpenedSession,
        *,
        session_date: Optional[date] = None,
    ) -> SubmissionReceipt:
        identity = require_identity(identity)

        # Callers check can_submit() first; this only guards direct use.
        blocker = opened.session.submit_blocker()
        if blocker:
            raise ValidationError(blocker)

        session_date = session_date or now_local().date()
        summary = opened.session.summarize()
        try:
            session_id = self._attendance.save_marks(
                key=opened.key,
                session_date=session_date,
                marks=opened.session.marks(),
                marked_by=identity.email,
            )
        except PersistenceError:
            logger.exception("Saving attendance for %s on %s failed", opened.key.path, session_date)
            raise PersistenceError(SAVE_FAILED_MESSAGE) from None

        logger.info(
            "Saved attendance %s on %s: %d present, %d absent",
            opened.key.path,
            session_date,
            summary.present,
            summary.absent,
        )
        return SubmissionReceipt(
            session_id=session_id,
            key=opened.key,
            session_date=session_date,
            present=summary.present,
            absent=summary.absent,
            total=summary.total,
        )

    @staticmethod
    def to_ui(opened: OpenedSession, *, students=None) -> dict:
        session = opened.session
        summary = session.summarize()
        listed = session.roster if students is None else students

        def _student(s) -> dict:
            mark = session.mark_for(s.student_id)
            if not mark.marked:
                status = "unmarked"
            else:
                status = "present" if mark.present else "absent"
            return {"id": s.student_id, "name": s.name, "email": s.email, "status": status}

        return {
            "key": {
                "timetable_id": opened.key.timetable_id,
                "class_id": opened.key.class_id,
                "subject_code": opened.key.subject_code,
            },
            "subject": (
                {"code": opened.subject.code, "name": opened.subject.name, "credits": opened.subject.credits}
                if opened.subject
                else None
            ),
            "class": (
                {"id": opened.class_details.class_id, "label": opened.class_details.label}
                if opened.class_details
                else None
            ),
            "classroom": opened.entry.classroom,
            "students": [_student(s) for s in listed],
            "summary": {
                "total": summary.total,
                "marked": summary.marked,
                "present": summary.present,
                "absent": summary.absent,
                "unmarked": summary.unmarked,
            },
            "can_submit": summary.unmarked == 0,
            "submit_blocker": session.submit_blocker(),
        }
