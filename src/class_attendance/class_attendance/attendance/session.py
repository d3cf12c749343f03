from __future__ import annotations

from typing import Mapping, Optional, Sequence

from ..core.enums import MarkFilter
from ..core.exceptions import NotFoundError, ValidationError
from .model import AttendanceMark, AttendanceSummary, Student


class AttendanceSession:
    """Marks for a fixed roster while a teacher takes attendance.

    Every student starts unmarked. Mutators never add or remove students and
    the derived views (summary, filter) are recomputed on each call.
    """

    def __init__(self, roster: Sequence[Student]):
        self._roster: dict[str, Student] = {s.student_id: s for s in roster}
        self._marks: dict[str, AttendanceMark] = {
            student_id: AttendanceMark(student_id=student_id) for student_id in self._roster
        }

    @classmethod
    def from_state(cls, roster: Sequence[Student], state: Mapping[str, Mapping]) -> "AttendanceSession":
        """Rebuild a session from `to_state()` output.

        Students that left the roster since are dropped, new ones start unmarked.
        """
        session = cls(roster)
        for student_id, raw in (state or {}).items():
            if student_id in session._marks and raw.get("marked"):
                session.mark_one(student_id, bool(raw.get("present")))
        return session

    def to_state(self) -> dict[str, dict]:
        return {sid: {"present": m.present, "marked": m.marked} for sid, m in self._marks.items()}

    @property
    def roster(self) -> list[Student]:
        return list(self._roster.values())

    def mark_for(self, student_id: str) -> AttendanceMark:
        try:
            return self._marks[student_id]
        except KeyError:
            raise NotFoundError(f"Student {student_id} is not on this roster") from None

    def marks(self) -> dict[str, AttendanceMark]:
        return dict(self._marks)

    def mark_one(self, student_id: str, present: bool) -> AttendanceMark:
        if student_id not in self._marks:
            raise NotFoundError(f"Student {student_id} is not on this roster")
        mark = AttendanceMark(student_id=student_id, present=bool(present), marked=True)
        self._marks[student_id] = mark
        return mark

    def mark_all(self, present: bool) -> None:
        for student_id in self._marks:
            self._marks[student_id] = AttendanceMark(student_id=student_id, present=bool(present), marked=True)

    def summarize(self) -> AttendanceSummary:
        total = len(self._roster)
        marks = self._marks.values()
        marked = sum(1 for m in marks if m.marked)
        present = sum(1 for m in marks if m.is_present)
        absent = sum(1 for m in marks if m.is_absent)
        return AttendanceSummary(total=total, marked=marked, present=present, absent=absent, unmarked=total - marked)

    def filter(self, query: str = "", status: MarkFilter | str = MarkFilter.ALL) -> list[Student]:
        try:
            status = MarkFilter(status or MarkFilter.ALL)
        except ValueError:
            raise ValidationError(f"Unknown status filter: {status!r}") from None

        students = self.roster
        q = (query or "").lower()
        if q:
            students = [s for s in students if q in s.name.lower() or q in s.student_id.lower()]

        if status == MarkFilter.PRESENT:
            students = [s for s in students if self._marks[s.student_id].is_present]
        elif status == MarkFilter.ABSENT:
            students = [s for s in students if self._marks[s.student_id].is_absent]
        elif status == MarkFilter.UNMARKED:
            students = [s for s in students if not self._marks[s.student_id].marked]
        return students

    def can_submit(self) -> bool:
        return self.summarize().unmarked == 0

    def submit_blocker(self) -> Optional[str]:
        unmarked = self.summarize().unmarked
        if unmarked == 0:
            return None
        noun = "student is" if unmarked == 1 else "students are"
        return f"{unmarked} {noun} still unmarked"
