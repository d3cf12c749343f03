from __future__ import annotations

from datetime import date
from typing import Mapping, Protocol, Sequence

from .model import AttendanceMark, SessionKey, Student


class StudentRepository(Protocol):
    def list_for_class(self, class_id: str) -> Sequence[Student]:
        raise NotImplementedError


class AttendanceRepository(Protocol):
    def save_marks(
        self,
        *,
        key: SessionKey,
        session_date: date,
        marks: Mapping[str, AttendanceMark],
        marked_by: str,
    ) -> int:
        """Write one session's marks as a single unit.

        Saving the same key/date again replaces the earlier marks. Returns the
        stored session id.
        """

        raise NotImplementedError
