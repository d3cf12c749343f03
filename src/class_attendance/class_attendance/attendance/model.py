from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    student_id: str
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    branch: Optional[str] = None
    section: Optional[str] = None
    batch_start: Optional[int] = None
    batch_end: Optional[int] = None
    credits_obtained: int = 0


@dataclass(frozen=True)
class AttendanceMark:
    """One student's mark in a session.

    marked=False is the initial state and is not the same as absent
    (marked=True, present=False).
    """

    student_id: str
    present: bool = False
    marked: bool = False

    @property
    def is_present(self) -> bool:
        return self.marked and self.present

    @property
    def is_absent(self) -> bool:
        return self.marked and not self.present


@dataclass(frozen=True)
class SessionKey:
    """Addresses one attendance session: (timetable entry, class, subject)."""

    timetable_id: str
    class_id: str
    subject_code: str

    @property
    def path(self) -> str:
        return f"/attendance/{self.timetable_id}/{self.class_id}/{self.subject_code}"


@dataclass(frozen=True)
class AttendanceSummary:
    total: int
    marked: int
    present: int
    absent: int
    unmarked: int
