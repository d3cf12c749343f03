from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..common.validators import require_non_empty, require_non_negative, require_weekdays
from ..core.exceptions import ValidationError
from .time_parser import is_clock_string


@dataclass(frozen=True)
class Subject:
    code: str
    name: str
    credits: int = 0
    subject_id: Optional[str] = None

    def __post_init__(self):
        require_non_empty(self.code, "Subject code")
        require_non_negative(self.credits, "Credits")


@dataclass(frozen=True)
class ClassDetails:
    class_id: str
    branch: str
    batch_start: int
    batch_end: int
    section: str

    def __post_init__(self):
        if int(self.batch_end) <= int(self.batch_start):
            raise ValidationError(
                f"Batch end ({self.batch_end}) must be after batch start ({self.batch_start})"
            )

    @property
    def label(self) -> str:
        return f"{self.branch} {self.batch_start}-{self.batch_end} {self.section}"


@dataclass(frozen=True)
class TimetableEntry:
    """One recurring weekly class slot."""

    entry_id: str
    days: tuple[str, ...]
    start_time: str
    end_time: str
    class_id: str
    subject_code: str
    classroom: Optional[str] = None

    def __post_init__(self):
        # Accept lists from storage/JSON but keep the entry hashable.
        object.__setattr__(self, "days", require_weekdays(self.days))
        for name in ("start_time", "end_time"):
            value = getattr(self, name)
            if not is_clock_string(value):
                raise ValidationError(f"Invalid {name.replace('_', ' ')}: {value!r}")

    def occurs_on(self, day_name: str) -> bool:
        return day_name in self.days


@dataclass(frozen=True)
class TeacherProfile:
    """Teacher aggregate: owns its subjects and weekly timetable by value."""

    teacher_id: str
    name: str
    phone: Optional[str]
    email: str
    subjects: tuple[Subject, ...] = field(default_factory=tuple)
    timetable: tuple[TimetableEntry, ...] = field(default_factory=tuple)

    def find_entry(self, entry_id: str) -> Optional[TimetableEntry]:
        for entry in self.timetable:
            if entry.entry_id == entry_id:
                return entry
        return None

    def find_subject(self, code: str) -> Optional[Subject]:
        for subject in self.subjects:
            if subject.code == code:
                return subject
        return None


@dataclass(frozen=True)
class DailySession:
    """A timetable entry joined with its subject and class for one render."""

    entry: TimetableEntry
    subject: Optional[Subject] = None
    class_details: Optional[ClassDetails] = None

    @property
    def attendance_path(self) -> str:
        return f"/attendance/{self.entry.entry_id}/{self.entry.class_id}/{self.entry.subject_code}"
