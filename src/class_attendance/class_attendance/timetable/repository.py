from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence

from .model import ClassDetails, TeacherProfile


class TeacherRepository(Protocol):
    """Teacher profiles with their subjects and weekly timetable loaded."""

    def get_by_id(self, teacher_id: str) -> Optional[TeacherProfile]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[TeacherProfile]:
        raise NotImplementedError


class ClassRepository(Protocol):
    def get_by_id(self, class_id: str) -> Optional[ClassDetails]:
        raise NotImplementedError

    def get_many(self, class_ids: Sequence[str]) -> Mapping[str, ClassDetails]:
        """Classes keyed by id; unknown ids are simply absent."""

        raise NotImplementedError
