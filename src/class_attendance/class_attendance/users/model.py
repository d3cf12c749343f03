from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Identity:
    """The signed-in user, handed to every service call that needs one."""

    email: str
    name: Optional[str] = None


@dataclass(frozen=True)
class TeacherAccount:
    """Login credentials stored on the teacher row."""

    teacher_id: str
    email: str
    name: str
    password_hash: str
    is_active: bool = True
