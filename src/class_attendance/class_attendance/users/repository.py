from __future__ import annotations

from typing import Optional, Protocol

from .model import TeacherAccount


class AccountRepository(Protocol):
    """Credentials lookup.

    Note (DIP): AuthService depends on this interface, not on a concrete DB.
    """

    def get_by_email(self, email: str) -> Optional[TeacherAccount]:
        raise NotImplementedError
