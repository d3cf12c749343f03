from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import TeacherAccount
from .repository import AccountRepository


class MySQLAccountRepository(AccountRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[TeacherAccount]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT teacher_id, official_email, name, password_hash, is_active
                FROM teachers
                WHERE official_email=%s
                """,
                (email,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return TeacherAccount(
                teacher_id=row["teacher_id"],
                email=row["official_email"],
                name=row["name"],
                password_hash=row["password_hash"],
                is_active=bool(row.get("is_active", True)),
            )
