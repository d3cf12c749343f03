from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Student
from .repository import StudentRepository


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_class(self, class_id: str) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, name, phone, email, branch, section,
                       batch_start, batch_end, credits_obtained
                FROM students
                WHERE class_id=%s
                ORDER BY student_id ASC
                """,
                (class_id,),
            )
            return [
                Student(
                    student_id=r["student_id"],
                    name=r["name"],
                    phone=r.get("phone"),
                    email=r.get("email"),
                    branch=r.get("branch"),
                    section=r.get("section"),
                    batch_start=r.get("batch_start"),
                    batch_end=r.get("batch_end"),
                    credits_obtained=int(r.get("credits_obtained") or 0),
                )
                for r in fetchall(cur)
            ]
