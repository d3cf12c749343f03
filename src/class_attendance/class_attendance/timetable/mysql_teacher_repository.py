from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause
from .model import Subject, TeacherProfile, TimetableEntry
from .repository import TeacherRepository


class MySQLTeacherRepository(TeacherRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, teacher_id: str) -> Optional[TeacherProfile]:
        return self._load("teacher_id", teacher_id)

    def get_by_email(self, email: str) -> Optional[TeacherProfile]:
        return self._load("official_email", email)

    def _load(self, column: str, value: str) -> Optional[TeacherProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT teacher_id, name, phone, official_email
                FROM teachers
                WHERE {column}=%s AND is_active=1
                """,
                (value,),
            )
            row = fetchone(cur)
            if not row:
                return None
            teacher_id = row["teacher_id"]

            cur.execute(
                """
                SELECT s.subject_id, s.code, s.name, s.credits
                FROM teacher_subjects ts
                JOIN subjects s ON s.code = ts.subject_code
                WHERE ts.teacher_id=%s
                ORDER BY s.code ASC
                """,
                (teacher_id,),
            )
            subjects = tuple(
                Subject(
                    subject_id=r.get("subject_id"),
                    code=r["code"],
                    name=r["name"],
                    credits=int(r["credits"]),
                )
                for r in fetchall(cur)
            )

            cur.execute(
                """
                SELECT entry_id, start_time, end_time, class_id, subject_code, classroom
                FROM timetable_entries
                WHERE teacher_id=%s
                ORDER BY position ASC, entry_id ASC
                """,
                (teacher_id,),
            )
            entry_rows = fetchall(cur)

            days_by_entry: dict[str, list[str]] = {r["entry_id"]: [] for r in entry_rows}
            if entry_rows:
                ids = list(days_by_entry)
                cur.execute(
                    f"""
                    SELECT entry_id, day_name
                    FROM timetable_days
                    WHERE entry_id IN ({in_clause(ids)})
                    ORDER BY entry_id ASC, position ASC
                    """,
                    tuple(ids),
                )
                for r in fetchall(cur):
                    days_by_entry[r["entry_id"]].append(r["day_name"])

            timetable = tuple(
                TimetableEntry(
                    entry_id=r["entry_id"],
                    days=tuple(days_by_entry[r["entry_id"]]),
                    start_time=r["start_time"],
                    end_time=r["end_time"],
                    class_id=r["class_id"],
                    subject_code=r["subject_code"],
                    classroom=r.get("classroom"),
                )
                for r in entry_rows
            )

            return TeacherProfile(
                teacher_id=teacher_id,
                name=row["name"],
                phone=row.get("phone"),
                email=row["official_email"],
                subjects=subjects,
                timetable=timetable,
            )
