from __future__ import annotations

from datetime import date
from typing import Mapping

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import AttendanceMark, SessionKey
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def save_marks(
        self,
        *,
        key: SessionKey,
        session_date: date,
        marks: Mapping[str, AttendanceMark],
        marked_by: str,
    ) -> int:
        # One cursor/transaction: db_cursor rolls everything back on failure.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_sessions(timetable_id, class_id, subject_code, session_date, marked_by)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE marked_by=VALUES(marked_by), submitted_at=CURRENT_TIMESTAMP
                """,
                (key.timetable_id, key.class_id, key.subject_code, session_date, marked_by),
            )

            # If it was an update, lastrowid can be 0; fetch session_id.
            session_id = int(cur.lastrowid or 0)
            if not session_id:
                cur.execute(
                    """
                    SELECT session_id FROM attendance_sessions
                    WHERE timetable_id=%s AND class_id=%s AND subject_code=%s AND session_date=%s
                    """,
                    (key.timetable_id, key.class_id, key.subject_code, session_date),
                )
                r = fetchone(cur)
                session_id = int(r["session_id"]) if r else 0

            cur.execute("DELETE FROM attendance_marks WHERE session_id=%s", (session_id,))
            cur.executemany(
                "INSERT INTO attendance_marks(session_id, student_id, present) VALUES(%s,%s,%s)",
                [(session_id, m.student_id, 1 if m.present else 0) for m in marks.values()],
            )
            return session_id
