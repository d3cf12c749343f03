from __future__ import annotations

from typing import Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause
from .model import ClassDetails
from .repository import ClassRepository


def _to_class(r: dict) -> ClassDetails:
    return ClassDetails(
        class_id=r["class_id"],
        branch=r["branch"],
        batch_start=int(r["batch_start"]),
        batch_end=int(r["batch_end"]),
        section=r["section"],
    )


class MySQLClassRepository(ClassRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, class_id: str) -> Optional[ClassDetails]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT class_id, branch, batch_start, batch_end, section FROM classes WHERE class_id=%s",
                (class_id,),
            )
            r = fetchone(cur)
            return _to_class(r) if r else None

    def get_many(self, class_ids: Sequence[str]) -> Mapping[str, ClassDetails]:
        ids = sorted(set(class_ids))
        if not ids:
            return {}

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT class_id, branch, batch_start, batch_end, section
                FROM classes
                WHERE class_id IN ({in_clause(ids)})
                """,
                tuple(ids),
            )
            return {r["class_id"]: _to_class(r) for r in fetchall(cur)}
