from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Mark
from .repository import MarkRepository


class MySQLMarkRepository(MarkRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert_many(self, marks: Sequence[Mark]) -> int:
        if not marks:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO marks(student_id, subject, year, marks, teacher_id)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE marks=VALUES(marks), teacher_id=VALUES(teacher_id)
                """,
                [(m.student_id, m.subject, m.year, m.marks, m.teacher_id) for m in marks],
            )
            return len(marks)

    def list_for_student(self, student_id: int) -> Sequence[Mark]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, subject, year, marks, teacher_id
                FROM marks
                WHERE student_id=%s
                ORDER BY year ASC, subject ASC
                """,
                (int(student_id),),
            )
            return [
                Mark(
                    student_id=int(r["student_id"]),
                    subject=r["subject"],
                    year=int(r["year"]),
                    marks=int(r["marks"]),
                    teacher_id=int(r["teacher_id"]) if r.get("teacher_id") is not None else None,
                )
                for r in fetchall(cur)
            ]
