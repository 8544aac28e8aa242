from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, placeholders
from .model import Teacher, TeacherAssignment
from .repository import TeacherRepository


class MySQLTeacherRepository(TeacherRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _fetch(self, where: str = "", params: tuple = ()) -> list[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT teacher_id, name, email, password_hash
                FROM teachers
                {where}
                ORDER BY name ASC, teacher_id ASC
                """,
                params,
            )
            rows = fetchall(cur)
            if not rows:
                return []

            ids = [int(r["teacher_id"]) for r in rows]
            cur.execute(
                f"""
                SELECT teacher_id, branch_id, year, subject
                FROM teacher_assignments
                WHERE teacher_id IN ({placeholders(len(ids))})
                ORDER BY assignment_id ASC
                """,
                tuple(ids),
            )
            assignments: dict[int, list[TeacherAssignment]] = {}
            for a in fetchall(cur):
                assignments.setdefault(int(a["teacher_id"]), []).append(
                    TeacherAssignment(branch_id=int(a["branch_id"]), year=int(a["year"]), subject=a["subject"])
                )

            return [
                Teacher(
                    teacher_id=int(r["teacher_id"]),
                    name=r["name"],
                    email=r["email"],
                    password_hash=r["password_hash"],
                    assignments=tuple(assignments.get(int(r["teacher_id"]), [])),
                )
                for r in rows
            ]

    def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        rows = self._fetch("WHERE teacher_id=%s", (int(teacher_id),))
        return rows[0] if rows else None

    def get_by_email(self, email: str) -> Optional[Teacher]:
        rows = self._fetch("WHERE email=%s", (email,))
        return rows[0] if rows else None

    def create(
        self,
        *,
        name: str,
        email: str,
        password_hash: str,
        assignments: Sequence[TeacherAssignment],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO teachers(name, email, password_hash) VALUES(%s,%s,%s)",
                (name, email, password_hash),
            )
            teacher_id = int(cur.lastrowid)
            if assignments:
                cur.executemany(
                    """
                    INSERT IGNORE INTO teacher_assignments(teacher_id, branch_id, year, subject)
                    VALUES(%s,%s,%s,%s)
                    """,
                    [(teacher_id, a.branch_id, a.year, a.subject) for a in assignments],
                )
            return teacher_id

    def delete_by_id(self, teacher_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM teachers WHERE teacher_id=%s", (int(teacher_id),))
            return cur.rowcount > 0

    def list_all(self) -> Sequence[Teacher]:
        return self._fetch()
