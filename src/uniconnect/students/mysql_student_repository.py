from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Student
from .repository import StudentRepository

_SELECT = """
    SELECT s.student_id, s.name, s.register_number, s.email, s.password_hash,
           s.branch_id, s.year, b.branch_name
    FROM students s
    LEFT JOIN branches b ON b.branch_id = s.branch_id
"""


def _to_student(row: dict) -> Student:
    return Student(
        student_id=int(row["student_id"]),
        name=row["name"],
        register_number=row["register_number"],
        email=row["email"],
        password_hash=row["password_hash"],
        branch_id=int(row["branch_id"]),
        year=int(row["year"]),
        branch_name=row.get("branch_name"),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get_one(self, where: str, params: tuple) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE {where}", params)
            row = fetchone(cur)
            return _to_student(row) if row else None

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self._get_one("s.student_id=%s", (int(student_id),))

    def get_by_email(self, email: str) -> Optional[Student]:
        return self._get_one("s.email=%s", (email,))

    def get_by_register_number(self, register_number: str) -> Optional[Student]:
        return self._get_one("s.register_number=%s", (register_number,))

    def create(
        self,
        *,
        name: str,
        register_number: str,
        email: str,
        password_hash: str,
        branch_id: int,
        year: int,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO students(name, register_number, email, password_hash, branch_id, year)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (name, register_number, email, password_hash, int(branch_id), int(year)),
            )
            return int(cur.lastrowid)

    def delete_by_id(self, student_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE student_id=%s", (int(student_id),))
            return cur.rowcount > 0

    def find(self, *, branch_id: Optional[int] = None, year: Optional[int] = None) -> Sequence[Student]:
        clauses: list[str] = []
        params: list[object] = []
        if branch_id is not None:
            clauses.append("s.branch_id=%s")
            params.append(int(branch_id))
        if year is not None:
            clauses.append("s.year=%s")
            params.append(int(year))

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} {where} ORDER BY s.register_number ASC", tuple(params))
            return [_to_student(r) for r in fetchall(cur)]

    def count_by_branch(self, branch_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM students WHERE branch_id=%s", (int(branch_id),))
            row = fetchone(cur)
            return int(row["n"]) if row else 0
