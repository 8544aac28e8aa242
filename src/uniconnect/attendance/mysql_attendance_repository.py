from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        student_id=int(r["student_id"]),
        attendance_date=normalize_mysql_date(r["attendance_date"]),
        status=AttendanceStatus(r["status"]),
        teacher_id=int(r["teacher_id"]) if r.get("teacher_id") is not None else None,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(
        self,
        *,
        student_id: int,
        attendance_date: date,
        status: AttendanceStatus,
        teacher_id: Optional[int] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(student_id, attendance_date, status, teacher_id)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status), teacher_id=VALUES(teacher_id)
                """,
                (int(student_id), attendance_date, status.value, teacher_id),
            )

            # If it was an update, lastrowid can be 0; fetch attendance_id.
            if cur.lastrowid:
                return int(cur.lastrowid)

            cur.execute(
                "SELECT attendance_id FROM attendance WHERE student_id=%s AND attendance_date=%s",
                (int(student_id), attendance_date),
            )
            r = fetchone(cur)
            return int(r["attendance_id"]) if r else 0

    def get_for_student_and_date(self, student_id: int, attendance_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, student_id, attendance_date, status, teacher_id
                FROM attendance
                WHERE student_id=%s AND attendance_date=%s
                """,
                (int(student_id), attendance_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, student_id, attendance_date, status, teacher_id
                FROM attendance
                WHERE student_id=%s
                ORDER BY attendance_date DESC
                """,
                (int(student_id),),
            )
            return [_to_record(r) for r in fetchall(cur)]
