from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def upsert(
        self,
        *,
        student_id: int,
        attendance_date: date,
        status: AttendanceStatus,
        teacher_id: Optional[int] = None,
    ) -> int:
        """Create or overwrite the record for (student, date). Returns attendance_id."""

        raise NotImplementedError

    def get_for_student_and_date(self, student_id: int, attendance_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        """Newest first."""

        raise NotImplementedError
