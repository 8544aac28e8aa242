from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: a student's attendance for one day."""

    student_id: int
    attendance_date: date
    status: AttendanceStatus
    teacher_id: Optional[int] = None
    attendance_id: int = 0

    def to_json(self) -> dict:
        return {"date": self.attendance_date.strftime("%Y-%m-%d"), "status": self.status.value}


@dataclass(frozen=True)
class AttendanceSummary:
    total: int
    present: int
    absent: int

    @property
    def percentage(self) -> float:
        if not self.total:
            return 0.0
        return round(self.present * 100.0 / self.total, 2)

    def to_json(self) -> dict:
        return {
            "total": self.total,
            "present": self.present,
            "absent": self.absent,
            "percentage": self.percentage,
        }
