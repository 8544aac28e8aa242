from __future__ import annotations

import logging
from typing import Any, Optional

from ..common.datetime_utils import parse_client_date, today_local
from ..common.validators import parse_id
from ..core.enums import AttendanceStatus
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..students.repository import StudentRepository
from ..teachers.repository import TeacherRepository
from .model import AttendanceRecord, AttendanceSummary
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        teachers: TeacherRepository,
    ):
        self._attendance = attendance
        self._students = students
        self._teachers = teachers

    def mark(
        self,
        *,
        student_id: Any,
        status: Any = AttendanceStatus.PRESENT.value,
        on: Any = None,
        teacher_id: Any = None,
    ) -> AttendanceRecord:
        if student_id in (None, ""):
            raise ValidationError("Please select a student.")

        student = self._students.get_by_id(parse_id(student_id, "Student"))
        if not student:
            raise NotFoundError("Student not found")

        try:
            att_status = AttendanceStatus(str(status or AttendanceStatus.PRESENT.value).strip().capitalize())
        except ValueError:
            raise ValidationError("Status must be Present or Absent")

        att_date = parse_client_date(on, default=today_local())

        tid: Optional[int] = None
        if teacher_id not in (None, ""):
            teacher = self._teachers.get_by_id(parse_id(teacher_id, "Teacher"))
            if not teacher:
                raise NotFoundError("Teacher not found")
            if not any(a.branch_id == student.branch_id and a.year == student.year for a in teacher.assignments):
                raise AuthorizationError("You are not assigned to this student's class")
            tid = teacher.teacher_id

        attendance_id = self._attendance.upsert(
            student_id=student.student_id,
            attendance_date=att_date,
            status=att_status,
            teacher_id=tid,
        )
        logger.info(
            "Attendance marked - student=%s date=%s status=%s", student.student_id, att_date, att_status.value
        )
        return AttendanceRecord(
            attendance_id=attendance_id,
            student_id=student.student_id,
            attendance_date=att_date,
            status=att_status,
            teacher_id=tid,
        )

    def history(self, student_id: Any) -> tuple[list[AttendanceRecord], AttendanceSummary]:
        sid = parse_id(student_id, "Student")
        if not self._students.get_by_id(sid):
            raise NotFoundError("Student not found")

        records = sorted(self._attendance.list_for_student(sid), key=lambda r: r.attendance_date, reverse=True)
        present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT)
        summary = AttendanceSummary(total=len(records), present=present, absent=len(records) - present)
        return records, summary
