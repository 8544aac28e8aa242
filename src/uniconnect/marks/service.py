from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..common.validators import parse_id, parse_year
from ..core.constants import MAX_MARKS, MIN_MARKS
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..students.repository import StudentRepository
from ..teachers.model import Teacher
from ..teachers.repository import TeacherRepository
from .model import Mark
from .repository import MarkRepository

logger = logging.getLogger(__name__)


def parse_marks(value: Any) -> int:
    if isinstance(value, bool):
        raise ValidationError("Marks must be a whole number")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError("Marks must be a whole number")
        value = int(value)
    try:
        marks = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError("Marks must be a whole number")
    if marks < MIN_MARKS or marks > MAX_MARKS:
        raise ValidationError(f"Marks must be between {MIN_MARKS} and {MAX_MARKS}")
    return marks


class MarksService:
    """Use case: teachers assign marks, students read them."""

    def __init__(self, marks: MarkRepository, students: StudentRepository, teachers: TeacherRepository):
        self._marks = marks
        self._students = students
        self._teachers = teachers

    def _get_teacher(self, teacher_id: Any, cache: dict[int, Teacher]) -> Teacher:
        tid = parse_id(teacher_id, "Teacher")
        if tid not in cache:
            teacher = self._teachers.get_by_id(tid)
            if not teacher:
                raise NotFoundError("Teacher not found")
            cache[tid] = teacher
        return cache[tid]

    def assign_marks(self, entries: Any) -> int:
        """Validate the whole batch, then write it; nothing is stored if any entry is bad."""

        if isinstance(entries, dict):
            entries = [entries]
        if not isinstance(entries, list) or not entries:
            raise ValidationError("Please enter marks for at least one student.")

        teachers: dict[int, Teacher] = {}
        batch: dict[tuple[int, str, int], Mark] = {}
        for entry in entries:
            if not isinstance(entry, dict):
                raise ValidationError("Each mark entry must be an object")

            subject = str(entry.get("subject") or "").strip()
            if not subject:
                raise ValidationError("Please select a subject!")

            student = self._students.get_by_id(parse_id(entry.get("studentId"), "Student"))
            if not student:
                raise NotFoundError("Student not found")

            year_raw = entry.get("year")
            year = parse_year(year_raw) if year_raw not in (None, "") else student.year
            marks = parse_marks(entry.get("marks"))

            teacher_id: Optional[int] = None
            if entry.get("teacherId") not in (None, ""):
                teacher = self._get_teacher(entry.get("teacherId"), teachers)
                if not teacher.teaches(student.branch_id, year, subject):
                    raise AuthorizationError(f"You are not assigned to teach {subject} for this class")
                teacher_id = teacher.teacher_id

            # A repeated (student, subject, year) in the same batch keeps the last value.
            batch[(student.student_id, subject, year)] = Mark(
                student_id=student.student_id,
                subject=subject,
                year=year,
                marks=marks,
                teacher_id=teacher_id,
            )

        count = self._marks.upsert_many(list(batch.values()))
        logger.info("Marks assigned - rows=%d teachers=%s", count, sorted(teachers) or "-")
        return count

    def marks_for_student(self, student_id: Any) -> Sequence[Mark]:
        sid = parse_id(student_id, "Student")
        if not self._students.get_by_id(sid):
            raise NotFoundError("Student not found")
        return sorted(self._marks.list_for_student(sid), key=lambda m: (m.year, m.subject))
