from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from werkzeug.security import generate_password_hash

from ..branches.repository import BranchRepository
from ..common.validators import (
    parse_id,
    parse_year,
    require_email,
    require_fields,
    require_min_length,
    require_non_empty,
)
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Use case: manage students (admin) and class rosters (teacher)."""

    def __init__(self, students: StudentRepository, branches: BranchRepository):
        self._students = students
        self._branches = branches

    def add_student(
        self,
        *,
        name: Any,
        register_number: Any,
        email: Any,
        password: Any,
        branch_id: Any,
        year: Any,
    ) -> Student:
        require_fields(
            {
                "name": name,
                "register_number": register_number,
                "email": email,
                "password": password,
                "branch_id": branch_id,
                "year": year,
            },
            ["name", "register_number", "email", "password", "branch_id", "year"],
        )

        name = require_non_empty(name, "Name")
        register_number = require_non_empty(register_number, "Register number")
        email = require_email(email)
        require_min_length(str(password), "Password", MIN_PASSWORD_LENGTH)
        branch_id = parse_id(branch_id, "Branch")
        year = parse_year(year)

        if not self._branches.get_by_id(branch_id):
            raise NotFoundError("Branch not found")
        if self._students.get_by_register_number(register_number):
            raise ConflictError("Register number already exists")
        if self._students.get_by_email(email):
            raise ConflictError("Email already exists")

        student_id = self._students.create(
            name=name,
            register_number=register_number,
            email=email,
            password_hash=generate_password_hash(str(password)),
            branch_id=branch_id,
            year=year,
        )
        logger.info("Student created - id=%s register_number=%s", student_id, register_number)
        return self.get_student(student_id)

    def get_student(self, student_id: Any) -> Student:
        student = self._students.get_by_id(parse_id(student_id, "Student"))
        if not student:
            raise NotFoundError("Student not found")
        return student

    def list_students(self, *, branch_id: Optional[Any] = None, year: Optional[Any] = None) -> Sequence[Student]:
        return self._students.find(
            branch_id=parse_id(branch_id, "Branch") if branch_id not in (None, "") else None,
            year=parse_year(year) if year not in (None, "") else None,
        )

    def roster(self, *, branch_id: Any, year: Any) -> Sequence[Student]:
        """Students of one branch/year, the list a teacher grades or marks present."""
        if branch_id in (None, "") or year in (None, ""):
            raise ValidationError("Branch and year are required")
        return self._students.find(branch_id=parse_id(branch_id, "Branch"), year=parse_year(year))

    def delete_student(self, student_id: Any) -> None:
        student = self.get_student(student_id)
        if not self._students.delete_by_id(student.student_id):
            raise ValidationError("Failed to delete student")
        logger.info("Student deleted - id=%s", student.student_id)
