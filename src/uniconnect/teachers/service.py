from __future__ import annotations

import logging
from typing import Any, Sequence

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
from .model import Teacher, TeacherAssignment, TeachingBranch, group_assignments
from .repository import TeacherRepository

logger = logging.getLogger(__name__)


class TeacherService:
    """Use case: manage teachers and answer "what can this teacher teach"."""

    def __init__(self, teachers: TeacherRepository, branches: BranchRepository):
        self._teachers = teachers
        self._branches = branches

    def _parse_assignments(self, branches: Any) -> list[TeacherAssignment]:
        if branches in (None, ""):
            return []
        if not isinstance(branches, list):
            raise ValidationError("Branches must be a list")

        out: list[TeacherAssignment] = []
        seen: set[tuple[int, int, str]] = set()
        for entry in branches:
            if not isinstance(entry, dict):
                raise ValidationError("Each branch entry needs a branchId and years")
            branch_id = parse_id(entry.get("branchId"), "Branch")
            branch = self._branches.get_by_id(branch_id)
            if not branch:
                raise NotFoundError("Branch not found")

            years = entry.get("years") or []
            if not isinstance(years, list) or not years:
                raise ValidationError("Please select a branch, at least one year, and a subject.")
            for y in years:
                if not isinstance(y, dict):
                    raise ValidationError("Each year needs a year number and subjects")
                year = parse_year(y.get("year"))
                subjects = y.get("subjects") or []
                if not isinstance(subjects, list) or not subjects:
                    raise ValidationError("Please select a branch, at least one year, and a subject.")
                for s in subjects:
                    subject = require_non_empty(s, "Subject")
                    if not branch.offers(year, subject):
                        raise ValidationError(f"{subject} is not taught in {branch.branch_name} year {year}")
                    key = (branch_id, year, subject)
                    if key in seen:
                        continue
                    seen.add(key)
                    out.append(TeacherAssignment(branch_id=branch_id, year=year, subject=subject))
        return out

    def add_teacher(self, *, name: Any, email: Any, password: Any, branches: Any = None) -> int:
        require_fields({"name": name, "email": email, "password": password}, ["name", "email", "password"])
        name = require_non_empty(name, "Name")
        email = require_email(email)
        require_min_length(str(password), "Password", MIN_PASSWORD_LENGTH)

        if self._teachers.get_by_email(email):
            raise ConflictError("Email already exists")

        assignments = self._parse_assignments(branches)
        teacher_id = self._teachers.create(
            name=name,
            email=email,
            password_hash=generate_password_hash(str(password)),
            assignments=assignments,
        )
        logger.info("Teacher created - id=%s assignments=%d", teacher_id, len(assignments))
        return teacher_id

    def get_teacher(self, teacher_id: Any) -> Teacher:
        teacher = self._teachers.get_by_id(parse_id(teacher_id, "Teacher"))
        if not teacher:
            raise NotFoundError("Teacher not found")
        return teacher

    def list_teachers(self) -> Sequence[Teacher]:
        return self._teachers.list_all()

    def delete_teacher(self, teacher_id: Any) -> None:
        teacher = self.get_teacher(teacher_id)
        if not self._teachers.delete_by_id(teacher.teacher_id):
            raise ValidationError("Failed to delete teacher")
        logger.info("Teacher deleted - id=%s", teacher.teacher_id)

    def _branch_names(self) -> dict[int, str]:
        return {b.branch_id: b.branch_name for b in self._branches.list_all()}

    def teaching_branches(self, teacher_id: Any) -> list[TeachingBranch]:
        teacher = self.get_teacher(teacher_id)
        return group_assignments(teacher.assignments, self._branch_names())

    def profile(self, teacher_id: Any) -> dict:
        """Teacher with branch references populated, one entry per branch."""
        teacher = self.get_teacher(teacher_id)
        grouped = group_assignments(teacher.assignments, self._branch_names())
        data = teacher.to_json()
        data["branches"] = [
            {
                "branchId": {"_id": tb.branch_id, "branchName": tb.branch_name},
                "years": [{"year": y, "subjects": list(tb.subjects_by_year[y])} for y in tb.years],
            }
            for tb in grouped
        ]
        return data

    def subjects_for(self, *, teacher_id: Any, branch_id: Any, year: Any) -> list[str]:
        if teacher_id in (None, "") or branch_id in (None, "") or year in (None, ""):
            raise ValidationError("teacherId, branchId and year are required")
        teacher = self.get_teacher(teacher_id)
        return teacher.subjects_for(parse_id(branch_id, "Branch"), parse_year(year))
