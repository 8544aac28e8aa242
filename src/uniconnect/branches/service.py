from __future__ import annotations

import logging
from typing import Any, Sequence

from ..common.validators import parse_id, parse_year, require_non_empty, unique_in_order
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..students.repository import StudentRepository
from .model import Branch, BranchYear
from .repository import BranchRepository

logger = logging.getLogger(__name__)


class BranchService:
    """Use case: configure branches and the subjects taught each year."""

    def __init__(self, branches: BranchRepository, students: StudentRepository):
        self._branches = branches
        self._students = students

    def list_branches(self) -> Sequence[Branch]:
        return self._branches.list_all()

    def get_branch(self, branch_id: Any) -> Branch:
        branch = self._branches.get_by_id(parse_id(branch_id, "Branch"))
        if not branch:
            raise NotFoundError("Branch not found")
        return branch

    def create_branch(self, *, branch_name: str, years: Sequence[Any]) -> int:
        branch_name = require_non_empty(branch_name, "Branch name")
        if self._branches.get_by_name(branch_name):
            raise ConflictError("Branch already exists")

        by_year: dict[int, list[str]] = {}
        for item in years or []:
            if not isinstance(item, dict):
                raise ValidationError("Each year needs a year number and a list of subjects")
            year = parse_year(item.get("year"))
            subjects = item.get("subjects") or []
            if not isinstance(subjects, list):
                raise ValidationError("Subjects must be a list")
            cleaned = [require_non_empty(s, "Subject") for s in subjects]
            by_year.setdefault(year, []).extend(cleaned)

        branch_years = [
            BranchYear(year=year, subjects=tuple(unique_in_order(subjects)))
            for year, subjects in sorted(by_year.items())
        ]
        branch_id = self._branches.create(branch_name=branch_name, years=branch_years)
        logger.info("Branch created - id=%s name=%s", branch_id, branch_name)
        return branch_id

    def delete_branch(self, branch_id: Any) -> None:
        branch = self.get_branch(branch_id)
        if self._students.count_by_branch(branch.branch_id) > 0:
            raise ConflictError("Branch still has students")
        if not self._branches.delete_by_id(branch.branch_id):
            raise ValidationError("Failed to delete branch")
        logger.info("Branch deleted - id=%s", branch.branch_id)

    def subjects_for(self, branch_id: int, years: Sequence[Any]) -> list[str]:
        """Subjects of the selected years, flattened in year order."""
        if not years:
            return []
        branch = self.get_branch(branch_id)
        return branch.subjects_for_years([parse_year(y) for y in years])
