from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping

from ..common.validators import unique_in_order


@dataclass(frozen=True)
class TeacherAssignment:
    """One (branch, year, subject) a teacher is allowed to teach."""

    branch_id: int
    year: int
    subject: str


@dataclass(frozen=True)
class Teacher:
    teacher_id: int
    name: str
    email: str
    password_hash: str
    assignments: tuple[TeacherAssignment, ...] = ()

    def teaches(self, branch_id: int, year: int, subject: str) -> bool:
        return any(
            a.branch_id == branch_id and a.year == year and a.subject == subject for a in self.assignments
        )

    def subjects_for(self, branch_id: int, year: int) -> list[str]:
        return unique_in_order(
            a.subject for a in self.assignments if a.branch_id == branch_id and a.year == year
        )

    def to_json(self) -> dict:
        return {"_id": self.teacher_id, "name": self.name, "email": self.email}


@dataclass(frozen=True)
class TeachingBranch:
    """Read-model: one branch a teacher works in, with its years and subjects."""

    branch_id: int
    branch_name: str
    years: tuple[int, ...]
    subjects_by_year: Mapping[int, tuple[str, ...]] = field(default_factory=dict)

    def to_json(self) -> dict:
        return {
            "branchId": self.branch_id,
            "branchName": self.branch_name,
            "years": list(self.years),
            "subjectsByYear": {str(y): list(s) for y, s in self.subjects_by_year.items()},
        }


def group_assignments(
    assignments: Iterable[TeacherAssignment],
    branch_names: Mapping[int, str],
) -> list[TeachingBranch]:
    """Collapse flat assignments into one entry per branch.

    Branches keep first-seen order, years are unique and ascending, subjects
    are unique in first-seen order.
    """

    per_branch: dict[int, dict[int, list[str]]] = {}
    for a in assignments:
        per_branch.setdefault(a.branch_id, {}).setdefault(a.year, []).append(a.subject)

    out: list[TeachingBranch] = []
    for branch_id, years in per_branch.items():
        ordered = sorted(years)
        out.append(
            TeachingBranch(
                branch_id=branch_id,
                branch_name=branch_names.get(branch_id, ""),
                years=tuple(ordered),
                subjects_by_year={y: tuple(unique_in_order(years[y])) for y in ordered},
            )
        )
    return out
