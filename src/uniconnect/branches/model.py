from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence


@dataclass(frozen=True)
class BranchYear:
    year: int
    subjects: tuple[str, ...] = ()

    def to_json(self) -> dict:
        return {"year": self.year, "subjects": list(self.subjects)}


@dataclass(frozen=True)
class Branch:
    """Domain entity: an academic program with subjects per year."""

    branch_id: int
    branch_name: str
    years: tuple[BranchYear, ...] = field(default_factory=tuple)

    def get_year(self, year: int) -> Optional[BranchYear]:
        for y in self.years:
            if y.year == year:
                return y
        return None

    def subjects_for_years(self, years: Sequence[int]) -> list[str]:
        wanted = set(years)
        out: list[str] = []
        for y in sorted(self.years, key=lambda by: by.year):
            if y.year in wanted:
                out.extend(y.subjects)
        return out

    def offers(self, year: int, subject: str) -> bool:
        by = self.get_year(year)
        return bool(by and subject in by.subjects)

    def to_json(self) -> dict:
        return {
            "_id": self.branch_id,
            "branchName": self.branch_name,
            "years": [y.to_json() for y in sorted(self.years, key=lambda by: by.year)],
        }
