from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import PASS_MARKS


@dataclass(frozen=True)
class Mark:
    """Domain entity: the score of one student in one subject for one year."""

    student_id: int
    subject: str
    year: int
    marks: int
    teacher_id: Optional[int] = None

    @property
    def passed(self) -> bool:
        return self.marks >= PASS_MARKS

    def to_json(self) -> dict:
        return {"subject": self.subject, "year": self.year, "marks": self.marks, "passed": self.passed}
