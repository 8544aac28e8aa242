from __future__ import annotations

from typing import Protocol, Sequence

from .model import Mark


class MarkRepository(Protocol):
    def upsert_many(self, marks: Sequence[Mark]) -> int:
        """Insert or overwrite marks keyed by (student, subject, year) in one transaction.

        Returns the number of rows written.
        """

        raise NotImplementedError

    def list_for_student(self, student_id: int) -> Sequence[Mark]:
        raise NotImplementedError
