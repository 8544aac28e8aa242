from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Student]:
        raise NotImplementedError

    def get_by_register_number(self, register_number: str) -> Optional[Student]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        register_number: str,
        email: str,
        password_hash: str,
        branch_id: int,
        year: int,
    ) -> int:
        raise NotImplementedError

    def delete_by_id(self, student_id: int) -> bool:
        raise NotImplementedError

    def find(self, *, branch_id: Optional[int] = None, year: Optional[int] = None) -> Sequence[Student]:
        """Students ordered by register number, optionally filtered."""

        raise NotImplementedError

    def count_by_branch(self, branch_id: int) -> int:
        raise NotImplementedError
