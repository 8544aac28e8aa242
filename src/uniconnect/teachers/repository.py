from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Teacher, TeacherAssignment


class TeacherRepository(Protocol):
    def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Teacher]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        email: str,
        password_hash: str,
        assignments: Sequence[TeacherAssignment],
    ) -> int:
        raise NotImplementedError

    def delete_by_id(self, teacher_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Teacher]:
        raise NotImplementedError
