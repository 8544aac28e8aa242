from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: Student.

    Note: plain data object, no DB access code.
    """

    student_id: int
    name: str
    register_number: str
    email: str
    password_hash: str
    branch_id: int
    year: int
    branch_name: Optional[str] = None

    def to_json(self) -> dict:
        return {
            "_id": self.student_id,
            "name": self.name,
            "registerNumber": self.register_number,
            "email": self.email,
            "branchId": self.branch_id,
            "branchName": self.branch_name,
            "year": self.year,
        }

    def to_roster_json(self) -> dict:
        return {"_id": self.student_id, "registerNumber": self.register_number, "name": self.name}
