from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from werkzeug.security import check_password_hash

from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from ..students.repository import StudentRepository
from ..teachers.repository import TeacherRepository
from .repository import AdminRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login and return to the client."""

    user_id: int
    name: str
    email: str
    role: Role
    extra: dict = field(default_factory=dict)

    def to_json(self) -> dict:
        data = {"_id": self.user_id, "name": self.name, "email": self.email, "role": self.role.value}
        data.update(self.extra)
        return data


class AuthService:
    """Use case: authenticate a student, teacher or admin (login)."""

    def __init__(self, admins: AdminRepository, teachers: TeacherRepository, students: StudentRepository):
        self._admins = admins
        self._teachers = teachers
        self._students = students

    def _lookup(self, role: Role, email: str) -> Optional[tuple[SessionUser, str]]:
        if role == Role.ADMIN:
            admin = self._admins.get_by_email(email)
            if admin:
                return SessionUser(admin.admin_id, admin.name, admin.email, role), admin.password_hash
        elif role == Role.TEACHER:
            teacher = self._teachers.get_by_email(email)
            if teacher:
                return SessionUser(teacher.teacher_id, teacher.name, teacher.email, role), teacher.password_hash
        else:
            student = self._students.get_by_email(email)
            if student:
                extra = {
                    "registerNumber": student.register_number,
                    "branchId": student.branch_id,
                    "year": student.year,
                }
                user = SessionUser(student.student_id, student.name, student.email, role, extra)
                return user, student.password_hash
        return None

    def authenticate(self, email: Any, password: Any, role: Any = Role.STUDENT.value) -> SessionUser:
        email = str(email or "").strip().lower()
        password = str(password or "")
        try:
            role = Role(str(role or Role.STUDENT.value).strip().lower())
        except ValueError:
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not email or not password:
            raise AuthenticationError(INVALID_CREDENTIALS)

        found = self._lookup(role, email)
        if not found:
            logger.warning("Login failed - unknown %s email=%s", role.value, email)
            raise AuthenticationError(INVALID_CREDENTIALS)

        user, password_hash = found
        try:
            ok = check_password_hash(password_hash, password)
        except (TypeError, ValueError):
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.warning("Login failed - wrong password for %s email=%s", role.value, email)
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info("Login successful - %s id=%s", role.value, user.user_id)
        return user
