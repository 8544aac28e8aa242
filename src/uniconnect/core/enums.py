from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Portal roles; each one logs in against its own table."""

    STUDENT = "student"
    TEACHER = "teacher"
    ADMIN = "admin"


class AttendanceStatus(str, Enum):
    PRESENT = "Present"
    ABSENT = "Absent"
