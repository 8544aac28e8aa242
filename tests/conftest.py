from __future__ import annotations

from dataclasses import replace
from datetime import date, timezone
from types import SimpleNamespace
from typing import Optional, Sequence

import pytest
from werkzeug.security import generate_password_hash

from uniconnect.attendance.model import AttendanceRecord
from uniconnect.branches.model import Branch, BranchYear
from uniconnect.common import datetime_utils
from uniconnect.container import build_services
from uniconnect.core.enums import AttendanceStatus
from uniconnect.events.model import Event
from uniconnect.main import create_app
from uniconnect.marks.model import Mark
from uniconnect.students.model import Student
from uniconnect.teachers.model import Teacher, TeacherAssignment
from uniconnect.users.model import Admin


class InMemoryBranches:
    def __init__(self):
        self._rows: dict[int, Branch] = {}
        self._id = 0

    def list_all(self) -> Sequence[Branch]:
        return sorted(self._rows.values(), key=lambda b: b.branch_name)

    def get_by_id(self, branch_id: int) -> Optional[Branch]:
        return self._rows.get(int(branch_id))

    def get_by_name(self, branch_name: str) -> Optional[Branch]:
        return next((b for b in self._rows.values() if b.branch_name == branch_name), None)

    def create(self, *, branch_name: str, years: Sequence[BranchYear]) -> int:
        self._id += 1
        self._rows[self._id] = Branch(branch_id=self._id, branch_name=branch_name, years=tuple(years))
        return self._id

    def delete_by_id(self, branch_id: int) -> bool:
        return self._rows.pop(int(branch_id), None) is not None


class InMemoryStudents:
    def __init__(self, branches: InMemoryBranches):
        self._branches = branches
        self._rows: dict[int, Student] = {}
        self._id = 0

    def _with_branch_name(self, s: Student) -> Student:
        branch = self._branches.get_by_id(s.branch_id)
        return replace(s, branch_name=branch.branch_name if branch else None)

    def get_by_id(self, student_id: int) -> Optional[Student]:
        s = self._rows.get(int(student_id))
        return self._with_branch_name(s) if s else None

    def get_by_email(self, email: str) -> Optional[Student]:
        return next((s for s in self._rows.values() if s.email == email), None)

    def get_by_register_number(self, register_number: str) -> Optional[Student]:
        return next((s for s in self._rows.values() if s.register_number == register_number), None)

    def create(self, *, name, register_number, email, password_hash, branch_id, year) -> int:
        self._id += 1
        self._rows[self._id] = Student(
            student_id=self._id,
            name=name,
            register_number=register_number,
            email=email,
            password_hash=password_hash,
            branch_id=int(branch_id),
            year=int(year),
        )
        return self._id

    def delete_by_id(self, student_id: int) -> bool:
        return self._rows.pop(int(student_id), None) is not None

    def find(self, *, branch_id=None, year=None) -> Sequence[Student]:
        rows = [
            self._with_branch_name(s)
            for s in self._rows.values()
            if (branch_id is None or s.branch_id == branch_id) and (year is None or s.year == year)
        ]
        return sorted(rows, key=lambda s: s.register_number)

    def count_by_branch(self, branch_id: int) -> int:
        return sum(1 for s in self._rows.values() if s.branch_id == branch_id)


class InMemoryTeachers:
    def __init__(self):
        self._rows: dict[int, Teacher] = {}
        self._id = 0

    def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        return self._rows.get(int(teacher_id))

    def get_by_email(self, email: str) -> Optional[Teacher]:
        return next((t for t in self._rows.values() if t.email == email), None)

    def create(self, *, name, email, password_hash, assignments) -> int:
        self._id += 1
        self._rows[self._id] = Teacher(
            teacher_id=self._id,
            name=name,
            email=email,
            password_hash=password_hash,
            assignments=tuple(assignments),
        )
        return self._id

    def delete_by_id(self, teacher_id: int) -> bool:
        return self._rows.pop(int(teacher_id), None) is not None

    def list_all(self) -> Sequence[Teacher]:
        return sorted(self._rows.values(), key=lambda t: (t.name, t.teacher_id))


class InMemoryMarks:
    def __init__(self):
        self.rows: dict[tuple[int, str, int], Mark] = {}
        self.writes = 0

    def upsert_many(self, marks: Sequence[Mark]) -> int:
        self.writes += 1
        for m in marks:
            self.rows[(m.student_id, m.subject, m.year)] = m
        return len(marks)

    def list_for_student(self, student_id: int) -> Sequence[Mark]:
        return [m for m in self.rows.values() if m.student_id == student_id]


class InMemoryAttendance:
    def __init__(self):
        self.rows: dict[tuple[int, date], AttendanceRecord] = {}
        self._id = 0

    def upsert(self, *, student_id: int, attendance_date: date, status: AttendanceStatus, teacher_id=None) -> int:
        existing = self.rows.get((student_id, attendance_date))
        if existing:
            attendance_id = existing.attendance_id
        else:
            self._id += 1
            attendance_id = self._id
        self.rows[(student_id, attendance_date)] = AttendanceRecord(
            attendance_id=attendance_id,
            student_id=student_id,
            attendance_date=attendance_date,
            status=status,
            teacher_id=teacher_id,
        )
        return attendance_id

    def get_for_student_and_date(self, student_id: int, attendance_date: date) -> Optional[AttendanceRecord]:
        return self.rows.get((student_id, attendance_date))

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        return [r for r in self.rows.values() if r.student_id == student_id]


class InMemoryEvents:
    def __init__(self):
        self._rows: dict[int, Event] = {}
        self._id = 0

    def list_all(self) -> Sequence[Event]:
        return list(self._rows.values())

    def get_by_id(self, event_id: int) -> Optional[Event]:
        return self._rows.get(int(event_id))

    def create(self, *, title, description, event_date, url) -> int:
        self._id += 1
        self._rows[self._id] = Event(
            event_id=self._id, title=title, description=description, event_date=event_date, url=url
        )
        return self._id

    def delete_by_id(self, event_id: int) -> bool:
        return self._rows.pop(int(event_id), None) is not None


class InMemoryAdmins:
    def __init__(self):
        self.by_email: dict[str, Admin] = {}

    def get_by_email(self, email: str) -> Optional[Admin]:
        return self.by_email.get(email)


@pytest.fixture(autouse=True)
def utc_calendar(monkeypatch):
    """Browser timestamps resolve to their UTC day whatever zone the test host is in."""
    monkeypatch.setattr(datetime_utils, "LOCAL_TZ", timezone.utc)


@pytest.fixture
def repos():
    branches = InMemoryBranches()
    return SimpleNamespace(
        admins=InMemoryAdmins(),
        branches=branches,
        students=InMemoryStudents(branches),
        teachers=InMemoryTeachers(),
        marks=InMemoryMarks(),
        attendance=InMemoryAttendance(),
        events=InMemoryEvents(),
    )


@pytest.fixture
def container(repos):
    return build_services(
        admins_repo=repos.admins,
        branches_repo=repos.branches,
        students_repo=repos.students,
        teachers_repo=repos.teachers,
        marks_repo=repos.marks,
        attendance_repo=repos.attendance,
        events_repo=repos.events,
    )


@pytest.fixture
def seeded(repos):
    """Two branches, one student per CSE year 1/2, a teacher for CSE year 1 and an admin."""

    cse = repos.branches.create(
        branch_name="CSE",
        years=[
            BranchYear(year=1, subjects=("Maths", "Physics")),
            BranchYear(year=2, subjects=("Data Structures",)),
        ],
    )
    ece = repos.branches.create(branch_name="ECE", years=[BranchYear(year=1, subjects=("Circuits",))])

    alice = repos.students.create(
        name="Alice",
        register_number="CSE001",
        email="alice@uni.edu",
        password_hash=generate_password_hash("alice@123"),
        branch_id=cse,
        year=1,
    )
    bob = repos.students.create(
        name="Bob",
        register_number="CSE101",
        email="bob@uni.edu",
        password_hash=generate_password_hash("bob@123"),
        branch_id=cse,
        year=2,
    )
    teacher = repos.teachers.create(
        name="Sparrow",
        email="sparrow@uni.edu",
        password_hash=generate_password_hash("sparrow@123"),
        assignments=[
            TeacherAssignment(branch_id=cse, year=1, subject="Maths"),
            TeacherAssignment(branch_id=cse, year=1, subject="Physics"),
        ],
    )
    repos.admins.by_email["jack@uni.edu"] = Admin(
        admin_id=1, name="Jack", email="jack@uni.edu", password_hash=generate_password_hash("jack@123")
    )
    return SimpleNamespace(cse=cse, ece=ece, alice=alice, bob=bob, teacher=teacher, admin=1)


@pytest.fixture
def app(container):
    app = create_app(container=container, settings_module="uniconnect.settings.testing")
    return app


@pytest.fixture
def client(app):
    return app.test_client()
