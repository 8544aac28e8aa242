from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .branches.mysql_branch_repository import MySQLBranchRepository
from .branches.service import BranchService
from .database.connection import DBConfig, DatabaseConnection
from .events.mysql_event_repository import MySQLEventRepository
from .events.service import EventService
from .marks.mysql_mark_repository import MySQLMarkRepository
from .marks.service import MarksService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.service import StudentService
from .teachers.mysql_teacher_repository import MySQLTeacherRepository
from .teachers.service import TeacherService
from .users.mysql_admin_repository import MySQLAdminRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    auth_service: AuthService
    branch_service: BranchService
    student_service: StudentService
    teacher_service: TeacherService
    marks_service: MarksService
    attendance_service: AttendanceService
    event_service: EventService


def build_services(
    *,
    admins_repo,
    branches_repo,
    students_repo,
    teachers_repo,
    marks_repo,
    attendance_repo,
    events_repo,
) -> Container:
    """Wire services on top of any repositories that satisfy the protocols."""

    return Container(
        auth_service=AuthService(admins_repo, teachers_repo, students_repo),
        branch_service=BranchService(branches_repo, students_repo),
        student_service=StudentService(students_repo, branches_repo),
        teacher_service=TeacherService(teachers_repo, branches_repo),
        marks_service=MarksService(marks_repo, students_repo, teachers_repo),
        attendance_service=AttendanceService(attendance_repo, students_repo, teachers_repo),
        event_service=EventService(events_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        admins_repo=MySQLAdminRepository(conn),
        branches_repo=MySQLBranchRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        teachers_repo=MySQLTeacherRepository(conn),
        marks_repo=MySQLMarkRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        events_repo=MySQLEventRepository(conn),
    )
