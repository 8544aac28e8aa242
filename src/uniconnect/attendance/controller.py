from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import acting_teacher_id, json_object, role_required, teacher_required
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    @app.route("/api/teacher/update-attendance", methods=["POST"], endpoint="teacher_update_attendance")
    @teacher_required
    def update_attendance():
        data = json_object()
        record = container.attendance_service.mark(
            student_id=data.get("studentId"),
            status=data.get("status"),
            on=data.get("date"),
            teacher_id=acting_teacher_id(data.get("teacherId")),
        )
        return jsonify({"message": "Attendance marked successfully!", "attendance": record.to_json()})

    @app.route("/api/student/attendance/<int:student_id>", methods=["GET"], endpoint="student_attendance")
    @role_required(Role.STUDENT, Role.TEACHER, Role.ADMIN, owner_arg="student_id")
    def student_attendance(student_id: int):
        records, summary = container.attendance_service.history(student_id)
        return jsonify({"records": [r.to_json() for r in records], "summary": summary.to_json()})
