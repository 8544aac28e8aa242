from __future__ import annotations

from typing import Any

from flask import Flask, jsonify

from ..common.http import acting_teacher_id, json_body, role_required, teacher_required
from ..container import Container
from ..core.enums import Role


def _attribute_entries(entries: Any) -> Any:
    # Malformed batches pass through untouched; the service rejects them.
    if isinstance(entries, dict):
        entries = [entries]
    if not isinstance(entries, list):
        return entries
    return [
        {**e, "teacherId": acting_teacher_id(e.get("teacherId"))} if isinstance(e, dict) else e
        for e in entries
    ]


def register(app: Flask, container: Container) -> None:
    @app.route("/api/teacher/assign-marks", methods=["POST"], endpoint="teacher_assign_marks")
    @teacher_required
    def assign_marks():
        entries = _attribute_entries(json_body(default=[]))
        count = container.marks_service.assign_marks(entries)
        return jsonify({"message": "Marks assigned successfully!", "count": count})

    @app.route("/api/student/marks/<int:student_id>", methods=["GET"], endpoint="student_marks")
    @role_required(Role.STUDENT, Role.TEACHER, Role.ADMIN, owner_arg="student_id")
    def student_marks(student_id: int):
        return jsonify([m.to_json() for m in container.marks_service.marks_for_student(student_id)])
