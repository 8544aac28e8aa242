from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import admin_required, json_object, teacher_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/add-teacher", methods=["POST"], endpoint="admin_add_teacher")
    @admin_required
    def add_teacher():
        data = json_object()
        teacher_id = container.teacher_service.add_teacher(
            name=data.get("name"),
            email=data.get("email"),
            password=data.get("password"),
            branches=data.get("branches"),
        )
        return jsonify({"message": "Teacher added successfully!", "teacher": {"_id": teacher_id}}), 201

    @app.route("/api/admin/teachers", methods=["GET"], endpoint="admin_teachers")
    @admin_required
    def list_teachers():
        return jsonify([t.to_json() for t in container.teacher_service.list_teachers()])

    @app.route("/api/admin/teachers/<int:teacher_id>", methods=["DELETE"], endpoint="admin_teachers_delete")
    @admin_required
    def delete_teacher(teacher_id: int):
        container.teacher_service.delete_teacher(teacher_id)
        return jsonify({"message": "Teacher deleted."})

    @app.route("/api/teacher/get/<int:teacher_id>", methods=["GET"], endpoint="teacher_get")
    @teacher_required
    def get_teacher(teacher_id: int):
        return jsonify(container.teacher_service.profile(teacher_id))

    @app.route("/api/teacher/get-subjects", methods=["GET"], endpoint="teacher_subjects")
    @teacher_required
    def get_subjects():
        subjects = container.teacher_service.subjects_for(
            teacher_id=request.args.get("teacherId"),
            branch_id=request.args.get("branchId"),
            year=request.args.get("year"),
        )
        return jsonify({"subjects": subjects})

    @app.route("/api/teacher/branches/<int:teacher_id>", methods=["GET"], endpoint="teacher_branches")
    @teacher_required
    def teaching_branches(teacher_id: int):
        return jsonify([tb.to_json() for tb in container.teacher_service.teaching_branches(teacher_id)])
