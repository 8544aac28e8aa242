from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import admin_required, json_object, role_required, teacher_required
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/add-student", methods=["POST"], endpoint="admin_add_student")
    @admin_required
    def add_student():
        data = json_object()
        student = container.student_service.add_student(
            name=data.get("name"),
            register_number=data.get("registerNumber"),
            email=data.get("email"),
            password=data.get("password"),
            branch_id=data.get("branchId"),
            year=data.get("year"),
        )
        return jsonify({"message": "Student added successfully!", "student": student.to_json()}), 201

    @app.route("/api/admin/students", methods=["GET"], endpoint="admin_students")
    @admin_required
    def list_students():
        students = container.student_service.list_students(
            branch_id=request.args.get("branchId"),
            year=request.args.get("year"),
        )
        return jsonify([s.to_json() for s in students])

    @app.route("/api/admin/students/<int:student_id>", methods=["DELETE"], endpoint="admin_students_delete")
    @admin_required
    def delete_student(student_id: int):
        container.student_service.delete_student(student_id)
        return jsonify({"message": "Student deleted."})

    @app.route("/api/student/get/<int:student_id>", methods=["GET"], endpoint="student_get")
    @role_required(Role.STUDENT, Role.TEACHER, Role.ADMIN, owner_arg="student_id")
    def get_student(student_id: int):
        return jsonify(container.student_service.get_student(student_id).to_json())

    @app.route("/api/teacher/students", methods=["GET"], endpoint="teacher_students")
    @teacher_required
    def roster():
        students = container.student_service.roster(
            branch_id=request.args.get("branchId"),
            year=request.args.get("year"),
        )
        return jsonify([s.to_roster_json() for s in students])
