from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import admin_required, json_object
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/branches", methods=["GET"], endpoint="admin_branches")
    def list_branches():
        # Public: the add-student and add-teacher forms load it before anyone is checked.
        return jsonify([b.to_json() for b in container.branch_service.list_branches()])

    @app.route("/api/admin/branches", methods=["POST"], endpoint="admin_branches_create")
    @admin_required
    def create_branch():
        data = json_object()
        branch_id = container.branch_service.create_branch(
            branch_name=data.get("branchName"),
            years=data.get("years") or [],
        )
        branch = container.branch_service.get_branch(branch_id)
        return jsonify({"message": "Branch added successfully!", "branch": branch.to_json()}), 201

    @app.route("/api/admin/branches/<int:branch_id>", methods=["DELETE"], endpoint="admin_branches_delete")
    @admin_required
    def delete_branch(branch_id: int):
        container.branch_service.delete_branch(branch_id)
        return jsonify({"message": "Branch deleted."})

    @app.route("/api/admin/branches/<int:branch_id>/subjects", methods=["GET"], endpoint="admin_branch_subjects")
    @admin_required
    def branch_subjects(branch_id: int):
        # ?years=1&years=2, the years ticked on the add-teacher form
        subjects = container.branch_service.subjects_for(branch_id, request.args.getlist("years"))
        return jsonify({"subjects": subjects})
