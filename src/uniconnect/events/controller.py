from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import admin_required, json_object
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/events", methods=["GET"], endpoint="admin_events")
    def list_events():
        # Every role sees the event board.
        return jsonify([e.to_json() for e in container.event_service.list_events()])

    @app.route("/api/admin/events", methods=["POST"], endpoint="admin_events_create")
    @admin_required
    def create_event():
        data = json_object()
        event = container.event_service.create_event(
            title=data.get("title"),
            description=data.get("description"),
            on=data.get("date"),
            url=data.get("url"),
        )
        return jsonify({"message": "Event added successfully!", "event": event.to_json()}), 201

    @app.route("/api/admin/events/<int:event_id>", methods=["DELETE"], endpoint="admin_events_delete")
    @admin_required
    def delete_event(event_id: int):
        container.event_service.delete_event(event_id)
        return jsonify({"message": "Event deleted."})
