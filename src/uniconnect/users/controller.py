from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.http import json_object
from ..container import Container
from ..core.exceptions import AuthenticationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def login():
        data = json_object()
        s_user = container.auth_service.authenticate(data.get("email"), data.get("password"), data.get("role"))

        session.clear()
        session["user_id"] = s_user.user_id
        session["name"] = s_user.name
        session["role"] = s_user.role.value
        session["user"] = s_user.to_json()

        return jsonify({"message": "Login successful", "user": s_user.to_json()})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def logout():
        session.clear()
        return jsonify({"message": "Logged out"})

    @app.route("/api/auth/me", methods=["GET"], endpoint="auth_me")
    def me():
        if "user_id" not in session:
            raise AuthenticationError("Please log in to continue")
        return jsonify({"user": session.get("user")})
