from __future__ import annotations

import logging

from flask import Flask, jsonify, session

from ..common.web import handles_errors, json_body
from ..container import Container
from ..core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok", "message": "Employee Payroll Management System API is running"})

    @app.route("/api/registration-status", methods=["GET"], endpoint="registration_status")
    @handles_errors("checking registration status")
    def registration_status():
        return jsonify({"registrationOpen": container.registration_service.registration_open()})

    @app.route("/api/register-admin", methods=["POST"], endpoint="register_admin")
    @handles_errors("registering the administrator")
    def register_admin():
        data = json_body()
        user_id = container.registration_service.register_admin(
            username=data.get("username", ""),
            password=data.get("password", ""),
        )
        logger.info("Administrator account %s created", user_id)
        return jsonify({"message": "Admin registration successful. Please login.", "userId": user_id}), 201

    @app.route("/api/login", methods=["POST"], endpoint="login")
    @handles_errors("logging in")
    def login():
        data = json_body()
        try:
            s_user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))
        except AuthenticationError:
            logger.warning("Failed login for %r", data.get("username"))
            raise

        session.clear()
        session.permanent = True
        session["user_id"] = s_user.user_id
        session["username"] = s_user.username
        session["role"] = s_user.role.value

        return jsonify({"message": "Login successful", "user": s_user.to_dict()})

    @app.route("/api/logout", methods=["GET", "POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"message": "Logout successful"})

    @app.route("/api/check-auth", methods=["GET"], endpoint="check_auth")
    def check_auth():
        if "user_id" in session:
            return jsonify(
                {
                    "isAuthenticated": True,
                    "user": {"id": session["user_id"], "username": session.get("username"), "role": session.get("role")},
                }
            )
        return jsonify({"isAuthenticated": False})
