from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.validators import require_int
from ..core.exceptions import AuthenticationError, PersistenceError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or {}
        try:
            employee = container.auth_service.login_by_code(str(data.get("code", "")))
            return jsonify({"isAdmin": False, "user": employee.to_dict()})
        except AuthenticationError as e:
            return jsonify({"success": False, "message": str(e)}), 401
        except PersistenceError:
            logger.exception("Employee login failed")
            return jsonify({"success": False, "message": "Server error"}), 500

    @app.route("/api/auth/admin/login", methods=["POST"], endpoint="admin_login")
    def admin_login():
        data = request.get_json(silent=True) or {}
        try:
            admin = container.auth_service.login_admin(data.get("username", ""), data.get("password", ""))
            return jsonify({"isAdmin": True, "user": admin.to_dict()})
        except AuthenticationError as e:
            return jsonify({"success": False, "message": str(e)}), 401

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        try:
            roster = container.employee_service.list_roster()
            return jsonify([e.to_dict() for e in roster])
        except PersistenceError:
            logger.exception("Failed to fetch employees")
            return jsonify({"success": False, "message": "Failed to fetch employees"}), 500

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        data = request.get_json(silent=True) or {}
        try:
            employee = container.employee_service.add_employee(
                name=data.get("name", ""),
                email=data.get("email", ""),
                employee_code=data.get("employeeCode", ""),
            )
            return jsonify(employee.to_dict()), 201
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except PersistenceError:
            logger.exception("Failed to add employee")
            return jsonify({"success": False, "message": "Failed to add employee"}), 500

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: str):
        try:
            container.employee_service.remove_employee(require_int(employee_id, "employee id"))
            return jsonify({"success": True})
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except PersistenceError:
            logger.exception("Failed to delete employee %s", employee_id)
            return jsonify({"success": False, "message": "Failed to delete employee"}), 500
