from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_int
from ..core.exceptions import PersistenceError, SessionAlreadyOpenError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _employee_id_from_body() -> int:
        data = request.get_json(silent=True) or {}
        employee_id = require_int(data.get("employeeId"), "employeeId")
        container.employee_service.get(employee_id)
        return employee_id

    @app.route("/api/time/clock-in", methods=["POST"], endpoint="clock_in")
    def clock_in():
        try:
            session = container.session_tracker.open_session(_employee_id_from_body())
            return jsonify(session.to_dict())
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except SessionAlreadyOpenError as e:
            return jsonify({"success": False, "message": str(e)}), 409
        except PersistenceError:
            logger.exception("Clock-in failed")
            return jsonify({"success": False, "message": "Failed to clock in"}), 500

    @app.route("/api/time/clock-out", methods=["POST"], endpoint="clock_out")
    def clock_out():
        try:
            session = container.session_tracker.close_session(_employee_id_from_body())
            return jsonify(session.to_dict() if session else None)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except PersistenceError:
            logger.exception("Clock-out failed")
            return jsonify({"success": False, "message": "Failed to clock out"}), 500

    @app.route("/api/time/active/<employee_id>", methods=["GET"], endpoint="active_status")
    def active_status(employee_id: str):
        try:
            return jsonify(container.session_tracker.is_active(require_int(employee_id, "employee id")))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except PersistenceError:
            logger.exception("Failed to fetch active status for %s", employee_id)
            return jsonify({"success": False, "message": "Failed to fetch active status"}), 500

    @app.route("/api/time/<employee_id>", methods=["GET"], endpoint="time_history")
    def time_history(employee_id: str):
        try:
            date_s = request.args.get("date")
            work_date = parse_iso_date(date_s) if date_s else None
            sessions = container.session_tracker.history(require_int(employee_id, "employee id"), work_date=work_date)
            return jsonify([s.to_dict() for s in sessions])
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except PersistenceError:
            logger.exception("Failed to fetch time records for %s", employee_id)
            return jsonify({"success": False, "message": "Failed to fetch time records"}), 500
