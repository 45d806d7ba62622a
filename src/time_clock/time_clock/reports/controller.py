from __future__ import annotations

import io
import logging

from flask import Flask, jsonify, request, send_file

from ..core.constants import XLSX_MIMETYPE
from ..core.exceptions import NoReportDataError, PersistenceError, ValidationError
from ..container import Container
from .excel import report_filename

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _default_date() -> str:
        return container.clock.now().date().isoformat()

    def _report_params(source) -> tuple:
        return (
            source.get("date") or _default_date(),
            source.get("type") or "daily",
            source.get("end") or source.get("endDate"),
        )

    @app.route("/api/reports", methods=["GET"], endpoint="report_data")
    def report_data():
        try:
            report = container.report_service.build(*_report_params(request.args))
            return jsonify(
                {
                    "type": report.report_type.value,
                    "range": report.range.to_dict(),
                    "rows": container.report_service.to_rows_ui(report),
                }
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except PersistenceError:
            logger.exception("Failed to fetch report data")
            return jsonify({"success": False, "message": "Failed to fetch report data"}), 500

    @app.route("/api/reports/export", methods=["GET"], endpoint="report_export")
    def report_export():
        try:
            report = container.report_service.build(*_report_params(request.args))
            content = container.report_service.export(report)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except PersistenceError:
            logger.exception("Failed to export report")
            return jsonify({"success": False, "message": "Failed to export report"}), 500

        return send_file(
            io.BytesIO(content),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=report_filename(report),
        )

    @app.route("/api/email/send-report", methods=["POST"], endpoint="send_report")
    def send_report():
        data = request.get_json(silent=True) or {}
        try:
            container.report_service.email_report(*_report_params(data))
            return jsonify({"success": True})
        except NoReportDataError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except (PersistenceError, OSError):
            logger.exception("Failed to send report")
            return jsonify({"success": False, "message": "Failed to send report"}), 500
