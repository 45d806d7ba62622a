from __future__ import annotations

import importlib
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .common.logging_config import configure_logging
from .container import Container, build_container
from .core.exceptions import PersistenceError
from .database.bootstrap import apply_schema
from .database.mysql_base import db_cursor
from .employees.controller import register as register_employees
from .reports.controller import register as register_reports
from .reports.scheduler import build_report_scheduler
from .sessions.controller import register as register_sessions

logger = logging.getLogger(__name__)


def register_health(app: Flask, container: Container) -> None:
    @app.route("/health", endpoint="health")
    def health():
        if container.conn is None:
            return jsonify({"status": "healthy", "database": "not configured"})
        try:
            with db_cursor(container.conn, dictionary=False) as (_, cur):
                cur.execute("SELECT 1")
                cur.fetchone()
        except PersistenceError:
            logger.exception("Health check failed")
            return jsonify({"status": "unhealthy", "database": "unreachable"}), 503
        return jsonify({"status": "healthy", "database": "connected"})


def register_all(app: Flask, container: Container) -> None:
    app.extensions["time_clock"] = container
    register_health(app, container)
    register_employees(app, container)
    register_sessions(app, container)
    register_reports(app, container)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(settings)

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    db_config = getattr(settings, "DB_CONFIG")
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)

        container = build_container(
            db_config=db_config,
            smtp_config=getattr(settings, "SMTP_CONFIG", None),
            admin={
                "user": getattr(settings, "ADMIN_USER", ""),
                "password": getattr(settings, "ADMIN_PASS", ""),
                "email": getattr(settings, "ADMIN_EMAIL", None),
            },
            report_recipient=getattr(settings, "REPORT_RECIPIENT", None),
        )

    register_all(app, container)

    if bool(getattr(settings, "REPORT_SCHEDULE_ENABLED", False)) and not app.config["TESTING"]:
        scheduler = build_report_scheduler(
            container.daily_report_job,
            hour=int(getattr(settings, "REPORT_SCHEDULE_HOUR", 0)),
            minute=int(getattr(settings, "REPORT_SCHEDULE_MINUTE", 0)),
            timezone=str(getattr(settings, "REPORT_TIMEZONE", "Asia/Riyadh")),
        )
        scheduler.start()
        app.extensions["time_clock_scheduler"] = scheduler

    return app


if __name__ == "__main__":
    # The report scheduler runs in-process; keep the reloader off so it starts once.
    create_app().run(host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "3000")), use_reloader=False)
