from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .common.clock import Clock, SystemClock
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import AuthService, EmployeeService
from .reports.mailer import MailSender, SMTPConfig
from .reports.range_resolver import ReportRangeResolver
from .reports.scheduler import DailyReportJob
from .reports.service import ReportService
from .sessions.mysql_session_repository import MySQLSessionRepository
from .sessions.repository import SessionRepository
from .sessions.tracker import SessionTracker


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]
    clock: Clock

    employees_repo: EmployeeRepository
    sessions_repo: SessionRepository

    auth_service: AuthService
    employee_service: EmployeeService
    session_tracker: SessionTracker
    report_service: ReportService
    daily_report_job: DailyReportJob


def wire_container(
    *,
    employees_repo: EmployeeRepository,
    sessions_repo: SessionRepository,
    conn: Optional[DatabaseConnection] = None,
    clock: Optional[Clock] = None,
    mailer: Optional[MailSender] = None,
    admin: Optional[dict] = None,
    report_recipient: Optional[str] = None,
) -> Container:
    clock = clock or SystemClock()
    admin = admin or {}

    auth_service = AuthService(
        employees_repo,
        admin_user=str(admin.get("user") or ""),
        admin_pass=str(admin.get("password") or ""),
        admin_email=admin.get("email"),
    )
    employee_service = EmployeeService(employees_repo)
    session_tracker = SessionTracker(sessions_repo, clock=clock)
    report_service = ReportService(
        sessions_repo,
        resolver=ReportRangeResolver(),
        mailer=mailer,
        recipient=report_recipient or admin.get("email"),
    )

    return Container(
        conn=conn,
        clock=clock,
        employees_repo=employees_repo,
        sessions_repo=sessions_repo,
        auth_service=auth_service,
        employee_service=employee_service,
        session_tracker=session_tracker,
        report_service=report_service,
        daily_report_job=DailyReportJob(report_service, clock=clock),
    )


def build_container(
    *,
    db_config: dict,
    smtp_config: Optional[dict] = None,
    admin: Optional[dict] = None,
    report_recipient: Optional[str] = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    mailer = MailSender(SMTPConfig.from_dict(smtp_config)) if smtp_config and smtp_config.get("host") else None

    return wire_container(
        employees_repo=MySQLEmployeeRepository(conn),
        sessions_repo=MySQLSessionRepository(conn),
        conn=conn,
        mailer=mailer,
        admin=admin,
        report_recipient=report_recipient,
    )
