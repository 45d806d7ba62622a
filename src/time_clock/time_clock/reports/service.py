from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import format_clock_time, format_duration, weekday_name
from ..core.enums import ReportType
from ..core.exceptions import NoReportDataError, ValidationError
from ..sessions.repository import SessionRepository
from .excel import render_workbook, report_filename
from .mailer import MailSender
from .model import ReportData
from .range_resolver import ReportRangeResolver

logger = logging.getLogger(__name__)


class ReportService:
    """Use case: resolve a report range, load its rows, export and mail them."""

    def __init__(
        self,
        sessions: SessionRepository,
        *,
        resolver: Optional[ReportRangeResolver] = None,
        mailer: Optional[MailSender] = None,
        recipient: Optional[str] = None,
        renderer: Callable[[ReportData], bytes] = render_workbook,
    ):
        self._sessions = sessions
        self._resolver = resolver or ReportRangeResolver()
        self._mailer = mailer
        self._recipient = recipient
        self._renderer = renderer

    def build(
        self,
        reference_date: date | str,
        report_type: ReportType | str = ReportType.DAILY,
        custom_end_date: date | str | None = None,
    ) -> ReportData:
        kind = ReportType.parse(report_type)
        rng = self._resolver.resolve(reference_date, kind, custom_end_date)
        rows = self._sessions.query_by_date_range(rng.start_date, rng.end_date)
        rows = sorted(rows, key=lambda r: (r.work_date, r.employee_code, r.clock_in))
        return ReportData(report_type=kind, range=rng, rows=tuple(rows))

    def export(self, report: ReportData) -> bytes:
        return self._renderer(report)

    def email_report(
        self,
        reference_date: date | str,
        report_type: ReportType | str = ReportType.DAILY,
        custom_end_date: date | str | None = None,
        *,
        recipient: Optional[str] = None,
    ) -> ReportData:
        if self._mailer is None:
            raise ValidationError("Mail delivery is not configured")
        to = recipient or self._recipient
        if not to:
            raise ValidationError("No report recipient configured")

        report = self.build(reference_date, report_type, custom_end_date)
        if report.is_empty:
            raise NoReportDataError(f"No records for {report.range.label()}")

        self._mailer.send_report(
            recipient=to,
            subject=f"Time Report for {report.range.label()}",
            filename=report_filename(report),
            content=self.export(report),
        )
        logger.info("Emailed %s report for %s to %s", report.report_type.value, report.range.label(), to)
        return report

    @staticmethod
    def to_rows_ui(report: ReportData) -> list[dict]:
        return [
            {
                "employeeCode": r.employee_code,
                "name": r.name,
                "date": r.work_date.isoformat(),
                "day": weekday_name(r.work_date),
                "clockIn": r.clock_in.isoformat(),
                "clockOut": r.clock_out.isoformat() if r.clock_out else None,
                "clockInDisplay": format_clock_time(r.clock_in),
                "clockOutDisplay": format_clock_time(r.clock_out),
                "duration": r.duration_minutes,
                "totalHours": format_duration(r.duration_minutes),
            }
            for r in report.rows
        ]
