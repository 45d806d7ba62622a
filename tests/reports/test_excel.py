from __future__ import annotations

import io
from datetime import date, datetime

from openpyxl import load_workbook

from src.time_clock.time_clock.common.datetime_utils import FIXED_TZ
from src.time_clock.time_clock.core.enums import ReportType
from src.time_clock.time_clock.reports.excel import COLUMNS, render_workbook, report_filename
from src.time_clock.time_clock.reports.model import ReportData, ReportRange
from src.time_clock.time_clock.sessions.model import AttendanceReportRow


def _report(rows) -> ReportData:
    return ReportData(
        report_type=ReportType.DAILY,
        range=ReportRange(date(2024, 3, 15), date(2024, 3, 15)),
        rows=tuple(rows),
    )


def _load(content: bytes):
    return load_workbook(io.BytesIO(content))["Time Report"]


def test_workbook_layout_and_values():
    rows = [
        AttendanceReportRow(
            employee_code="E001",
            name="Sara",
            work_date=date(2024, 3, 15),
            clock_in=datetime(2024, 3, 15, 9, 0, tzinfo=FIXED_TZ),
            clock_out=datetime(2024, 3, 15, 17, 29, 59, tzinfo=FIXED_TZ),
            duration_minutes=509,
        ),
        AttendanceReportRow(
            employee_code="E002",
            name="Omar",
            work_date=date(2024, 3, 15),
            clock_in=datetime(2024, 3, 15, 13, 5, tzinfo=FIXED_TZ),
            clock_out=None,
            duration_minutes=None,
        ),
    ]

    sheet = _load(render_workbook(_report(rows)))

    assert [c.value for c in sheet[1]] == COLUMNS
    assert [c.value for c in sheet[2]] == ["E001", "Sara", "2024-03-15", "Friday", "09:00 AM", "05:29 PM", "8h 29m"]
    assert sheet["E3"].value == "01:05 PM"
    assert sheet["F3"].value in (None, "")


def test_header_and_stripe_styles():
    rows = [
        AttendanceReportRow("E001", "Sara", date(2024, 3, 15), datetime(2024, 3, 15, 9, 0, tzinfo=FIXED_TZ), None, None)
    ]

    sheet = _load(render_workbook(_report(rows)))

    assert sheet["A1"].font.bold
    assert sheet["A1"].fill.fgColor.rgb.endswith("4472C4")
    assert sheet["A2"].fill.fgColor.rgb.endswith("D9E1F2")
    assert sheet.column_dimensions["A"].width == 15
    assert sheet.column_dimensions["B"].width == 20


def test_empty_report_has_no_activity_row():
    sheet = _load(render_workbook(_report([])))

    assert sheet["B2"].value == "No activity"
    assert sheet.max_row == 2


def test_report_filename():
    assert report_filename(_report([])) == "time-report-2024-03-15-daily.xlsx"
