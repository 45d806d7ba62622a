from __future__ import annotations

import io

import pandas as pd
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from ..common.datetime_utils import format_clock_time, format_duration, weekday_name
from ..core.constants import REPORT_HEADER_COLOR, REPORT_SHEET_NAME, REPORT_STRIPE_COLOR
from .model import ReportData

COLUMNS = ["Employee Code", "Name", "Date", "Day", "Clock In", "Clock Out", "Total Hours"]
COLUMN_WIDTHS = [15, 20, 15, 15, 12, 12, 12]


def report_frame(report: ReportData) -> pd.DataFrame:
    """Flatten report rows into the export layout (UTC+3, 12-hour clock)."""
    if report.is_empty:
        return pd.DataFrame([["", "No activity", "", "", "", "", ""]], columns=COLUMNS)

    records = [
        [
            r.employee_code,
            r.name,
            r.work_date.isoformat(),
            weekday_name(r.work_date),
            format_clock_time(r.clock_in),
            format_clock_time(r.clock_out),
            format_duration(r.duration_minutes),
        ]
        for r in report.rows
    ]
    return pd.DataFrame(records, columns=COLUMNS)


def render_workbook(report: ReportData) -> bytes:
    df = report_frame(report)

    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=REPORT_SHEET_NAME)
        sheet = writer.sheets[REPORT_SHEET_NAME]

        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(fill_type="solid", fgColor=REPORT_HEADER_COLOR)
        stripe_fill = PatternFill(fill_type="solid", fgColor=REPORT_STRIPE_COLOR)

        for cell in sheet[1]:
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = Alignment(horizontal="center")

        for idx, width in enumerate(COLUMN_WIDTHS):
            sheet.column_dimensions[get_column_letter(idx + 1)].width = width

        # Even worksheet rows (2, 4, ...) are shaded.
        for row in sheet.iter_rows(min_row=2, max_row=sheet.max_row):
            if row[0].row % 2 == 0:
                for cell in row:
                    cell.fill = stripe_fill

    return out.getvalue()


def report_filename(report: ReportData) -> str:
    return f"time-report-{report.range.label()}-{report.report_type.value}.xlsx"
