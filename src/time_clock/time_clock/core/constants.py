"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

FIXED_UTC_OFFSET_HOURS = 3
REPORT_TIMEZONE_NAME = "Asia/Riyadh"
DEFAULT_HISTORY_LIMIT = 100
REPORT_SHEET_NAME = "Time Report"
REPORT_HEADER_COLOR = "4472C4"
REPORT_STRIPE_COLOR = "D9E1F2"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
