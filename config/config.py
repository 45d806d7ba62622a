import os

# Shared settings; environment modules import and override these.

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "time_clock"),
}

# Admin login compares against these values as-is.
ADMIN_USER = os.getenv("ADMIN_USER", "")
ADMIN_PASS = os.getenv("ADMIN_PASS", "")
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "")

SMTP_CONFIG = {
    "host": os.getenv("SMTP_HOST", ""),
    "port": int(os.getenv("SMTP_PORT", "587")),
    "user": os.getenv("SMTP_USER", ""),
    "password": os.getenv("SMTP_PASS", ""),
    "sender": os.getenv("SMTP_FROM", ""),
}

REPORT_RECIPIENT = os.getenv("REPORT_RECIPIENT", ADMIN_EMAIL)
REPORT_SCHEDULE_ENABLED = bool(int(os.getenv("REPORT_SCHEDULE_ENABLED", "0")))
REPORT_SCHEDULE_HOUR = int(os.getenv("REPORT_SCHEDULE_HOUR", "0"))
REPORT_SCHEDULE_MINUTE = int(os.getenv("REPORT_SCHEDULE_MINUTE", "0"))
REPORT_TIMEZONE = os.getenv("REPORT_TIMEZONE", "Asia/Riyadh")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

DEBUG = False
TESTING = False

# If enabled, app applies database/schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
