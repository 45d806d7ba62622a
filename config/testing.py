from .config import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

ADMIN_USER = "admin"
ADMIN_PASS = "admin-pass"
ADMIN_EMAIL = "admin@example.com"
REPORT_RECIPIENT = ADMIN_EMAIL

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
REPORT_SCHEDULE_ENABLED = False
