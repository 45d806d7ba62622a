import os

from .config import *  # noqa: F401,F403

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

REPORT_SCHEDULE_ENABLED = bool(int(os.getenv("REPORT_SCHEDULE_ENABLED", "1")))
