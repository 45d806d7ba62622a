from __future__ import annotations

import logging
from datetime import timedelta
from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger

from ..common.clock import Clock, SystemClock
from ..core.constants import REPORT_TIMEZONE_NAME
from ..core.enums import ReportType
from ..core.exceptions import DomainError, PersistenceError
from .service import ReportService

logger = logging.getLogger(__name__)

DAILY_REPORT_JOB_ID = "daily_report_email"


class DailyReportJob:
    """Emails the daily report for the day that just ended (UTC+3)."""

    def __init__(self, reports: ReportService, *, clock: Optional[Clock] = None):
        self._reports = reports
        self._clock = clock or SystemClock()

    def __call__(self) -> bool:
        report_date = self._clock.now().date() - timedelta(days=1)
        try:
            self._reports.email_report(report_date, ReportType.DAILY)
        except DomainError as e:
            logger.warning("Scheduled report for %s not sent: %s", report_date.isoformat(), e)
            return False
        except (PersistenceError, OSError):
            logger.exception("Scheduled report for %s failed", report_date.isoformat())
            return False
        logger.info("Scheduled report sent for %s", report_date.isoformat())
        return True


def build_report_scheduler(
    job: DailyReportJob,
    *,
    hour: int = 0,
    minute: int = 0,
    timezone: str = REPORT_TIMEZONE_NAME,
    scheduler: Optional[BackgroundScheduler] = None,
) -> BackgroundScheduler:
    scheduler = scheduler or BackgroundScheduler(timezone=timezone)
    scheduler.add_job(
        func=job,
        trigger=CronTrigger(hour=hour, minute=minute, timezone=timezone),
        id=DAILY_REPORT_JOB_ID,
        name="Daily attendance report email",
        replace_existing=True,
    )
    logger.info("Daily report job scheduled at %02d:%02d %s", hour, minute, timezone)
    return scheduler
