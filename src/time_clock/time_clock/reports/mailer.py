from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass
from email.mime.application import MIMEApplication
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

from ..core.constants import XLSX_MIMETYPE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SMTPConfig:
    host: str
    port: int
    user: Optional[str] = None
    password: Optional[str] = None
    sender: Optional[str] = None

    @classmethod
    def from_dict(cls, smtp_config: dict) -> "SMTPConfig":
        return cls(
            host=str(smtp_config.get("host") or "localhost"),
            port=int(smtp_config.get("port") or 587),
            user=smtp_config.get("user") or None,
            password=smtp_config.get("password") or None,
            sender=smtp_config.get("sender") or smtp_config.get("user") or None,
        )


class MailSender:
    """Sends rendered report files over SMTP."""

    def __init__(self, config: SMTPConfig):
        self._config = config

    def _connect(self) -> smtplib.SMTP:
        if self._config.port == 465:
            return smtplib.SMTP_SSL(self._config.host, self._config.port, timeout=30)
        server = smtplib.SMTP(self._config.host, self._config.port, timeout=30)
        server.starttls()
        return server

    def send_report(self, *, recipient: str, subject: str, filename: str, content: bytes) -> None:
        msg = MIMEMultipart()
        msg["From"] = self._config.sender or recipient
        msg["To"] = recipient
        msg["Subject"] = subject
        msg.attach(MIMEText(f"Attached: {filename}", "plain", "utf-8"))

        attachment = MIMEApplication(content, _subtype=XLSX_MIMETYPE.split("/", 1)[1])
        attachment.add_header("Content-Disposition", "attachment", filename=filename)
        msg.attach(attachment)

        server = self._connect()
        try:
            if self._config.user and self._config.password:
                server.login(self._config.user, self._config.password)
            server.send_message(msg)
        finally:
            server.quit()

        logger.info("Sent %s to %s", filename, recipient)
