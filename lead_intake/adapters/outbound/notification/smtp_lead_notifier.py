"""SMTP lead notifier adapter."""

import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from typing import Optional

from lead_intake.application.dtos.submission import LeadEmail
from lead_intake.application.ports.lead_notifier import LeadNotifier
from lead_intake.domain.errors import NotificationRoutingError


@dataclass(frozen=True)
class SmtpConfig:
    """SMTP connection settings."""

    host: str
    port: int = 587
    from_email: str = ""
    user: Optional[str] = None
    password: Optional[str] = None
    use_tls: bool = True
    timeout_seconds: float = 15.0


class SmtpLeadNotifier(LeadNotifier):
    """Sends lead notifications through an SMTP server."""

    def __init__(self, config: SmtpConfig) -> None:
        """
        Initialize SMTP notifier.

        Args:
            config: SMTP connection settings
        """
        self._config = config

    def _build_message(
        self, recipients: list[str], cc_recipients: list[str], email: LeadEmail
    ) -> EmailMessage:
        msg = EmailMessage()
        msg["Subject"] = email.subject
        msg["From"] = self._config.from_email or self._config.user or ""
        msg["To"] = ", ".join(recipients)
        if cc_recipients:
            msg["Cc"] = ", ".join(cc_recipients)
        msg.set_content("This notification requires an HTML-capable mail client.")
        msg.add_alternative(email.html_body, subtype="html")
        return msg

    def send(self, recipients: list[str], cc_recipients: list[str], email: LeadEmail) -> None:
        """
        Deliver an e-mail.

        Args:
            recipients: "To" addresses
            cc_recipients: "Cc" addresses
            email: Subject and HTML body

        Raises:
            NotificationRoutingError: If the SMTP exchange fails
        """
        msg = self._build_message(recipients, cc_recipients, email)
        try:
            with smtplib.SMTP(
                self._config.host, self._config.port, timeout=self._config.timeout_seconds
            ) as server:
                if self._config.use_tls:
                    server.starttls()
                if self._config.user and self._config.password:
                    server.login(self._config.user, self._config.password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationRoutingError(f"SMTP delivery failed: {e}") from e
