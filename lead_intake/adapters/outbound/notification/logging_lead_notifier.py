"""Log-only lead notifier, used when no SMTP host is configured."""

from lead_intake.application.dtos.submission import LeadEmail
from lead_intake.application.ports.lead_notifier import LeadNotifier
from lead_intake.infrastructure.logging.logger import logger


class LoggingLeadNotifier(LeadNotifier):
    """Writes notifications to the log instead of sending them."""

    def __init__(self) -> None:
        """Initialize with an empty outbox."""
        self.sent: list[tuple[list[str], list[str], LeadEmail]] = []

    def send(self, recipients: list[str], cc_recipients: list[str], email: LeadEmail) -> None:
        """
        Log an e-mail and keep it in the outbox.

        Args:
            recipients: "To" addresses
            cc_recipients: "Cc" addresses
            email: Subject and HTML body
        """
        self.sent.append((list(recipients), list(cc_recipients), email))
        logger.info(
            f"[dev email] to={recipients!r} cc={cc_recipients!r} subject={email.subject!r} "
            f"body_length={len(email.html_body)}"
        )
