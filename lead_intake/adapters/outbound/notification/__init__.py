"""Lead notifier adapters."""

from lead_intake.adapters.outbound.notification.logging_lead_notifier import LoggingLeadNotifier
from lead_intake.adapters.outbound.notification.smtp_lead_notifier import (
    SmtpConfig,
    SmtpLeadNotifier,
)

__all__ = [
    "LoggingLeadNotifier",
    "SmtpConfig",
    "SmtpLeadNotifier",
]
