"""Lead notifier port."""

from abc import ABC, abstractmethod

from lead_intake.application.dtos.submission import LeadEmail


class LeadNotifier(ABC):
    """Port interface for delivering lead notification e-mails."""

    @abstractmethod
    def send(self, recipients: list[str], cc_recipients: list[str], email: LeadEmail) -> None:
        """
        Deliver an e-mail.

        Args:
            recipients: "To" addresses (never empty)
            cc_recipients: "Cc" addresses
            email: Subject and HTML body

        Raises:
            NotificationRoutingError: If delivery fails
        """
        pass
