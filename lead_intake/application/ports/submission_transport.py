"""Submission transport port."""

from abc import ABC, abstractmethod

from lead_intake.application.dtos.lead_record import LeadRecord


class SubmissionTransport(ABC):
    """Port interface for handing a merged lead to the lead router.

    Opaque-response mode: implementations never report how the router
    handled the lead, only whether the request could be sent at all.
    """

    @abstractmethod
    async def send(self, record: LeadRecord) -> None:
        """
        Send a lead once.

        Args:
            record: Merged lead record

        Raises:
            SubmissionTransportError: If the request fails before a response arrives
        """
        pass
