"""In-process submission transport adapter."""

from uuid import uuid4

from lead_intake.application.dtos.lead_record import LeadRecord
from lead_intake.application.ports.submission_transport import SubmissionTransport
from lead_intake.application.use_cases.process_lead_submission import ProcessLeadSubmission


class InProcessSubmissionTransport(SubmissionTransport):
    """Hands leads straight to the lead router running in this process.

    Keeps the opaque-response contract: the router's envelope is dropped.
    """

    def __init__(self, process_lead_submission: ProcessLeadSubmission) -> None:
        """
        Initialize in-process transport.

        Args:
            process_lead_submission: Lead router use case
        """
        self._process_lead_submission = process_lead_submission

    async def send(self, record: LeadRecord) -> None:
        """
        Process the lead in-process and ignore the outcome.

        Args:
            record: Merged lead record
        """
        await self._process_lead_submission.execute(dict(record), request_id=str(uuid4()))
