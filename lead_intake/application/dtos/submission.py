"""Lead submission DTOs."""

from typing import Literal, Optional

from pydantic import Field

from lead_intake.application.dtos.base import DTO


class SubmissionResult(DTO):
    """Envelope returned by the lead router."""

    result: Literal["success", "error"]
    message: Optional[str] = None

    @classmethod
    def success(cls) -> "SubmissionResult":
        """Build the success envelope."""
        return cls(result="success")

    @classmethod
    def error(cls, message: str) -> "SubmissionResult":
        """Build the error envelope."""
        return cls(result="error", message=message)

    def to_envelope(self) -> dict[str, str]:
        """
        Serialize without empty keys.

        Returns:
            {"result": "success"} or {"result": "error", "message": ...}
        """
        return self.model_dump(exclude_none=True)


class NotificationRoute(DTO):
    """Recipients chosen for a lead notification."""

    recipients: list[str] = Field(default_factory=list)
    cc_recipients: list[str] = Field(default_factory=list)
    area: Optional[str] = None  # renovation area that matched, if any

    def has_recipients(self) -> bool:
        """
        Check whether an e-mail should be sent.

        Returns:
            True if at least one recipient was selected
        """
        return bool(self.recipients)


class LeadEmail(DTO):
    """Composed lead notification e-mail."""

    subject: str
    html_body: str
