"""Domain errors for the lead intake pipeline."""


class LeadIntakeError(Exception):
    """Base class for lead intake errors."""


class SubmissionTransportError(LeadIntakeError):
    """The submission request failed before any response arrived.

    The only failure the customer ever sees.
    """


class LeadPersistenceError(LeadIntakeError):
    """Writing a lead to the sheet store failed."""


class NotificationRoutingError(LeadIntakeError):
    """Routing or sending the lead notification e-mail failed."""


class InvalidTransitionError(LeadIntakeError):
    """An intake event is not allowed in the session's current step."""

    def __init__(self, event: str, step: str) -> None:
        super().__init__(f"Event '{event}' is not allowed in step '{step}'")
        self.event = event
        self.step = step


class UnknownFormError(LeadIntakeError):
    """The form identifier does not belong to any service form."""
