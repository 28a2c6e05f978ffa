"""Intake session entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

# Steps of the intake flow
SERVICE_SELECTION = "service_selection"
SERVICE_FORM = "service_form"
CONTACT_FORM = "contact_form"
SUBMITTING = "submitting"
SUCCESS = "success"


@dataclass
class IntakeSession:
    """Client-side state of one customer's intake flow."""

    session_id: str
    step: str = SERVICE_SELECTION
    current_form: Optional[str] = None  # form shown while step == service_form
    # Draft slots: service-form record and the form that produced it
    draft: dict[str, str] = field(default_factory=dict)
    previous_form: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def touch(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = datetime.now(timezone.utc)

    def clear_draft(self) -> None:
        """Drop the draft record and the form that produced it."""
        self.draft = {}
        self.previous_form = None

    def reset(self) -> None:
        """Return to service selection with no data held."""
        self.clear_draft()
        self.current_form = None
        self.step = SERVICE_SELECTION

    def has_draft(self) -> bool:
        """
        Check whether a service form has been completed.

        Returns:
            True if a draft record is held
        """
        return bool(self.draft) and self.previous_form is not None
