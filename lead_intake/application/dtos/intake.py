"""Intake flow DTOs."""

from typing import Optional

from pydantic import Field

from lead_intake.application.dtos.base import DTO
from lead_intake.domain.value_objects.service_type import ServiceType

# Control types that never carry form data
BUTTON_TYPES = frozenset({"button", "submit", "reset", "image"})


class FormInput(DTO):
    """One serialized form control, in form order."""

    name: str = ""
    type: str = "text"
    value: str = ""
    checked: bool = False
    disabled: bool = False

    class Config:
        """Pydantic configuration."""

        json_schema_extra = {
            "example": {
                "name": "roofProblems",
                "type": "checkbox",
                "value": "รั่วซึม",
                "checked": True,
            }
        }


class SelectServiceRequest(DTO):
    """Service selection event."""

    service_type: ServiceType


class ServiceFormRequest(DTO):
    """Completed service form event."""

    form_id: str
    inputs: list[FormInput] = Field(default_factory=list)


class ContactFormRequest(DTO):
    """Completed contact form (final submission) event."""

    inputs: list[FormInput] = Field(default_factory=list)


class IntakeResponse(DTO):
    """Screen state returned after every intake event."""

    session_id: str
    step: str
    current_form: Optional[str] = None
    previous_form: Optional[str] = None
    draft: dict[str, str] = Field(default_factory=dict)
    outcome: Optional[str] = None  # "success" or "failure" after a submit
    message: Optional[str] = None  # localized alert for the customer
    missing_fields: list[str] = Field(default_factory=list)

    class Config:
        """Pydantic configuration."""

        json_schema_extra = {
            "example": {
                "session_id": "booth-1234",
                "step": "contact_form",
                "current_form": None,
                "previous_form": "renovationForm",
                "draft": {"serviceType": "Roof Renovation", "houseType": "บ้านเดี่ยว"},
                "outcome": None,
                "message": None,
                "missing_fields": [],
            }
        }
