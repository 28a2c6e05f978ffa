"""Intake form definitions."""

from dataclasses import dataclass, field
from typing import Optional

from lead_intake.domain.errors import UnknownFormError
from lead_intake.domain.value_objects.service_type import ServiceType

CONTACT_FORM_ID = "contactFormData"


@dataclass(frozen=True)
class IntakeForm:
    """A form of the intake flow and its "Other" free-text toggles."""

    form_id: str
    service_type: Optional[ServiceType] = None
    # primary field -> free-text field required when "Other" is chosen
    other_fields: dict[str, str] = field(default_factory=dict)


SERVICE_FORMS: dict[ServiceType, IntakeForm] = {
    ServiceType.NEW_ROOF_INSTALLATION: IntakeForm(
        form_id="newRoofForm",
        service_type=ServiceType.NEW_ROOF_INSTALLATION,
        other_fields={"constructionPlan": "otherPlan"},
    ),
    ServiceType.ROOF_RENOVATION: IntakeForm(
        form_id="renovationForm",
        service_type=ServiceType.ROOF_RENOVATION,
        other_fields={"houseType": "otherHouseType", "roofProblems": "otherProblem"},
    ),
    ServiceType.METAL_ROOF_REPLACEMENT: IntakeForm(
        form_id="metalRoofForm",
        service_type=ServiceType.METAL_ROOF_REPLACEMENT,
        other_fields={"houseType": "otherHouseType", "roofProblems": "otherProblem"},
    ),
}

CONTACT_FORM = IntakeForm(
    form_id=CONTACT_FORM_ID,
    other_fields={"customerType": "otherCustomerType"},
)


def get_service_form(form_id: str) -> IntakeForm:
    """
    Look up a service form by its identifier.

    Raises:
        UnknownFormError: If no service form has that identifier
    """
    for form in SERVICE_FORMS.values():
        if form.form_id == form_id:
            return form
    raise UnknownFormError(f"Unknown service form: {form_id}")


def split_choices(value: str) -> list[str]:
    """Split a flattened checkbox value ("a, b") back into its choices."""
    return [choice.strip() for choice in value.split(",") if choice.strip()]


def missing_other_fields(
    form: IntakeForm, record: dict[str, str], other_values: list[str]
) -> list[str]:
    """
    Find "Other" free-text fields that are required but empty.

    Args:
        form: Form the record was extracted from
        record: Extracted record
        other_values: Values that mean "Other"

    Returns:
        Names of required free-text fields with no value
    """
    missing = []
    for primary, other in form.other_fields.items():
        chosen = split_choices(record.get(primary, ""))
        if any(choice in other_values for choice in chosen) and not record.get(other, "").strip():
            missing.append(other)
    return missing
