"""Form field extraction."""

from lead_intake.application.dtos.intake import BUTTON_TYPES, FormInput
from lead_intake.application.dtos.lead_record import LeadRecord

CHECKBOX_SEPARATOR = ", "


def collect_form_data(inputs: list[FormInput]) -> LeadRecord:
    """
    Flatten serialized form controls into a lead record.

    Checked checkboxes are grouped by name and joined with ", " in form order;
    those keys come first. Every other named control then contributes its
    value, later duplicates overwriting earlier ones. A checkbox group with
    nothing checked is left out entirely.

    Args:
        inputs: Form controls in form order

    Returns:
        Lead record
    """
    checked_groups: dict[str, list[str]] = {}
    for form_input in inputs:
        if _is_submittable(form_input) and form_input.type == "checkbox" and form_input.checked:
            checked_groups.setdefault(form_input.name, []).append(form_input.value)

    record: LeadRecord = {
        name: CHECKBOX_SEPARATOR.join(values) for name, values in checked_groups.items()
    }

    for form_input in inputs:
        if not _is_submittable(form_input) or form_input.name in checked_groups:
            continue
        if form_input.type in ("checkbox", "radio") and not form_input.checked:
            continue
        record[form_input.name] = form_input.value

    return record


def _is_submittable(form_input: FormInput) -> bool:
    """Named, enabled, non-button controls carry data."""
    return bool(form_input.name) and not form_input.disabled and form_input.type not in BUTTON_TYPES
