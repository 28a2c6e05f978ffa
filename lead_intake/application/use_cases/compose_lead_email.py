"""HTML e-mail composition for lead notifications."""

from html import escape

from lead_intake.application.dtos.lead_record import (
    LeadRecord,
    LeadView,
    MetalRoofReplacementLead,
    NewRoofInstallationLead,
    RoofRenovationLead,
    parse_lead,
)
from lead_intake.application.dtos.submission import LeadEmail
from lead_intake.domain.value_objects.intake_form import split_choices
from lead_intake.domain.value_objects.money_thb import format_currency

AREA_UNIT = "ตร.ม."
CURRENCY_UNIT = "บาท"

_HEADER_STYLE = "background-color: #0066b3; color: white; padding: 10px; text-align: left;"
_LABEL_STYLE = "border: 1px solid #ddd; padding: 8px; font-weight: bold; width: 30%;"
_VALUE_STYLE = "border: 1px solid #ddd; padding: 8px;"


def _with_unit(value: str, unit: str) -> str:
    return f"{value} {unit}" if value else ""


class ComposeLeadEmail:
    """Builds the subject and HTML body of a lead notification."""

    def __init__(self, subject_prefix: str, other_values: list[str]) -> None:
        """
        Initialize composer.

        Args:
            subject_prefix: Text before the service type in the subject
            other_values: Choice values meaning "Other"
        """
        self._subject_prefix = subject_prefix
        self._other_values = other_values

    def resolve_other(self, value: str, other_text: str) -> str:
        """
        Replace an "Other" choice with the customer's own text.

        Works on single values and on flattened checkbox groups.

        Args:
            value: Primary field value
            other_text: Free-text field value

        Returns:
            Display value
        """
        choices = split_choices(value)
        if not any(choice in self._other_values for choice in choices):
            return value
        resolved = [other_text if choice in self._other_values else choice for choice in choices]
        return ", ".join(choice for choice in resolved if choice)

    def compose(self, record: LeadRecord) -> LeadEmail:
        """
        Compose the notification for a lead.

        Args:
            record: Lead record as received by the router

        Returns:
            Subject and HTML body
        """
        lead = parse_lead(record)
        subject = f"{self._subject_prefix}: {lead.serviceType} - {lead.fullName}"
        return LeadEmail(subject=subject, html_body=self._body(lead))

    def _body(self, lead: LeadView) -> str:
        rows = [("Service Type", lead.serviceType)]
        rows.extend(self._service_rows(lead))

        body = "<h2>SCG Customer Lead Information</h2>"
        body += '<table style="border-collapse: collapse; width: 100%;">'
        body += self._section("Service Information")
        body += "".join(self._row(label, value) for label, value in rows)
        body += self._section("Customer Information")
        body += "".join(self._row(label, value) for label, value in self._customer_rows(lead))
        body += "</table>"
        return body

    def _service_rows(self, lead: LeadView) -> list[tuple[str, str]]:
        if isinstance(lead, NewRoofInstallationLead):
            return [
                ("House Area", _with_unit(lead.houseArea, AREA_UNIT)),
                ("Package", lead.package),
                ("Construction Status", lead.constructionStatus),
                ("Construction Plan", self.resolve_other(lead.constructionPlan, lead.otherPlan)),
                ("Budget", format_currency(lead.budget)),
            ]
        if isinstance(lead, RoofRenovationLead):
            return [
                ("House Type", self.resolve_other(lead.houseType, lead.otherHouseType)),
                ("Roof Problems", self.resolve_other(lead.roofProblems, lead.otherProblem)),
                ("Service Interest", lead.serviceInterest),
                ("Roof Area", _with_unit(lead.roofArea, AREA_UNIT)),
                ("Renovation Budget", _with_unit(lead.renovationBudget, CURRENCY_UNIT)),
            ]
        if isinstance(lead, MetalRoofReplacementLead):
            return [
                ("House Type", self.resolve_other(lead.houseType, lead.otherHouseType)),
                ("Roof Problems", self.resolve_other(lead.roofProblems, lead.otherProblem)),
                ("Roof Area", _with_unit(lead.roofArea, AREA_UNIT)),
                ("Replacement Budget", _with_unit(lead.replacementBudget, CURRENCY_UNIT)),
            ]
        return []

    def _customer_rows(self, lead: LeadView) -> list[tuple[str, str]]:
        return [
            ("Full Name", lead.fullName),
            ("Phone", lead.phone),
            ("Email", lead.email),
            ("LINE ID", lead.lineId),
            ("Address", lead.address),
            ("Subdistrict", lead.subdistrict),
            ("District", lead.district),
            ("Province", lead.province),
            ("Postal Code", lead.postalCode),
            ("Customer Type", self.resolve_other(lead.customerType, lead.otherCustomerType)),
            ("Preferred Contact Time", lead.contactTime),
            ("Submitted At", lead.timestamp),
        ]

    @staticmethod
    def _section(title: str) -> str:
        return f'<tr><th colspan="2" style="{_HEADER_STYLE}">{escape(title)}</th></tr>'

    @staticmethod
    def _row(label: str, value: str) -> str:
        return (
            f'<tr><td style="{_LABEL_STYLE}">{escape(label)}</td>'
            f'<td style="{_VALUE_STYLE}">{escape(value)}</td></tr>'
        )
