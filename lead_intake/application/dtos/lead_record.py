"""Lead record DTOs.

A lead travels as a flat, ordered ``dict[str, str]`` (``LeadRecord``). Storage
always works on that raw mapping so the key order survives. Routing and e-mail
composition read it through the typed views below, one per service type.
"""

from typing import Any

from pydantic import ConfigDict

from lead_intake.application.dtos.base import DTO
from lead_intake.domain.value_objects.service_type import ServiceType

LeadRecord = dict[str, str]


class LeadView(DTO):
    """Fields shared by every lead (contact form plus service type)."""

    model_config = ConfigDict(frozen=True, extra="allow")

    serviceType: str = ""
    timestamp: str = ""
    fullName: str = ""
    phone: str = ""
    email: str = ""
    lineId: str = ""
    address: str = ""
    subdistrict: str = ""
    district: str = ""
    province: str = ""
    postalCode: str = ""
    customerType: str = ""
    otherCustomerType: str = ""
    contactTime: str = ""


class NewRoofInstallationLead(LeadView):
    """Lead from the new roof installation form."""

    houseArea: str = ""
    package: str = ""
    constructionStatus: str = ""
    constructionPlan: str = ""
    otherPlan: str = ""
    budget: str = ""


class RoofRenovationLead(LeadView):
    """Lead from the roof renovation form."""

    houseType: str = ""
    otherHouseType: str = ""
    roofProblems: str = ""
    otherProblem: str = ""
    serviceInterest: str = ""
    roofArea: str = ""
    renovationBudget: str = ""


class MetalRoofReplacementLead(LeadView):
    """Lead from the SCG metal roof replacement form."""

    houseType: str = ""
    otherHouseType: str = ""
    roofProblems: str = ""
    otherProblem: str = ""
    roofArea: str = ""
    replacementBudget: str = ""


LEAD_VIEWS: dict[ServiceType, type[LeadView]] = {
    ServiceType.NEW_ROOF_INSTALLATION: NewRoofInstallationLead,
    ServiceType.ROOF_RENOVATION: RoofRenovationLead,
    ServiceType.METAL_ROOF_REPLACEMENT: MetalRoofReplacementLead,
}


def to_lead_record(data: dict[str, Any]) -> LeadRecord:
    """
    Coerce a decoded JSON object into a lead record, keeping key order.

    Args:
        data: Decoded request body

    Returns:
        Ordered mapping of field name to string value (None becomes "")
    """
    return {str(key): "" if value is None else str(value) for key, value in data.items()}


def parse_lead(record: LeadRecord) -> LeadView:
    """
    Build the typed view matching the record's serviceType.

    Unrecognized service types fall back to the shared view.

    Args:
        record: Lead record

    Returns:
        Typed view of the record
    """
    service_type = ServiceType.parse(record.get("serviceType"))
    view_class = LEAD_VIEWS.get(service_type, LeadView) if service_type else LeadView
    return view_class.model_validate(record)
