"""Service type value object."""

from enum import Enum
from typing import Optional


class ServiceType(str, Enum):
    """Service categories a customer can request."""

    NEW_ROOF_INSTALLATION = "New Roof Installation"
    ROOF_RENOVATION = "Roof Renovation"
    METAL_ROOF_REPLACEMENT = "SCG Metal Roof Replacement"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ServiceType"]:
        """
        Parse a raw serviceType value.

        Args:
            value: Raw value from a record

        Returns:
            Matching ServiceType, or None if the value is not recognized
        """
        for service_type in cls:
            if service_type.value == value:
                return service_type
        return None
