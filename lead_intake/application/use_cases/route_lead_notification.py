"""Notification routing for incoming leads."""

from dataclasses import dataclass, field
from typing import Optional

from lead_intake.application.dtos.submission import NotificationRoute
from lead_intake.domain.value_objects.service_type import ServiceType


def _normalize(place: str) -> str:
    return place.strip().casefold()


@dataclass(frozen=True)
class AreaRoute:
    """A named area and the renovation contact who serves it."""

    name: str
    recipient: str
    districts: frozenset[str] = frozenset()
    provinces: frozenset[str] = frozenset()

    @classmethod
    def create(
        cls, name: str, recipient: str, districts: list[str], provinces: list[str]
    ) -> "AreaRoute":
        """Build an area with normalized place names."""
        return cls(
            name=name,
            recipient=recipient,
            districts=frozenset(_normalize(d) for d in districts),
            provinces=frozenset(_normalize(p) for p in provinces),
        )

    def matches(self, district: str, province: str) -> bool:
        """
        Check whether a customer address falls in this area.

        Args:
            district: Customer district (amphoe)
            province: Customer province

        Returns:
            True if the district or the province belongs to the area
        """
        return _normalize(district) in self.districts or _normalize(province) in self.provinces


@dataclass(frozen=True)
class RoutingConfig:
    """Recipients per service type."""

    new_roof_recipients: list[str] = field(default_factory=list)
    renovation_cc: list[str] = field(default_factory=list)
    renovation_areas: list[AreaRoute] = field(default_factory=list)
    metal_roof_recipients: list[str] = field(default_factory=list)
    metal_roof_cc: list[str] = field(default_factory=list)


class RouteLeadNotification:
    """Picks who hears about a lead. Pure and deterministic."""

    def __init__(self, config: RoutingConfig) -> None:
        """
        Initialize router.

        Args:
            config: Routing table
        """
        self._config = config

    def _match_area(self, district: str, province: str) -> Optional[AreaRoute]:
        # Areas are disjoint; the first match wins
        for area in self._config.renovation_areas:
            if area.matches(district, province):
                return area
        return None

    def route(self, service_type: str, district: str, province: str) -> NotificationRoute:
        """
        Select recipients for a lead.

        An unrecognized service type, or a renovation lead outside every named
        area, yields no recipients. That is a valid outcome, not an error.

        Args:
            service_type: Raw serviceType of the lead
            district: Customer district
            province: Customer province

        Returns:
            Selected recipients and CC recipients
        """
        parsed = ServiceType.parse(service_type)

        if parsed is ServiceType.NEW_ROOF_INSTALLATION:
            return NotificationRoute(recipients=list(self._config.new_roof_recipients))

        if parsed is ServiceType.ROOF_RENOVATION:
            area = self._match_area(district, province)
            return NotificationRoute(
                recipients=[area.recipient] if area else [],
                cc_recipients=list(self._config.renovation_cc),
                area=area.name if area else None,
            )

        if parsed is ServiceType.METAL_ROOF_REPLACEMENT:
            return NotificationRoute(
                recipients=list(self._config.metal_roof_recipients),
                cc_recipients=list(self._config.metal_roof_cc),
            )

        return NotificationRoute()
