"""Unit tests for dependency wiring."""

from unittest.mock import patch

from lead_intake.adapters.outbound.notification import LoggingLeadNotifier, SmtpLeadNotifier
from lead_intake.adapters.outbound.sheet import InMemorySheetStore
from lead_intake.adapters.outbound.transport import (
    HttpxSubmissionTransport,
    InProcessSubmissionTransport,
)
from lead_intake.application.use_cases.route_lead_notification import RouteLeadNotification
from lead_intake.infrastructure.config.settings import AreaRouteSettings, Settings, settings
from lead_intake.infrastructure.wiring.dependencies import (
    create_lead_notifier,
    create_process_lead_submission_use_case,
    create_routing_config,
    create_submission_transport,
)


def test_default_routing_table_covers_three_areas():
    """Test the default routing table sends Bangkok renovations to area A."""
    router = RouteLeadNotification(create_routing_config(Settings()))

    route = router.route("Roof Renovation", "บางกะปิ", "กรุงเทพมหานคร")

    assert route.area == "area_a"
    assert route.recipients == ["renovation-area-a@example.com"]
    assert len(router.route("SCG Metal Roof Replacement", "", "").recipients) == 3


def test_routing_config_from_custom_areas():
    """Test district-based areas from configuration are honored."""
    config = Settings()
    config.routing.renovation_areas = [
        AreaRouteSettings(name="north", recipient="north@example.com", districts=["Mueang Chiang Mai"])
    ]

    route = RouteLeadNotification(create_routing_config(config)).route(
        "Roof Renovation", "mueang chiang mai", "เชียงใหม่"
    )

    assert route.recipients == ["north@example.com"]


def test_notifier_falls_back_to_logging_without_smtp_host():
    """Test an empty SMTP host selects the log-only notifier."""
    with patch.object(settings, "smtp_host", ""):
        assert isinstance(create_lead_notifier(), LoggingLeadNotifier)
    with patch.object(settings, "smtp_host", "smtp.example.com"):
        assert isinstance(create_lead_notifier(), SmtpLeadNotifier)


def test_transport_depends_on_endpoint_url():
    """Test the in-process transport is used when no endpoint is configured."""
    process = create_process_lead_submission_use_case(InMemorySheetStore())

    with patch.object(settings, "submission_endpoint_url", ""):
        assert isinstance(create_submission_transport(process), InProcessSubmissionTransport)
    with patch.object(settings, "submission_endpoint_url", "https://router.example.com/leads"):
        assert isinstance(create_submission_transport(process), HttpxSubmissionTransport)
