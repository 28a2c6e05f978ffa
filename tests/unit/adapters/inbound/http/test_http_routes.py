"""Unit tests for HTTP routes."""

import json
from unittest.mock import patch

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from lead_intake.adapters.inbound.http import routes
from lead_intake.adapters.inbound.http.routes import router
from lead_intake.adapters.outbound.intake_session import InMemoryIntakeSessionRepository
from lead_intake.adapters.outbound.notification import LoggingLeadNotifier
from lead_intake.adapters.outbound.sheet import InMemorySheetStore
from lead_intake.adapters.outbound.transport import InProcessSubmissionTransport
from lead_intake.application.use_cases.compose_lead_email import ComposeLeadEmail
from lead_intake.application.use_cases.lead_intake_use_case import LeadIntakeUseCase
from lead_intake.application.use_cases.process_lead_submission import ProcessLeadSubmission
from lead_intake.application.use_cases.route_lead_notification import (
    RouteLeadNotification,
    RoutingConfig,
)
from lead_intake.application.use_cases.save_lead_to_sheet import SaveLeadToSheet
from lead_intake.application.use_cases.user_messages_th import ROUTER_LIVENESS_TEXT
from lead_intake.infrastructure.config.settings import settings

CONTACT_INPUTS = [
    {"name": "fullName", "value": "สมชาย ใจดี"},
    {"name": "phone", "value": "0899999999"},
    {"name": "district", "value": "บางกะปิ"},
    {"name": "province", "value": "กรุงเทพมหานคร"},
]


@pytest.fixture
def sheet_store(monkeypatch):
    """Wire the routes to fresh in-memory adapters."""
    sheet_store = InMemorySheetStore()
    process = ProcessLeadSubmission(
        SaveLeadToSheet(sheet_store),
        RouteLeadNotification(RoutingConfig(new_roof_recipients=["installer@example.com"])),
        ComposeLeadEmail("SCG Lead Notification", ["Other", "อื่นๆ"]),
        LoggingLeadNotifier(),
    )
    intake = LeadIntakeUseCase(
        InMemoryIntakeSessionRepository(ttl_seconds=3600),
        InProcessSubmissionTransport(process),
        other_values=["Other", "อื่นๆ"],
        success_delay_seconds=0,
    )
    monkeypatch.setattr(routes, "_sheet_store", sheet_store)
    monkeypatch.setattr(routes, "_process_lead_submission", process)
    monkeypatch.setattr(routes, "_lead_intake_use_case", intake)
    return sheet_store


@pytest.fixture
def client(sheet_store):
    """Create test client."""
    app = FastAPI()
    app.include_router(router)
    return TestClient(app)


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_lead_router_liveness_text(client):
    """Test GET on the router returns the plain-text liveness string."""
    response = client.get("/leads")

    assert response.status_code == status.HTTP_200_OK
    assert response.text == ROUTER_LIVENESS_TEXT
    assert response.headers["content-type"].startswith("text/plain")


def test_post_lead_accepts_text_plain_json(client):
    """Test the router reads a JSON body sent as text/plain."""
    body = json.dumps({"serviceType": "New Roof Installation", "fullName": "A"})

    response = client.post("/leads", content=body, headers={"Content-Type": "text/plain"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"result": "success"}


def test_post_lead_bad_body_returns_error_envelope(client):
    """Test failures come back in the envelope with status 200."""
    response = client.post("/leads", content="not json")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["result"] == "error"
    assert response.json()["message"]


def test_full_intake_flow_stores_lead(client):
    """Test select, service form, contact form and submit end in a stored lead."""
    response = client.post("/intake/s1/service", json={"service_type": "New Roof Installation"})
    assert response.json()["current_form"] == "newRoofForm"

    response = client.post(
        "/intake/s1/service-form",
        json={
            "form_id": "newRoofForm",
            "inputs": [
                {"name": "houseArea", "value": "180"},
                {"name": "budget", "value": "350000"},
            ],
        },
    )
    assert response.json()["step"] == "contact_form"

    response = client.post("/intake/s1/submit", json={"inputs": CONTACT_INPUTS})

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["outcome"] == "success"
    assert response.json()["step"] == "success"
    with patch.object(settings, "debug_mode", True):
        sheet = client.get("/debug/leads").json()
    assert sheet["count"] == 1
    assert sheet["header"][:3] == ["serviceType", "houseArea", "budget"]
    assert sheet["rows"][0][sheet["header"].index("fullName")] == "สมชาย ใจดี"


def test_submit_before_service_form_conflicts(client):
    """Test an out-of-order event returns 409."""
    response = client.post("/intake/s2/submit", json={"inputs": CONTACT_INPUTS})

    assert response.status_code == status.HTTP_409_CONFLICT


def test_unknown_form_returns_404(client):
    """Test an unknown form identifier returns 404."""
    client.post("/intake/s3/service", json={"service_type": "Roof Renovation"})

    response = client.post("/intake/s3/service-form", json={"form_id": "bogusForm", "inputs": []})

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_form_not_shown_conflicts(client):
    """Test completing a service form other than the one opened returns 409."""
    client.post("/intake/s6/service", json={"service_type": "New Roof Installation"})

    response = client.post("/intake/s6/service-form", json={"form_id": "metalRoofForm", "inputs": []})

    assert response.status_code == status.HTTP_409_CONFLICT


def test_unknown_service_type_rejected(client):
    """Test an unknown service category fails request validation."""
    response = client.post("/intake/s4/service", json={"service_type": "Gutter Cleaning"})

    assert response.status_code == 422


def test_back_and_reset(client):
    """Test back navigation and reset through the API."""
    client.post("/intake/s5/service", json={"service_type": "Roof Renovation"})

    response = client.post("/intake/s5/back")
    assert response.json()["step"] == "service_selection"

    client.post("/intake/s5/service", json={"service_type": "Roof Renovation"})
    response = client.post("/intake/s5/reset")
    assert response.json()["step"] == "service_selection"

    response = client.get("/intake/s5")
    assert response.json()["current_form"] is None


def test_debug_leads_disabled_returns_404(client):
    """Test that the debug endpoint returns 404 when DEBUG_MODE is disabled."""
    with patch.object(settings, "debug_mode", False):
        response = client.get("/debug/leads")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "disabled" in response.json()["detail"].lower()


def test_debug_leads_enabled_returns_rows(client):
    """Test that the debug endpoint lists stored leads when DEBUG_MODE is enabled."""
    with patch.object(settings, "debug_mode", True):
        client.post("/leads", content=json.dumps({"serviceType": "Roof Renovation", "fullName": "A"}))

        response = client.get("/debug/leads")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "header": ["serviceType", "fullName"],
            "rows": [["Roof Renovation", "A"]],
            "count": 1,
        }
