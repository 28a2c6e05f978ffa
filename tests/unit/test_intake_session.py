"""Unit tests for IntakeSession entity."""

from lead_intake.domain.entities.intake_session import (
    CONTACT_FORM,
    SERVICE_SELECTION,
    IntakeSession,
)


def test_intake_session_initialization():
    """Test IntakeSession starts on service selection with no draft."""
    session = IntakeSession(session_id="test_session")

    assert session.session_id == "test_session"
    assert session.step == SERVICE_SELECTION
    assert session.current_form is None
    assert session.draft == {}
    assert session.previous_form is None
    assert session.has_draft() is False


def test_has_draft_requires_record_and_form():
    """Test has_draft needs both draft slots."""
    session = IntakeSession(session_id="test_session", draft={"roofArea": "120"})
    assert session.has_draft() is False

    session.previous_form = "metalRoofForm"
    assert session.has_draft() is True


def test_reset_clears_everything():
    """Test reset returns to service selection and drops the draft."""
    session = IntakeSession(
        session_id="test_session",
        step=CONTACT_FORM,
        current_form="renovationForm",
        draft={"houseType": "บ้านเดี่ยว"},
        previous_form="renovationForm",
    )

    session.reset()

    assert session.step == SERVICE_SELECTION
    assert session.current_form is None
    assert session.draft == {}
    assert session.previous_form is None


def test_touch_moves_updated_at_forward():
    """Test touch refreshes updated_at."""
    session = IntakeSession(session_id="test_session")
    before = session.updated_at

    session.touch()

    assert session.updated_at >= before
