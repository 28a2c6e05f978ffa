"""HTTP routes."""

from uuid import uuid4

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from lead_intake.application.dtos.intake import (
    ContactFormRequest,
    IntakeResponse,
    SelectServiceRequest,
    ServiceFormRequest,
)
from lead_intake.application.use_cases.user_messages_th import ROUTER_LIVENESS_TEXT
from lead_intake.domain.errors import InvalidTransitionError, UnknownFormError
from lead_intake.infrastructure.config.settings import settings
from lead_intake.infrastructure.logging.logger import log_event
from lead_intake.infrastructure.wiring.dependencies import (
    create_lead_intake_use_case,
    create_process_lead_submission_use_case,
    create_sheet_store,
)

router = APIRouter()

# Create use case instances (wired with dependencies)
_sheet_store = create_sheet_store()
_process_lead_submission = create_process_lead_submission_use_case(_sheet_store)
_lead_intake_use_case = create_lead_intake_use_case(_process_lead_submission)


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


@router.get("/leads", response_class=PlainTextResponse)
async def lead_router_liveness() -> str:
    """
    Plain-text liveness reply of the lead router, for deployment smoke tests.

    Returns:
        Liveness text
    """
    return ROUTER_LIVENESS_TEXT


@router.post("/leads", status_code=status.HTTP_200_OK)
async def receive_lead(request: Request) -> dict[str, str]:
    """
    Store a submitted lead and send its notification.

    The body is read as JSON regardless of Content-Type. Failures never
    surface as HTTP errors; they come back in the envelope.

    Args:
        request: FastAPI request object (raw body)

    Returns:
        {"result": "success"} or {"result": "error", "message": ...}
    """
    request_id = str(uuid4())
    body = await request.body()

    log_event(
        session_id="router",
        request_id=request_id,
        component="http",
        body_length=len(body),
    )

    result = await _process_lead_submission.execute_raw(body, request_id=request_id)

    log_event(
        session_id="router",
        request_id=request_id,
        component="http",
        result=result.result,
    )

    return result.to_envelope()


def _conflict(err: Exception) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(err))


@router.get("/intake/{session_id}", response_model=IntakeResponse)
async def get_intake_session(session_id: str) -> IntakeResponse:
    """
    Get the current screen of an intake session.

    Args:
        session_id: Session identifier

    Returns:
        Intake session state
    """
    return await _lead_intake_use_case.get_state(session_id)


@router.post("/intake/{session_id}/service", response_model=IntakeResponse)
async def select_service(session_id: str, request: SelectServiceRequest) -> IntakeResponse:
    """
    Select a service category and open its questionnaire.

    Args:
        session_id: Session identifier
        request: Chosen service type

    Returns:
        Intake session state

    Raises:
        HTTPException: 409 if the session is not on service selection
    """
    try:
        return await _lead_intake_use_case.select_service(
            session_id, request.service_type, request_id=str(uuid4())
        )
    except InvalidTransitionError as err:
        raise _conflict(err) from err


@router.post("/intake/{session_id}/service-form", response_model=IntakeResponse)
async def complete_service_form(session_id: str, request: ServiceFormRequest) -> IntakeResponse:
    """
    Submit the service questionnaire and move on to the contact form.

    Args:
        session_id: Session identifier
        request: Form identifier and serialized controls

    Returns:
        Intake session state

    Raises:
        HTTPException: 404 for an unknown form, 409 if no service form is shown
    """
    try:
        return await _lead_intake_use_case.complete_service_form(
            session_id, request.form_id, list(request.inputs), request_id=str(uuid4())
        )
    except UnknownFormError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err
    except InvalidTransitionError as err:
        raise _conflict(err) from err


@router.post("/intake/{session_id}/back", response_model=IntakeResponse)
async def go_back(session_id: str) -> IntakeResponse:
    """
    Navigate back one screen.

    Args:
        session_id: Session identifier

    Returns:
        Intake session state
    """
    return await _lead_intake_use_case.back(session_id, request_id=str(uuid4()))


@router.post("/intake/{session_id}/submit", response_model=IntakeResponse)
async def submit_lead(session_id: str, request: ContactFormRequest) -> IntakeResponse:
    """
    Merge the contact form with the draft and send the lead.

    Args:
        session_id: Session identifier
        request: Serialized contact form controls

    Returns:
        Intake session state with outcome "success" or "failure"

    Raises:
        HTTPException: 409 if the contact form is not shown
    """
    request_id = str(uuid4())
    log_event(
        session_id=session_id,
        request_id=request_id,
        component="http",
        inputs_count=len(request.inputs),
    )
    try:
        response = await _lead_intake_use_case.submit(
            session_id, list(request.inputs), request_id=request_id
        )
    except InvalidTransitionError as err:
        raise _conflict(err) from err

    log_event(
        session_id=session_id,
        request_id=request_id,
        component="http",
        outcome=response.outcome,
    )
    return response


@router.post("/intake/{session_id}/reset", response_model=IntakeResponse)
async def reset_intake_session(session_id: str) -> IntakeResponse:
    """
    Clear the session and return to service selection.

    Args:
        session_id: Session identifier

    Returns:
        Fresh intake session state
    """
    return await _lead_intake_use_case.reset(session_id, request_id=str(uuid4()))


@router.get("/debug/leads", status_code=status.HTTP_200_OK)
async def get_leads_debug() -> dict:
    """
    Get the lead sheet (only enabled if DEBUG_MODE=true).

    Returns:
        Header, lead rows and lead count

    Raises:
        HTTPException: 404 if DEBUG_MODE is disabled
    """
    if not settings.debug_mode:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Debug endpoint is disabled",
        )

    rows = await _sheet_store.rows()
    header = rows[0] if rows else []

    return {
        "header": header,
        "rows": rows[1:],
        "count": max(len(rows) - 1, 0),
    }
