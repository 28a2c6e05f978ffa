"""Lead intake use case: the two-step form flow on the customer side."""

import asyncio
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from lead_intake.application.dtos.intake import FormInput, IntakeResponse
from lead_intake.application.dtos.lead_record import LeadRecord
from lead_intake.application.ports.intake_session_repository import IntakeSessionRepository
from lead_intake.application.ports.submission_transport import SubmissionTransport
from lead_intake.application.use_cases.collect_form_data import collect_form_data
from lead_intake.application.use_cases.user_messages_th import UserMessagesTH
from lead_intake.domain.entities.intake_session import (
    CONTACT_FORM,
    SERVICE_FORM,
    SERVICE_SELECTION,
    SUBMITTING,
    SUCCESS,
    IntakeSession,
)
from lead_intake.domain.errors import InvalidTransitionError, SubmissionTransportError
from lead_intake.domain.value_objects.intake_form import (
    CONTACT_FORM as CONTACT_FORM_DEFINITION,
    SERVICE_FORMS,
    get_service_form,
    missing_other_fields,
)
from lead_intake.domain.value_objects.service_type import ServiceType


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with milliseconds, e.g. 2024-05-01T03:04:05.678Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def merge_records(service_record: LeadRecord, contact_record: LeadRecord) -> LeadRecord:
    """
    Merge the service-form draft with the contact form.

    Args:
        service_record: Draft from the service form
        contact_record: Contact form record

    Returns:
        Merged record; contact values win on shared keys
    """
    return {**service_record, **contact_record}


class LeadIntakeUseCase:
    """Drives one customer's intake session through its steps.

    service_selection -> service_form -> contact_form -> submitting -> success,
    or back to contact_form when the submission cannot be sent.
    """

    def __init__(
        self,
        session_repository: IntakeSessionRepository,
        transport: SubmissionTransport,
        other_values: list[str],
        success_delay_seconds: float = 2.0,
        clock: Callable[[], str] = utc_timestamp,
        logger: Optional[Callable[[str, str, str, Any], None]] = None,
    ) -> None:
        """
        Initialize lead intake use case.

        Args:
            session_repository: Repository for intake session state
            transport: Transport that hands merged leads to the router
            other_values: Choice values meaning "Other"
            success_delay_seconds: Wait before the submission is assumed delivered
            clock: Timestamp factory for submitted leads
            logger: Optional logger function (session_id, request_id, component, **kwargs)
        """
        self._session_repository = session_repository
        self._transport = transport
        self._other_values = other_values
        self._success_delay_seconds = success_delay_seconds
        self._clock = clock
        self._logger = logger

    def _log(self, session_id: str, request_id: str, component: str, **kwargs: Any) -> None:
        """Log event if logger is available."""
        if self._logger:
            self._logger(session_id, request_id, component, **kwargs)

    async def _load(self, session_id: str) -> IntakeSession:
        session = await self._session_repository.get(session_id)
        if session is None:
            session = IntakeSession(session_id=session_id)
        return session

    async def _transition(
        self, session: IntakeSession, step: str, request_id: str, event: str
    ) -> None:
        step_before = session.step
        session.step = step
        await self._session_repository.save(session.session_id, session)
        self._log(
            session.session_id,
            request_id,
            "intake",
            event=event,
            step_before=step_before,
            step_after=step,
        )

    @staticmethod
    def _response(session: IntakeSession, **kwargs: Any) -> IntakeResponse:
        return IntakeResponse(
            session_id=session.session_id,
            step=session.step,
            current_form=session.current_form,
            previous_form=session.previous_form,
            draft=dict(session.draft),
            **kwargs,
        )

    async def get_state(self, session_id: str) -> IntakeResponse:
        """
        Describe the current screen of a session.

        Args:
            session_id: Session identifier

        Returns:
            Current session state (a fresh session if none exists)
        """
        return self._response(await self._load(session_id))

    async def select_service(
        self, session_id: str, service_type: ServiceType, request_id: str = "unknown"
    ) -> IntakeResponse:
        """
        Open the questionnaire of the chosen service.

        Args:
            session_id: Session identifier
            service_type: Chosen service category
            request_id: Request identifier for logging

        Returns:
            Session state showing the service form

        Raises:
            InvalidTransitionError: If the session is not on service selection
        """
        session = await self._load(session_id)
        if session.step not in (SERVICE_SELECTION, SUCCESS):
            raise InvalidTransitionError("select_service", session.step)

        session.current_form = SERVICE_FORMS[service_type].form_id
        await self._transition(session, SERVICE_FORM, request_id, "select_service")
        return self._response(session)

    async def complete_service_form(
        self,
        session_id: str,
        form_id: str,
        inputs: list[FormInput],
        request_id: str = "unknown",
    ) -> IntakeResponse:
        """
        Capture the service form as the session draft and show the contact form.

        Args:
            session_id: Session identifier
            form_id: Identifier of the completed service form
            inputs: Serialized form controls
            request_id: Request identifier for logging

        Returns:
            Session state showing the contact form, or the unchanged service form
            with missing_fields set when an "Other" detail is required

        Raises:
            InvalidTransitionError: If the session is not showing a service form, or
                shows a different one
            UnknownFormError: If form_id is not a service form
        """
        session = await self._load(session_id)
        if session.step != SERVICE_FORM:
            raise InvalidTransitionError("complete_service_form", session.step)
        form = get_service_form(form_id)
        if form.form_id != session.current_form:
            raise InvalidTransitionError(f"complete_service_form({form_id})", session.step)

        record = collect_form_data(inputs)
        missing = missing_other_fields(form, record, self._other_values)
        if missing:
            return self._response(
                session,
                missing_fields=missing,
                message=UserMessagesTH.missing_other_fields(missing),
            )

        if "serviceType" not in record and form.service_type is not None:
            record = {"serviceType": form.service_type.value, **record}

        session.draft = record
        session.previous_form = form.form_id
        session.current_form = None
        await self._transition(session, CONTACT_FORM, request_id, "complete_service_form")
        return self._response(session)

    async def back(self, session_id: str, request_id: str = "unknown") -> IntakeResponse:
        """
        Go back one screen.

        From the contact form this reopens the service form that produced the
        draft; from a service form it returns to service selection.

        Args:
            session_id: Session identifier
            request_id: Request identifier for logging

        Returns:
            Session state after navigating back
        """
        session = await self._load(session_id)
        if session.step == CONTACT_FORM and session.has_draft():
            session.current_form = session.previous_form
            await self._transition(session, SERVICE_FORM, request_id, "back")
        elif session.step in (CONTACT_FORM, SERVICE_FORM):
            session.current_form = None
            await self._transition(session, SERVICE_SELECTION, request_id, "back")
        return self._response(session)

    async def submit(
        self, session_id: str, inputs: list[FormInput], request_id: str = "unknown"
    ) -> IntakeResponse:
        """
        Merge the draft with the contact form and send the lead once.

        The router's reply is never read. A transport failure keeps the data and
        returns to the contact form; anything else is assumed delivered after
        the fixed success delay.

        Args:
            session_id: Session identifier
            inputs: Serialized contact form controls
            request_id: Request identifier for logging

        Returns:
            Session state with outcome "success" or "failure"

        Raises:
            InvalidTransitionError: If the session is not showing the contact form
        """
        session = await self._load(session_id)
        if session.step != CONTACT_FORM:
            raise InvalidTransitionError("submit", session.step)

        contact_record = collect_form_data(inputs)
        missing = missing_other_fields(CONTACT_FORM_DEFINITION, contact_record, self._other_values)
        if missing:
            return self._response(
                session,
                missing_fields=missing,
                message=UserMessagesTH.missing_other_fields(missing),
            )

        record = merge_records(session.draft, contact_record)
        record["timestamp"] = self._clock()
        await self._transition(session, SUBMITTING, request_id, "submit")

        try:
            await self._transport.send(record)
        except SubmissionTransportError as e:
            self._log(session_id, request_id, "intake", submission_error=str(e))
            await self._transition(session, CONTACT_FORM, request_id, "submission_failed")
            return self._response(
                session, outcome="failure", message=UserMessagesTH.SUBMISSION_FAILED
            )

        # Opaque response: delivery is assumed once the delay has passed
        await asyncio.sleep(self._success_delay_seconds)
        session.clear_draft()
        session.current_form = None
        await self._transition(session, SUCCESS, request_id, "submission_assumed_delivered")
        return self._response(
            session, outcome="success", message=UserMessagesTH.SUBMISSION_SUCCEEDED
        )

    async def reset(self, session_id: str, request_id: str = "unknown") -> IntakeResponse:
        """
        Clear all session state and return to service selection.

        Args:
            session_id: Session identifier
            request_id: Request identifier for logging

        Returns:
            Fresh session state
        """
        session = await self._load(session_id)
        session.reset()
        await self._session_repository.save(session_id, session)
        self._log(session_id, request_id, "intake", action="reset")
        return self._response(session)
