"""Lead router use case: store the lead, then notify the right people."""

import asyncio
import json
import logging
from typing import Any, Callable, Optional

from lead_intake.application.dtos.lead_record import LeadRecord, to_lead_record
from lead_intake.application.dtos.submission import NotificationRoute, SubmissionResult
from lead_intake.application.ports.lead_notifier import LeadNotifier
from lead_intake.application.use_cases.compose_lead_email import ComposeLeadEmail
from lead_intake.application.use_cases.route_lead_notification import RouteLeadNotification
from lead_intake.application.use_cases.save_lead_to_sheet import SaveLeadToSheet
from lead_intake.domain.errors import NotificationRoutingError


class ProcessLeadSubmission:
    """Persists a lead and sends its routed notification e-mail."""

    def __init__(
        self,
        save_lead: SaveLeadToSheet,
        router: RouteLeadNotification,
        composer: ComposeLeadEmail,
        notifier: LeadNotifier,
        logger: Optional[Callable[[str, str, str, Any], None]] = None,
    ) -> None:
        """
        Initialize lead router use case.

        Args:
            save_lead: Sheet persistence use case
            router: Recipient selection
            composer: E-mail composition
            notifier: E-mail delivery
            logger: Optional logger function (session_id, request_id, component, **kwargs)
        """
        self._save_lead = save_lead
        self._router = router
        self._composer = composer
        self._notifier = notifier
        self._logger = logger

    def _log(self, request_id: str, component: str, **kwargs: Any) -> None:
        """Log event if logger is available."""
        if self._logger:
            self._logger("router", request_id, component, **kwargs)

    async def send_email_notifications(
        self, record: LeadRecord, request_id: str = "unknown"
    ) -> NotificationRoute:
        """
        Route and send the notification for a lead.

        No recipients means no e-mail; that is logged, not raised.

        Args:
            record: Lead record
            request_id: Request identifier for logging

        Returns:
            The routing decision

        Raises:
            NotificationRoutingError: If composing or sending fails
        """
        route = self._router.route(
            record.get("serviceType", ""),
            record.get("district", ""),
            record.get("province", ""),
        )
        self._log(
            request_id,
            "routing",
            service_type=record.get("serviceType", ""),
            recipients=route.recipients,
            cc_recipients=route.cc_recipients,
            area=route.area,
        )

        if not route.has_recipients():
            self._log(request_id, "routing", email_sent=False, reason="no_recipients")
            return route

        try:
            email = self._composer.compose(record)
            # SMTP is blocking; keep it off the event loop
            await asyncio.to_thread(
                self._notifier.send, route.recipients, route.cc_recipients, email
            )
        except NotificationRoutingError:
            raise
        except Exception as e:
            raise NotificationRoutingError(f"Failed to send lead notification: {e}") from e

        self._log(request_id, "routing", email_sent=True, subject=email.subject)
        return route

    async def execute(self, record: LeadRecord, request_id: str = "unknown") -> SubmissionResult:
        """
        Store a lead and notify.

        Every failure is logged and turned into the error envelope.

        Args:
            record: Lead record
            request_id: Request identifier for logging

        Returns:
            Success or error envelope
        """
        try:
            saved = await self._save_lead.execute(record)
            self._log(
                request_id,
                "sheet",
                row_number=saved.row_number,
                header_created=saved.header_created,
                dropped_fields=saved.dropped_fields,
                level=logging.WARNING if saved.dropped_fields else logging.INFO,
            )
            await self.send_email_notifications(record, request_id)
        except Exception as e:
            self._log(
                request_id,
                "router",
                level=logging.ERROR,
                error=str(e),
                error_type=type(e).__name__,
            )
            return SubmissionResult.error(str(e))

        return SubmissionResult.success()

    async def execute_raw(self, body: bytes, request_id: str = "unknown") -> SubmissionResult:
        """
        Decode a raw request body and process it.

        The body is JSON whatever the declared content type, since opaque
        browser requests may send it as text/plain.

        Args:
            body: Raw request body
            request_id: Request identifier for logging

        Returns:
            Success or error envelope
        """
        try:
            data = json.loads(body)
            if not isinstance(data, dict):
                raise ValueError("Lead payload must be a JSON object")
        except ValueError as e:
            self._log(
                request_id,
                "router",
                level=logging.ERROR,
                error=str(e),
                error_type=type(e).__name__,
            )
            return SubmissionResult.error(str(e))

        return await self.execute(to_lead_record(data), request_id)
