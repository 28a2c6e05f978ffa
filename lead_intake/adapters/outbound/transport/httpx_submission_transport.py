"""HTTP submission transport adapter."""

import httpx

from lead_intake.application.dtos.lead_record import LeadRecord
from lead_intake.application.ports.submission_transport import SubmissionTransport
from lead_intake.domain.errors import SubmissionTransportError
from lead_intake.infrastructure.logging.logger import logger

# Raised before the lead reaches the router
UNSENT_ERRORS = (
    httpx.InvalidURL,
    httpx.UnsupportedProtocol,
    httpx.LocalProtocolError,
    httpx.ProxyError,
    httpx.ConnectError,
    httpx.ConnectTimeout,
    httpx.PoolTimeout,
    httpx.WriteError,
    httpx.WriteTimeout,
)


class HttpxSubmissionTransport(SubmissionTransport):
    """Posts merged leads to the lead router endpoint.

    Opaque-response mode: the status and body of the reply are never read, so
    a router-side failure looks exactly like a success from here. Errors on
    the read side (a slow router, a dropped reply) are router-side too.
    """

    def __init__(self, endpoint_url: str, timeout_seconds: float = 10.0) -> None:
        """
        Initialize HTTP transport.

        Args:
            endpoint_url: Lead router URL
            timeout_seconds: Timeout in seconds for each phase (connect, write, read, pool)
        """
        if not endpoint_url:
            raise ValueError("Submission endpoint URL is required")
        self._endpoint_url = endpoint_url
        self._timeout = timeout_seconds

    async def send(self, record: LeadRecord) -> None:
        """
        POST the lead as JSON once.

        Args:
            record: Merged lead record

        Raises:
            SubmissionTransportError: If the request could not be built, connected or written
        """
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                await client.post(
                    self._endpoint_url,
                    json=record,
                    headers={"Content-Type": "application/json"},
                )
        except UNSENT_ERRORS as e:
            raise SubmissionTransportError(f"Lead submission failed: {e}") from e
        except httpx.HTTPError as e:
            # Lead already sent; the reply is never read anyway
            logger.warning(f"Ignoring error after lead was sent to {self._endpoint_url}: {str(e)}")
