"""Submission transport adapters."""

from lead_intake.adapters.outbound.transport.httpx_submission_transport import (
    HttpxSubmissionTransport,
)
from lead_intake.adapters.outbound.transport.in_process_submission_transport import (
    InProcessSubmissionTransport,
)

__all__ = [
    "HttpxSubmissionTransport",
    "InProcessSubmissionTransport",
]
