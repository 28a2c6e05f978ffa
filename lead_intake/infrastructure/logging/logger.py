"""Structured logger for observability."""

import logging
from typing import Any

# Configure root logger with JSON-like structured format
_logger = logging.getLogger("lead_intake")
_logger.setLevel(logging.INFO)

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_event(
    session_id: str,
    request_id: str,
    component: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log structured event for an intake request.

    Args:
        session_id: Intake session identifier ("router" for server-side requests)
        request_id: Request identifier (UUID string)
        component: Component name (e.g., 'http', 'intake', 'router')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {
        "session_id": session_id,
        "request_id": request_id,
        "component": component,
    }
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    log_message = " | ".join(log_parts)

    _logger.log(level, log_message)


# Export logger instance for direct use
logger = _logger
