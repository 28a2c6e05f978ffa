"""Intake session repository adapters."""

from lead_intake.adapters.outbound.intake_session.in_memory_intake_session_repository import (
    InMemoryIntakeSessionRepository,
)
from lead_intake.adapters.outbound.intake_session.redis_intake_session_repository import (
    RedisIntakeSessionRepository,
)

__all__ = [
    "InMemoryIntakeSessionRepository",
    "RedisIntakeSessionRepository",
]
