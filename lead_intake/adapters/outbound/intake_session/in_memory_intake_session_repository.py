"""In-memory intake session repository adapter."""

from datetime import datetime, timezone
from typing import Optional

from lead_intake.application.ports.intake_session_repository import IntakeSessionRepository
from lead_intake.domain.entities.intake_session import IntakeSession


class InMemoryIntakeSessionRepository(IntakeSessionRepository):
    """In-memory implementation of intake session repository with TTL cleanup."""

    def __init__(self, ttl_seconds: int) -> None:
        """
        Initialize in-memory repository.

        Args:
            ttl_seconds: Idle time after which a session is forgotten
        """
        self._storage: dict[str, IntakeSession] = {}
        self._ttl_seconds = ttl_seconds

    def _is_expired(self, session: IntakeSession, now: datetime) -> bool:
        return (now - session.updated_at).total_seconds() > self._ttl_seconds

    def _purge_expired(self) -> None:
        """Remove expired sessions from storage."""
        now = datetime.now(timezone.utc)
        expired = [sid for sid, session in self._storage.items() if self._is_expired(session, now)]
        for session_id in expired:
            del self._storage[session_id]

    async def get(self, session_id: str) -> Optional[IntakeSession]:
        """
        Get intake session state.

        Args:
            session_id: Session identifier

        Returns:
            Intake session entity, or None if not found or expired
        """
        self._purge_expired()
        return self._storage.get(session_id)

    async def save(self, session_id: str, session: IntakeSession) -> None:
        """
        Save intake session state.

        Args:
            session_id: Session identifier
            session: Intake session entity to save
        """
        self._purge_expired()
        session.touch()
        self._storage[session_id] = session

    async def delete(self, session_id: str) -> None:
        """
        Delete intake session state.

        Args:
            session_id: Session identifier
        """
        self._storage.pop(session_id, None)
