"""Intake session repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from lead_intake.domain.entities.intake_session import IntakeSession


class IntakeSessionRepository(ABC):
    """Port interface for intake session state."""

    @abstractmethod
    async def get(self, session_id: str) -> Optional[IntakeSession]:
        """
        Get intake session state.

        Args:
            session_id: Session identifier

        Returns:
            Intake session entity, or None if not found
        """
        pass

    @abstractmethod
    async def save(self, session_id: str, session: IntakeSession) -> None:
        """
        Save intake session state.

        Args:
            session_id: Session identifier
            session: Intake session entity to save
        """
        pass

    @abstractmethod
    async def delete(self, session_id: str) -> None:
        """
        Delete intake session state.

        Args:
            session_id: Session identifier
        """
        pass
