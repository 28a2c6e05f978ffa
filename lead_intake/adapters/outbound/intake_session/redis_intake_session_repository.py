"""Redis intake session repository adapter."""

import json
from datetime import datetime, timezone
from typing import Optional

from redis import asyncio as aioredis

from lead_intake.application.ports.intake_session_repository import IntakeSessionRepository
from lead_intake.domain.entities.intake_session import SERVICE_SELECTION, IntakeSession
from lead_intake.infrastructure.logging.logger import logger


class RedisIntakeSessionRepository(IntakeSessionRepository):
    """Redis adapter for intake sessions, stored as JSON with a TTL."""

    KEY_PREFIX = "intake:session:"

    def __init__(self, redis_url: str, ttl_seconds: int) -> None:
        """
        Initialize Redis intake session repository.

        Args:
            redis_url: Redis connection URL
            ttl_seconds: Time-to-live in seconds, refreshed on every save
        """
        self._redis_url = redis_url
        self._ttl_seconds = ttl_seconds
        self._client: Optional[aioredis.Redis] = None

    async def _get_client(self) -> aioredis.Redis:
        """
        Get or create Redis client.

        Returns:
            Redis client instance
        """
        if self._client is None:
            self._client = await aioredis.from_url(
                self._redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
        return self._client

    def _make_key(self, session_id: str) -> str:
        return f"{self.KEY_PREFIX}{session_id}"

    def _serialize(self, session: IntakeSession) -> str:
        return json.dumps(
            {
                "session_id": session.session_id,
                "step": session.step,
                "current_form": session.current_form,
                # Draft slots: record as a JSON string, producing form id
                "draft": json.dumps(session.draft, ensure_ascii=False),
                "previous_form": session.previous_form,
                "created_at": session.created_at.isoformat(),
                "updated_at": session.updated_at.isoformat(),
            },
            ensure_ascii=False,
        )

    def _deserialize(self, raw: str) -> IntakeSession:
        data = json.loads(raw)
        now = datetime.now(timezone.utc)
        created_at = data.get("created_at")
        updated_at = data.get("updated_at")
        return IntakeSession(
            session_id=data["session_id"],
            step=data.get("step", SERVICE_SELECTION),
            current_form=data.get("current_form"),
            draft=json.loads(data.get("draft") or "{}"),
            previous_form=data.get("previous_form"),
            created_at=datetime.fromisoformat(created_at) if created_at else now,
            updated_at=datetime.fromisoformat(updated_at) if updated_at else now,
        )

    async def get(self, session_id: str) -> Optional[IntakeSession]:
        """
        Get intake session state.

        Args:
            session_id: Session identifier

        Returns:
            Intake session entity, or None if missing, expired or unreadable
        """
        client = await self._get_client()
        raw = await client.get(self._make_key(session_id))
        if raw is None:
            return None
        try:
            return self._deserialize(raw)
        except (ValueError, KeyError) as e:
            logger.warning(f"Discarding unreadable intake session {session_id}: {str(e)}")
            return None

    async def save(self, session_id: str, session: IntakeSession) -> None:
        """
        Save intake session state with TTL.

        Args:
            session_id: Session identifier
            session: Intake session entity to save
        """
        session.touch()
        client = await self._get_client()
        await client.setex(self._make_key(session_id), self._ttl_seconds, self._serialize(session))

    async def delete(self, session_id: str) -> None:
        """
        Delete intake session state.

        Args:
            session_id: Session identifier
        """
        client = await self._get_client()
        await client.delete(self._make_key(session_id))
