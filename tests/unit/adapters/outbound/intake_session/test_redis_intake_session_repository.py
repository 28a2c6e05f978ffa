"""Unit tests for Redis intake session repository."""

import json
from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

import pytest

from lead_intake.adapters.outbound.intake_session.redis_intake_session_repository import (
    RedisIntakeSessionRepository,
)
from lead_intake.domain.entities.intake_session import CONTACT_FORM, IntakeSession

FROM_URL = (
    "lead_intake.adapters.outbound.intake_session.redis_intake_session_repository"
    ".aioredis.from_url"
)


@pytest.fixture
def mock_redis_client():
    """Create a mock Redis client."""
    client = AsyncMock()
    client.get = AsyncMock(return_value=None)
    client.setex = AsyncMock()
    client.delete = AsyncMock()
    return client


@pytest.fixture
def repository():
    """Create Redis intake session repository with test config."""
    return RedisIntakeSessionRepository("redis://localhost:6379/0", ttl_seconds=1800)


@pytest.fixture
def sample_session():
    """Create a session holding a renovation draft."""
    return IntakeSession(
        session_id="test_session",
        step=CONTACT_FORM,
        draft={"serviceType": "Roof Renovation", "houseType": "บ้านเดี่ยว"},
        previous_form="renovationForm",
        created_at=datetime(2024, 5, 1, tzinfo=timezone.utc),
        updated_at=datetime(2024, 5, 1, tzinfo=timezone.utc),
    )


@pytest.mark.asyncio
async def test_get_returns_none_when_missing(repository, mock_redis_client):
    """Test get returns None when no session is stored."""
    with patch(FROM_URL, new_callable=AsyncMock) as mock_from_url:
        mock_from_url.return_value = mock_redis_client

        result = await repository.get("test_session")

        assert result is None
        mock_redis_client.get.assert_called_once_with("intake:session:test_session")


@pytest.mark.asyncio
async def test_save_writes_json_with_ttl(repository, mock_redis_client, sample_session):
    """Test save stores the session as JSON with the configured TTL."""
    with patch(FROM_URL, new_callable=AsyncMock) as mock_from_url:
        mock_from_url.return_value = mock_redis_client

        await repository.save("test_session", sample_session)

        key, ttl, payload = mock_redis_client.setex.call_args.args
        assert key == "intake:session:test_session"
        assert ttl == 1800
        data = json.loads(payload)
        assert data["step"] == CONTACT_FORM
        assert data["previous_form"] == "renovationForm"
        assert json.loads(data["draft"]) == sample_session.draft


@pytest.mark.asyncio
async def test_saved_session_reads_back(repository, mock_redis_client, sample_session):
    """Test a stored payload is rebuilt into the same session, draft order kept."""
    with patch(FROM_URL, new_callable=AsyncMock) as mock_from_url:
        mock_from_url.return_value = mock_redis_client

        await repository.save("test_session", sample_session)
        mock_redis_client.get.return_value = mock_redis_client.setex.call_args.args[2]

        result = await repository.get("test_session")

        assert result.step == CONTACT_FORM
        assert result.previous_form == "renovationForm"
        assert list(result.draft.keys()) == ["serviceType", "houseType"]
        assert result.created_at == sample_session.created_at


@pytest.mark.asyncio
async def test_unreadable_payload_is_discarded(repository, mock_redis_client):
    """Test corrupt data reads as no session instead of raising."""
    mock_redis_client.get.return_value = "{not json"
    with patch(FROM_URL, new_callable=AsyncMock) as mock_from_url:
        mock_from_url.return_value = mock_redis_client

        assert await repository.get("test_session") is None


@pytest.mark.asyncio
async def test_delete_removes_key(repository, mock_redis_client):
    """Test delete removes the session key."""
    with patch(FROM_URL, new_callable=AsyncMock) as mock_from_url:
        mock_from_url.return_value = mock_redis_client

        await repository.delete("test_session")

        mock_redis_client.delete.assert_called_once_with("intake:session:test_session")
