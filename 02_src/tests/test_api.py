"""Tests for the HTTP API."""

import httpx
import pytest
import pytest_asyncio

from location_dialogs.api import create_fastapi_app
from location_dialogs.api.routes import control


@pytest_asyncio.fixture
async def client(app):
    """Create HTTP client bound to a started application."""
    fastapi_app = create_fastapi_app(app)
    transport = httpx.ASGITransport(app=fastapi_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def send(client, text, user_id="user1"):
    response = await client.post("/api/messages", json={"user_id": user_id, "text": text})
    assert response.status_code == 200
    return response.json()


class TestMessagingRoutes:
    """Tests for /api/messages."""

    @pytest.mark.asyncio
    async def test_full_conversation(self, client):
        """Test start, help, reset and answer over HTTP."""
        started = await send(client, "hi")
        prompt = started["replies"]
        assert started["started"] is True

        helped = await send(client, "Help")
        assert helped["started"] is False
        assert len(helped["replies"]) == 1
        assert helped["completed"] is False

        reset = await send(client, "reset")
        assert reset["replies"] == prompt

        done = await send(client, "1600 Pennsylvania Ave")
        assert done["completed"] is True
        assert done["result"]["location"] == "1600 Pennsylvania Ave"

    @pytest.mark.asyncio
    async def test_missing_text_cancels(self, client):
        """Test that an omitted text field cancels the conversation."""
        await send(client, "hi")
        response = await client.post("/api/messages", json={"user_id": "user1"})

        data = response.json()
        assert data["completed"] is True
        assert data["result"] is None

    @pytest.mark.asyncio
    async def test_invalid_request(self, client):
        """Test that a request without user_id is rejected."""
        response = await client.post("/api/messages", json={"text": "hi"})
        assert response.status_code == 422


class TestObservabilityRoutes:
    """Tests for observability routes."""

    @pytest.mark.asyncio
    async def test_get_conversation(self, client):
        """Test reading an active conversation."""
        await send(client, "hi")

        response = await client.get("/api/conversations/user1")

        assert response.status_code == 200
        data = response.json()
        assert data["depth"] == 2
        assert data["waiting"] is True
        assert data["transcript"][0]["role"] == "assistant"

    @pytest.mark.asyncio
    async def test_get_unknown_conversation(self, client):
        """Test that an unknown user has no conversation."""
        response = await client.get("/api/conversations/nobody")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_trace_events_filter(self, client):
        """Test filtering intercepted commands."""
        await send(client, "hi")
        await send(client, "help")

        response = await client.get(
            "/api/trace-events", params={"event_type": "command_intercepted"}
        )

        assert response.status_code == 200
        events = response.json()
        assert len(events) == 1
        assert events[0]["data"]["command"] == "Help"

    @pytest.mark.asyncio
    async def test_trace_events_bad_timestamp(self, client):
        """Test that an invalid after filter is rejected."""
        response = await client.get("/api/trace-events", params={"after": "yesterday"})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_trace_events_naive_timestamp_is_utc(self, client):
        """Test that an after filter without an offset is read as UTC."""
        await send(client, "hi")

        response = await client.get(
            "/api/trace-events", params={"after": "2020-01-01T00:00:00"}
        )

        assert response.status_code == 200
        assert len(response.json()) > 0


class TestControlRoutes:
    """Tests for control routes."""

    @pytest.mark.asyncio
    async def test_reset(self, client, app):
        """Test that reset drops conversations."""
        await send(client, "hi")

        response = await client.post("/api/control/reset")

        assert response.json() == {"status": "ok"}
        assert app.get_conversation("user1") is None

    @pytest.mark.asyncio
    async def test_sim_not_configured(self, client, monkeypatch):
        """Test that sim control needs a configured sim."""
        monkeypatch.setattr(control, "_sim_instance", None)

        response = await client.post("/api/control/sim/start")
        assert response.status_code == 404
