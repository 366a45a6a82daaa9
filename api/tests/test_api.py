"""Tests for the HTTP surface."""

import re

import pytest
from httpx import ASGITransport, AsyncClient

from slack_notify.config import settings
from slack_notify.database import get_db
from slack_notify.main import app
from slack_notify.sender import WebhookSender, get_webhook_sender


def _section_text(payload: dict, index: int = 0) -> str:
    return payload["blocks"][index]["text"]["text"]


class TestSlackNotifyEndpoint:
    @pytest.mark.asyncio
    async def test_test_message(self, client, acme, webhook):
        response = await client.post("/slack-notify", json={"siteId": "s1", "test": True})

        assert response.status_code == 200
        assert response.json() == {"success": True}
        payload = webhook.payloads[0]
        assert "Test notification from Acme" in payload["text"]
        context = payload["blocks"][1]
        assert context["type"] == "context"
        assert re.search(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}", context["elements"][0]["text"])
        assert str(webhook.requests[0].url) == acme.webhook_url

    @pytest.mark.asyncio
    async def test_daily_digest(self, client, acme, webhook):
        response = await client.post(
            "/slack-notify",
            json={
                "siteId": "s1",
                "type": "daily_digest",
                "data": {"visitors": 42, "pageviews": 100, "bounceRate": 35, "avgDuration": "1m30s"},
            },
        )

        assert response.status_code == 200
        fields = [f["text"] for f in webhook.payloads[0]["blocks"][2]["fields"]]
        assert fields == [
            "*Visitors*\n42",
            "*Page Views*\n100",
            "*Bounce Rate*\n35%",
            "*Avg. Duration*\n1m30s",
        ]

    @pytest.mark.asyncio
    async def test_goal_completed(self, client, acme, webhook):
        response = await client.post(
            "/slack-notify",
            json={"siteId": "s1", "type": "goal_completed", "data": {"goalName": "Signup", "conversions": 7}},
        )

        assert response.status_code == 200
        text = _section_text(webhook.payloads[0])
        assert "Goal Achieved!" in text
        assert "Signup" in text
        assert "7" in text

    @pytest.mark.asyncio
    async def test_traffic_spike(self, client, acme, webhook):
        response = await client.post(
            "/slack-notify",
            json={
                "siteId": "s1",
                "type": "traffic_spike",
                "data": {"currentVisitors": 120, "averageVisitors": 40, "increasePercent": 200},
            },
        )

        assert response.status_code == 200
        assert "*Increase:* 200%" in _section_text(webhook.payloads[0])

    @pytest.mark.asyncio
    async def test_missing_site_id(self, client, webhook):
        response = await client.post("/slack-notify", json={"test": True})

        assert response.status_code == 400
        assert response.json() == {"error": "Site ID is required"}
        assert webhook.requests == []

    @pytest.mark.asyncio
    async def test_no_active_integration(self, client, acme, webhook):
        response = await client.post("/slack-notify", json={"siteId": "other", "test": True})

        assert response.status_code == 400
        assert response.json() == {"error": "No active Slack integration found for this site"}
        assert webhook.requests == []

    @pytest.mark.asyncio
    async def test_unknown_type(self, client, acme, webhook):
        response = await client.post("/slack-notify", json={"siteId": "s1", "type": "weekly_digest"})

        assert response.status_code == 400
        assert response.json() == {"error": "Unknown notification type"}
        assert webhook.requests == []

    @pytest.mark.asyncio
    async def test_webhook_failure(self, client, acme, webhook):
        webhook.status_code = 500

        response = await client.post("/slack-notify", json={"siteId": "s1", "test": True})

        assert response.status_code == 400
        assert response.json() == {"error": "Slack API error: 500"}

    @pytest.mark.asyncio
    async def test_malformed_json(self, client):
        response = await client.post(
            "/slack-notify",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}

    @pytest.mark.asyncio
    async def test_cors_headers_on_response(self, client, acme):
        response = await client.post("/slack-notify", json={"siteId": "s1", "test": True})

        assert response.headers["access-control-allow-origin"] == "*"
        assert "apikey" in response.headers["access-control-allow-headers"]


class BrokenSender(WebhookSender):
    async def send(self, webhook_url, message):
        raise RuntimeError("unexpected failure")


class TestUnexpectedError:
    @pytest.mark.asyncio
    async def test_500_carries_cors_headers(self, db_session, acme):
        async def override_get_db():
            yield db_session

        app.dependency_overrides[get_db] = override_get_db
        app.dependency_overrides[get_webhook_sender] = lambda: BrokenSender(transport=None)
        try:
            async with AsyncClient(
                transport=ASGITransport(app=app, raise_app_exceptions=False),
                base_url="http://test",
            ) as ac:
                response = await ac.post("/slack-notify", json={"siteId": "s1", "test": True})
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert response.headers["access-control-allow-origin"] == "*"
        assert "content-type" in response.headers["access-control-allow-headers"]


class TestPreflight:
    @pytest.mark.asyncio
    async def test_options_has_no_body(self, client):
        response = await client.options(
            "/slack-notify",
            headers={"Origin": "https://app.example.com", "Access-Control-Request-Method": "POST"},
        )

        assert response.status_code == 200
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "*"
        allowed = response.headers["access-control-allow-headers"]
        for header in ("authorization", "content-type", "apikey"):
            assert header in allowed


class TestFunctionKey:
    @pytest.fixture(autouse=True)
    def _require_key(self, monkeypatch):
        monkeypatch.setattr(settings, "function_api_key", "secret-key")

    @pytest.mark.asyncio
    async def test_missing_key(self, client, acme, webhook):
        response = await client.post("/slack-notify", json={"siteId": "s1", "test": True})

        assert response.status_code == 401
        assert response.json() == {"error": "Missing API key"}
        assert webhook.requests == []

    @pytest.mark.asyncio
    async def test_wrong_key(self, client, acme):
        response = await client.post(
            "/slack-notify", json={"siteId": "s1", "test": True}, headers={"apikey": "nope"}
        )
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid API key"}

    @pytest.mark.asyncio
    async def test_apikey_header(self, client, acme):
        response = await client.post(
            "/slack-notify", json={"siteId": "s1", "test": True}, headers={"apikey": "secret-key"}
        )
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_bearer_token(self, client, acme):
        response = await client.post(
            "/slack-notify",
            json={"siteId": "s1", "test": True},
            headers={"Authorization": "Bearer secret-key"},
        )
        assert response.status_code == 200


class TestHealthEndpoint:
    @pytest.mark.asyncio
    async def test_root(self, client):
        response = await client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["checks"]["database"] == "ok"
