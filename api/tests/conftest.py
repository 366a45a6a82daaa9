"""Test fixtures."""

import json
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import httpx  # noqa: E402
import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from slack_notify.database import get_db  # noqa: E402
from slack_notify.main import app  # noqa: E402
from slack_notify.models import Base, SlackIntegration, Site  # noqa: E402
from slack_notify.sender import WebhookSender, get_webhook_sender  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
WEBHOOK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"


class WebhookRecorder:
    """Stand-in Slack receiver: records POSTs and answers with a fixed status."""

    def __init__(self, status_code: int = 200, body: str = "ok"):
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def payloads(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]

    def sender(self) -> WebhookSender:
        return WebhookSender(transport=httpx.MockTransport(self))


@pytest.fixture
async def db_engine():
    """Create test database engine."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine):
    """Create test database session."""
    async_session = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as session:
        yield session


@pytest.fixture
async def acme(db_session):
    """Site s1 (Acme) with an active integration."""
    site = Site(id="s1", name="Acme", domain="acme.com")
    integration = SlackIntegration(site_id="s1", webhook_url=WEBHOOK_URL, channel_name="analytics")
    db_session.add_all([site, integration])
    await db_session.commit()
    return integration


@pytest.fixture
def webhook():
    return WebhookRecorder()


@pytest.fixture
async def client(db_session, webhook):
    """Create test client with database session and webhook overrides."""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_webhook_sender] = webhook.sender

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
