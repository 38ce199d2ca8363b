"""Shared fixtures: in-memory SQLite store, fake users and mocked HTTP."""

import os

os.environ.setdefault("SUPABASE_URL", "https://project.supabase.test")
os.environ.setdefault("SUPABASE_ANON_KEY", "anon-key")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "service-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from collections.abc import AsyncGenerator, Callable  # noqa: E402
from uuid import uuid4  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402

import newsdesk.models  # noqa: E402, F401
from newsdesk.api.deps import get_auth_client, get_current_user, get_webhook_client, optional_user  # noqa: E402
from newsdesk.config import get_settings  # noqa: E402
from newsdesk.db.postgres import get_session  # noqa: E402
from newsdesk.main import create_app  # noqa: E402
from newsdesk.services.auth_service import AuthClient, CurrentUser  # noqa: E402
from newsdesk.services.webhooks import WebhookClient  # noqa: E402

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it answered."""

    def __init__(self, handler: Handler):
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def user() -> CurrentUser:
    return CurrentUser(id=uuid4(), email="jane@example.com", access_token="user-token")


@pytest.fixture
def admin() -> CurrentUser:
    return CurrentUser(
        id=uuid4(),
        email="ops@adaptingautomations.com",
        access_token="admin-token",
        is_admin=True,
    )


@pytest.fixture
def webhook_transport() -> RecordingTransport:
    return RecordingTransport(lambda request: httpx.Response(200, text="Accepted"))


@pytest.fixture
def webhook_client(webhook_transport: RecordingTransport) -> WebhookClient:
    return WebhookClient(http_client=httpx.AsyncClient(transport=webhook_transport))


def make_auth_client(handler: Handler) -> tuple[AuthClient, RecordingTransport]:
    transport = RecordingTransport(handler)
    http_client = httpx.AsyncClient(transport=transport, base_url=get_settings().auth_url)
    return AuthClient(http_client=http_client), transport


@pytest.fixture
def app(session_factory: async_sessionmaker[AsyncSession], webhook_client: WebhookClient):
    """App with the test store and webhook client; no signed-in user."""
    application = create_app()

    async def override_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    application.dependency_overrides[get_session] = override_session
    application.dependency_overrides[get_webhook_client] = lambda: webhook_client
    return application


@pytest.fixture
def sign_in(app) -> Callable[[CurrentUser], None]:
    """Skip the provider lookup and treat every request as ``user``."""

    def _sign_in(user: CurrentUser) -> None:
        app.dependency_overrides[get_current_user] = lambda: user
        app.dependency_overrides[optional_user] = lambda: user

    return _sign_in


@pytest.fixture
def auth_provider(app) -> Callable[[Handler], RecordingTransport]:
    """Route the app's auth client to a mocked provider."""

    def _install(handler: Handler) -> RecordingTransport:
        auth, transport = make_auth_client(handler)
        app.dependency_overrides[get_auth_client] = lambda: auth
        return transport

    return _install


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
