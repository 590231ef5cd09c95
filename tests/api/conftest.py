"""
API test fixtures.

Builds the real application with the database, cache, language adapter and
usage tracker dependencies overridden, and an httpx client speaking ASGI to it
on the test's own event loop.
"""

from unittest.mock import MagicMock

import httpx
import pytest

from legalaid.api.deps import get_language_voice_adapter, get_session_cache, get_usage_tracker
from legalaid.api.main import create_app
from legalaid.application.services.usage_service import UsageTracker
from legalaid.boundary.db import get_async_db

OWNER_HEADERS = {"X-User-Id": "user-1", "X-User-Anonymous": "false"}


@pytest.fixture
def owner_headers() -> dict[str, str]:
    return dict(OWNER_HEADERS)


@pytest.fixture
def intruder_headers() -> dict[str, str]:
    return {"X-User-Id": "user-2", "X-User-Anonymous": "false"}


@pytest.fixture
def usage_tracker() -> MagicMock:
    return MagicMock(spec=UsageTracker)


@pytest.fixture
def app(session_factory, session_cache, voice_adapter, usage_tracker):
    """Application wired to in-memory collaborators."""
    app = create_app()

    async def override_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_db] = override_db
    app.dependency_overrides[get_session_cache] = lambda: session_cache
    app.dependency_overrides[get_language_voice_adapter] = lambda: voice_adapter
    app.dependency_overrides[get_usage_tracker] = lambda: usage_tracker
    return app


@pytest.fixture
async def client(app):
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
        yield client
