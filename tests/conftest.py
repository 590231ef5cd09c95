"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory async database, fake Redis clients, mock GhanaNLP transport,
knowledge matcher and language adapter fixtures
Dependencies: pytest, sqlalchemy, aiosqlite, httpx, redis
System role: Test infrastructure and fixture management
"""

import json
from typing import Callable

import httpx
import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from legalaid.application.adapters.language_voice_adapter import LanguageVoiceAdapter
from legalaid.boundary.cache import NLPCache, RedisCache, SessionCache
from legalaid.boundary.db.base import Base
from legalaid.boundary.nlp import GhanaNLPClient
from legalaid.configs.nlp import NLPSettings
from legalaid.core.knowledge import KnowledgeMatcher, load_default_knowledge_base

TEST_NLP_BASE_URL = "https://nlp.test"
FAKE_WAV = b"RIFF\x24\x00\x00\x00WAVEfmt "


class FakeRedis:
    """In-memory stand-in for ``redis.asyncio.Redis`` with decode_responses=True."""

    def __init__(self) -> None:
        self.store: dict[str, str] = {}
        self.ttls: dict[str, int | None] = {}

    async def get(self, key: str) -> str | None:
        return self.store.get(key)

    async def set(self, key: str, value: str, ex: int | None = None) -> bool:
        self.store[key] = value
        self.ttls[key] = ex
        return True

    async def delete(self, *keys: str) -> int:
        removed = 0
        for key in keys:
            if self.store.pop(key, None) is not None:
                removed += 1
            self.ttls.pop(key, None)
        return removed

    async def ping(self) -> bool:
        return True

    async def aclose(self) -> None:
        return None

    def load(self, key: str) -> dict:
        return json.loads(self.store[key])


class FailingRedis:
    """Redis client whose every call fails as if the server were down."""

    def __init__(self) -> None:
        self.calls = 0

    async def _fail(self, *args, **kwargs):
        self.calls += 1
        raise RedisConnectionError("Connection refused")

    get = set = delete = ping = _fail

    async def aclose(self) -> None:
        return None


def make_nlp_client(handler: Callable[[httpx.Request], httpx.Response], api_key: str | None = "test-key") -> GhanaNLPClient:
    """Build a GhanaNLP client served by an in-process handler."""
    return GhanaNLPClient(
        api_key=api_key,
        base_url=TEST_NLP_BASE_URL,
        timeout_seconds=5.0,
        transport=httpx.MockTransport(handler),
    )


def default_nlp_handler(request: httpx.Request) -> httpx.Response:
    """Provider double answering every endpoint successfully."""
    path = request.url.path
    if path == "/v1/translate":
        body = json.loads(request.content)
        return httpx.Response(200, json=f"[{body['lang']}] {body['in']}")
    if path == "/asr/v2/transcribe":
        return httpx.Response(200, text="  me pɛ mmoa  ")
    if path == "/tts/v1/tts":
        return httpx.Response(200, content=FAKE_WAV, headers={"Content-Type": "audio/wav"})
    if path == "/tts/v1/languages":
        return httpx.Response(200, json={"languages": {"tw": "Twi", "ee": "Ewe", "ki": "Kikuyu"}})
    if path == "/tts/v1/speakers":
        return httpx.Response(200, json={"tw": ["twi_speaker_4"], "ee": ["ewe_speaker_3"]})
    return httpx.Response(404, json={"message": "not found"})


def failing_nlp_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(503, json={"message": "provider down"})


@pytest.fixture
async def db_engine():
    """
    Create in-memory SQLite async engine with all tables.

    Yields:
        AsyncEngine: Engine sharing one connection across sessions
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_async_db(session_factory):
    """
    Create a test database session.

    Yields:
        AsyncSession: Session rolled back after the test
    """
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def redis_cache(fake_redis: FakeRedis) -> RedisCache:
    return RedisCache(client=fake_redis)


@pytest.fixture
def failing_redis_cache(failing_redis: FailingRedis) -> RedisCache:
    return RedisCache(client=failing_redis)


@pytest.fixture
def session_cache(redis_cache: RedisCache) -> SessionCache:
    return SessionCache(redis_cache, ttl_seconds=3600)


@pytest.fixture
def nlp_settings() -> NLPSettings:
    return NLPSettings(api_key="test-key", base_url=TEST_NLP_BASE_URL, max_translation_chars=1000)


@pytest.fixture
def nlp_client() -> GhanaNLPClient:
    return make_nlp_client(default_nlp_handler)


@pytest.fixture
def voice_adapter(nlp_client: GhanaNLPClient, redis_cache: RedisCache, nlp_settings: NLPSettings) -> LanguageVoiceAdapter:
    return LanguageVoiceAdapter(client=nlp_client, cache=NLPCache(redis_cache), settings=nlp_settings)


@pytest.fixture
def failing_voice_adapter(redis_cache: RedisCache, nlp_settings: NLPSettings) -> LanguageVoiceAdapter:
    return LanguageVoiceAdapter(
        client=make_nlp_client(failing_nlp_handler),
        cache=NLPCache(redis_cache),
        settings=nlp_settings,
    )


@pytest.fixture
def matcher() -> KnowledgeMatcher:
    return KnowledgeMatcher(load_default_knowledge_base())


@pytest.fixture
def fake_wav() -> bytes:
    return FAKE_WAV


@pytest.fixture
def nlp_client_factory() -> Callable[..., GhanaNLPClient]:
    """Factory for clients served by a custom handler."""
    return make_nlp_client


@pytest.fixture
def failing_redis() -> FailingRedis:
    return FailingRedis()
