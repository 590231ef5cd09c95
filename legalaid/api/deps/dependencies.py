"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: legalaid.configs, legalaid.application, legalaid.boundary
System role: DI container for service injection
"""

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from legalaid.application.adapters.language_voice_adapter import LanguageVoiceAdapter
from legalaid.application.services import ChatService, SessionService, UsageTracker
from legalaid.boundary.cache import NLPCache, RedisCache, SessionCache
from legalaid.boundary.db import get_async_db, get_async_session_factory
from legalaid.boundary.nlp import GhanaNLPClient
from legalaid.configs import get_settings
from legalaid.core.identity import ANONYMOUS, Caller
from legalaid.core.knowledge import KnowledgeMatcher, load_default_knowledge_base

_TRUTHY = {"1", "true", "yes"}


class ServiceCache:
    """Container for process-wide collaborator instances."""

    def __init__(self):
        self._redis_cache = None
        self._session_cache = None
        self._nlp_client = None
        self._voice_adapter = None
        self._matcher = None
        self._usage_tracker = None

    @property
    def redis_cache(self) -> RedisCache:
        """Get cached Redis wrapper (disabled when REDIS_URL is unset)."""
        if self._redis_cache is None:
            settings = get_settings()
            self._redis_cache = RedisCache(
                url=settings.cache.url,
                socket_timeout=settings.cache.socket_timeout,
            )
        return self._redis_cache

    @property
    def session_cache(self) -> SessionCache:
        if self._session_cache is None:
            self._session_cache = SessionCache(
                self.redis_cache,
                ttl_seconds=get_settings().cache.session_ttl_seconds,
            )
        return self._session_cache

    @property
    def nlp_client(self) -> GhanaNLPClient:
        if self._nlp_client is None:
            self._nlp_client = GhanaNLPClient.from_settings(get_settings().nlp)
        return self._nlp_client

    @property
    def voice_adapter(self) -> LanguageVoiceAdapter:
        """Get cached language/voice adapter."""
        if self._voice_adapter is None:
            self._voice_adapter = LanguageVoiceAdapter(
                client=self.nlp_client,
                cache=NLPCache(self.redis_cache),
                settings=get_settings().nlp,
            )
        return self._voice_adapter

    @property
    def matcher(self) -> KnowledgeMatcher:
        if self._matcher is None:
            self._matcher = KnowledgeMatcher(load_default_knowledge_base())
        return self._matcher

    @property
    def usage_tracker(self) -> UsageTracker:
        if self._usage_tracker is None:
            self._usage_tracker = UsageTracker(get_async_session_factory())
        return self._usage_tracker

    async def aclose(self) -> None:
        """Drain background work and close network clients."""
        if self._usage_tracker is not None:
            await self._usage_tracker.drain()
        if self._nlp_client is not None:
            await self._nlp_client.aclose()
        if self._redis_cache is not None:
            await self._redis_cache.aclose()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._redis_cache = None
        self._session_cache = None
        self._nlp_client = None
        self._voice_adapter = None
        self._matcher = None
        self._usage_tracker = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_current_caller(
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
    x_user_anonymous: str | None = Header(default=None, alias="X-User-Anonymous"),
) -> Caller:
    """
    Build the caller from trusted upstream identity headers.

    Args:
        x_user_id: User id set by the identity layer; absent for anonymous callers
        x_user_anonymous: "true" when the id belongs to a guest account

    Returns:
        Caller: Request identity (never verified here)
    """
    if not x_user_id:
        return ANONYMOUS
    is_anonymous = (x_user_anonymous or "").strip().lower() in _TRUTHY
    return Caller(id=x_user_id, is_anonymous=is_anonymous)


def get_session_cache() -> SessionCache:
    return get_service_cache().session_cache


def get_language_voice_adapter() -> LanguageVoiceAdapter:
    return get_service_cache().voice_adapter


def get_knowledge_matcher() -> KnowledgeMatcher:
    return get_service_cache().matcher


def get_usage_tracker() -> UsageTracker:
    return get_service_cache().usage_tracker


def get_session_service(
    db: AsyncSession = Depends(get_async_db),
    session_cache: SessionCache = Depends(get_session_cache),
) -> SessionService:
    """
    Get session service instance.

    Args:
        db: Async database session (injected via Depends)
        session_cache: Session summary mirror (injected via Depends)

    Returns:
        SessionService: Session service instance
    """
    return SessionService(db=db, session_cache=session_cache)


def get_chat_service(
    db: AsyncSession = Depends(get_async_db),
    matcher: KnowledgeMatcher = Depends(get_knowledge_matcher),
    voice_adapter: LanguageVoiceAdapter = Depends(get_language_voice_adapter),
    session_cache: SessionCache = Depends(get_session_cache),
    usage_tracker: UsageTracker = Depends(get_usage_tracker),
) -> ChatService:
    """
    Get chat service instance.

    Args:
        db: Async database session (injected via Depends)
        matcher: Shared knowledge matcher
        voice_adapter: Shared language/voice adapter
        session_cache: Session summary mirror
        usage_tracker: Fire-and-forget usage counter

    Returns:
        ChatService: Chat service wired to shared collaborators
    """
    return ChatService(
        db=db,
        matcher=matcher,
        voice_adapter=voice_adapter,
        session_cache=session_cache,
        usage_tracker=usage_tracker,
    )
