"""
Session cache mirror.

Non-authoritative summaries of chat sessions keyed ``chat_session:{id}``.
Ownership checks and history reads always go to the database.

Dependencies: legalaid.boundary.cache.redis_client
System role: Fast summary lookups for chat sessions
"""

from typing import Any

from legalaid.boundary.cache.redis_client import RedisCache

SESSION_KEY_PREFIX = "chat_session:"
DEFAULT_SESSION_TTL = 3600


def session_cache_key(session_id: str) -> str:
    return f"{SESSION_KEY_PREFIX}{session_id}"


class SessionCache:
    """Mirror of chat session summaries; every operation degrades to a miss."""

    def __init__(self, backend: RedisCache, ttl_seconds: int = DEFAULT_SESSION_TTL) -> None:
        self.backend = backend
        self.ttl_seconds = ttl_seconds

    async def set(
        self,
        session_id: str,
        summary: dict[str, Any],
        ttl_seconds: int | None = None,
    ) -> bool:
        """
        Store a session summary, refreshing its TTL.

        Args:
            session_id: External session token
            summary: JSON-serializable summary
            ttl_seconds: Override of the default TTL

        Returns:
            True if the mirror was written
        """
        return await self.backend.set_json(
            session_cache_key(session_id),
            summary,
            ttl_seconds if ttl_seconds is not None else self.ttl_seconds,
        )

    async def get(self, session_id: str) -> dict[str, Any] | None:
        value = await self.backend.get_json(session_cache_key(session_id))
        return value if isinstance(value, dict) else None

    async def delete(self, session_id: str) -> bool:
        return await self.backend.delete(session_cache_key(session_id))
