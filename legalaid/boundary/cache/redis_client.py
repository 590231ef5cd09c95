"""
Degrade-safe Redis wrapper.

Every backend failure (connection refused, timeout, undecodable payload) is
logged at warning level and reported to callers as a cache miss or no-op.
When no URL is configured the wrapper is disabled and every call is a no-op.

Dependencies: redis.asyncio, legalaid.core.exceptions
System role: Shared cache backend for the session mirror and NLP results
"""

import json
import logging
from typing import Any, Awaitable, Callable, TypeVar

from redis.asyncio import Redis
from redis.exceptions import RedisError

from legalaid.core.exceptions import CacheUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RedisCache:
    """JSON-valued key/value cache over ``redis.asyncio`` that never raises."""

    def __init__(
        self,
        url: str | None = None,
        socket_timeout: float = 2.0,
        client: Redis | None = None,
    ) -> None:
        """
        Initialize the cache.

        Args:
            url: Redis URL; None disables caching
            socket_timeout: Connect and read timeout in seconds
            client: Pre-built client (tests inject fakes here)
        """
        if client is not None:
            self._client = client
        elif url:
            self._client = Redis.from_url(
                url,
                socket_timeout=socket_timeout,
                socket_connect_timeout=socket_timeout,
                decode_responses=True,
            )
        else:
            self._client = None

    @property
    def enabled(self) -> bool:
        return self._client is not None

    async def _execute(self, operation: str, key: str, call: Callable[[], Awaitable[T]]) -> T:
        try:
            return await call()
        except (RedisError, OSError, TimeoutError) as e:
            raise CacheUnavailableError(
                f"Cache {operation} failed",
                {"key": key, "error": str(e)},
            ) from e

    async def get_json(self, key: str) -> Any | None:
        """
        Fetch and decode a JSON value.

        Returns:
            Decoded value, or None on miss, when disabled, or on any backend error
        """
        if self._client is None:
            return None
        try:
            raw = await self._execute("get", key, lambda: self._client.get(key))
        except CacheUnavailableError as e:
            logger.warning("Cache get unavailable, treating as miss: %s", e)
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning("Discarding undecodable cache entry %s: %s", key, e)
            return None

    async def set_json(self, key: str, value: Any, ttl_seconds: int) -> bool:
        """
        Encode and store a JSON value with an expiry.

        Returns:
            True if stored, False when disabled or on any backend error
        """
        if self._client is None:
            return False
        try:
            payload = json.dumps(value, default=str)
        except (TypeError, ValueError) as e:
            logger.warning("Skipping unserializable cache value for %s: %s", key, e)
            return False
        try:
            await self._execute("set", key, lambda: self._client.set(key, payload, ex=ttl_seconds))
        except CacheUnavailableError as e:
            logger.warning("Cache set unavailable, skipping: %s", e)
            return False
        return True

    async def delete(self, key: str) -> bool:
        """Remove a key. Returns False when disabled or on any backend error."""
        if self._client is None:
            return False
        try:
            await self._execute("delete", key, lambda: self._client.delete(key))
        except CacheUnavailableError as e:
            logger.warning("Cache delete unavailable, skipping: %s", e)
            return False
        return True

    async def ping(self) -> bool:
        if self._client is None:
            return False
        try:
            return bool(await self._execute("ping", "-", lambda: self._client.ping()))
        except CacheUnavailableError as e:
            logger.warning("Cache ping failed: %s", e)
            return False

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
