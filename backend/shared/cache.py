"""
Key-value cache used for sessions and read-through course lookups.

Two implementations share the IKeyValueCache contract:
- RedisCache: production backend (redis.asyncio)
- InMemoryCache: single-process backend for local development and tests

Values are opaque strings; callers own serialization. No TTL is applied
unless the caller passes one, so entries live until deleted or evicted by
the backend's own policy.
"""

import asyncio
import logging
from typing import Optional, Protocol, runtime_checkable

import redis.asyncio as aioredis

from .config import get_settings

logger = logging.getLogger(__name__)


@runtime_checkable
class IKeyValueCache(Protocol):
    """Minimal async key-value port."""

    async def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None on a miss."""
        ...

    async def set(self, key: str, value: str, ttl_seconds: Optional[int] = None) -> None:
        """Store a value, overwriting any previous one."""
        ...

    async def delete(self, key: str) -> None:
        """Remove a key. Deleting a missing key is not an error."""
        ...


class RedisCache:
    """Thin Redis wrapper implementing IKeyValueCache."""

    def __init__(self, redis_url: str, *, socket_timeout: float = 5.0):
        self.redis_url = redis_url
        self.client = aioredis.from_url(
            redis_url,
            decode_responses=True,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
        )

    async def get(self, key: str) -> Optional[str]:
        return await self.client.get(key)

    async def set(self, key: str, value: str, ttl_seconds: Optional[int] = None) -> None:
        await self.client.set(key, value, ex=ttl_seconds)

    async def delete(self, key: str) -> None:
        await self.client.delete(key)

    async def close(self) -> None:
        await self.client.aclose()


class InMemoryCache:
    """
    Process-local IKeyValueCache.

    TTLs are accepted for interface compatibility but entries never expire,
    matching how sessions are stored.
    """

    def __init__(self) -> None:
        self._data: dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Optional[str]:
        async with self._lock:
            return self._data.get(key)

    async def set(self, key: str, value: str, ttl_seconds: Optional[int] = None) -> None:
        async with self._lock:
            self._data[key] = value

    async def delete(self, key: str) -> None:
        async with self._lock:
            self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)


# Module-level cache instance
_cache: Optional[IKeyValueCache] = None


def get_cache() -> IKeyValueCache:
    """
    Get the shared key-value cache.

    Uses Redis when REDIS_URL is configured, otherwise an in-process cache
    (sessions are then lost on restart and not shared between workers).
    """
    global _cache

    if _cache is None:
        settings = get_settings()
        if settings.redis_url:
            logger.info("Using Redis session cache")
            _cache = RedisCache(settings.redis_url)
        else:
            logger.warning(
                "REDIS_URL not set, using in-memory session cache "
                "(sessions are not shared between processes)"
            )
            _cache = InMemoryCache()

    return _cache


def reset_cache() -> None:
    """Reset the cached key-value client (for testing)."""
    global _cache
    _cache = None
