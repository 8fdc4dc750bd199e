"""Tests for shared/cache.py."""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from shared.cache import (
    IKeyValueCache,
    InMemoryCache,
    RedisCache,
    get_cache,
    reset_cache,
)


class TestInMemoryCache:
    @pytest.mark.asyncio
    async def test_get_missing_key(self):
        cache = InMemoryCache()
        assert await cache.get("missing") is None

    @pytest.mark.asyncio
    async def test_set_then_get(self):
        cache = InMemoryCache()
        await cache.set("k", "v")
        assert await cache.get("k") == "v"
        assert "k" in cache

    @pytest.mark.asyncio
    async def test_set_overwrites(self):
        cache = InMemoryCache()
        await cache.set("k", "v1")
        await cache.set("k", "v2", ttl_seconds=10)
        assert await cache.get("k") == "v2"
        assert len(cache) == 1

    @pytest.mark.asyncio
    async def test_delete(self):
        cache = InMemoryCache()
        await cache.set("k", "v")
        await cache.delete("k")
        assert await cache.get("k") is None

    @pytest.mark.asyncio
    async def test_delete_missing_key_is_noop(self):
        cache = InMemoryCache()
        await cache.delete("missing")
        assert len(cache) == 0

    def test_implements_protocol(self):
        assert isinstance(InMemoryCache(), IKeyValueCache)


class TestRedisCache:
    @pytest.fixture
    def redis_client(self):
        client = MagicMock()
        client.get = AsyncMock(return_value="value")
        client.set = AsyncMock()
        client.delete = AsyncMock()
        client.aclose = AsyncMock()
        return client

    @pytest.fixture
    def cache(self, redis_client):
        with patch("shared.cache.aioredis.from_url", return_value=redis_client) as from_url:
            cache = RedisCache("redis://localhost:6379/0")
        from_url.assert_called_once()
        assert from_url.call_args.kwargs["decode_responses"] is True
        return cache

    @pytest.mark.asyncio
    async def test_get(self, cache, redis_client):
        assert await cache.get("k") == "value"
        redis_client.get.assert_awaited_once_with("k")

    @pytest.mark.asyncio
    async def test_set_without_ttl(self, cache, redis_client):
        await cache.set("k", "v")
        redis_client.set.assert_awaited_once_with("k", "v", ex=None)

    @pytest.mark.asyncio
    async def test_set_with_ttl(self, cache, redis_client):
        await cache.set("k", "v", ttl_seconds=604800)
        redis_client.set.assert_awaited_once_with("k", "v", ex=604800)

    @pytest.mark.asyncio
    async def test_delete(self, cache, redis_client):
        await cache.delete("k")
        redis_client.delete.assert_awaited_once_with("k")

    @pytest.mark.asyncio
    async def test_close(self, cache, redis_client):
        await cache.close()
        redis_client.aclose.assert_awaited_once()

    def test_implements_protocol(self, cache):
        assert isinstance(cache, IKeyValueCache)


class TestGetCache:
    def setup_method(self):
        reset_cache()

    def teardown_method(self):
        reset_cache()

    @patch("shared.cache.get_settings")
    def test_falls_back_to_memory(self, mock_settings):
        """Without REDIS_URL the in-process cache is used."""
        mock_settings.return_value.redis_url = ""
        assert isinstance(get_cache(), InMemoryCache)

    @patch("shared.cache.aioredis.from_url")
    @patch("shared.cache.get_settings")
    def test_uses_redis_when_configured(self, mock_settings, mock_from_url):
        mock_settings.return_value.redis_url = "redis://localhost:6379/0"
        cache = get_cache()
        assert isinstance(cache, RedisCache)
        assert mock_from_url.call_args.args[0] == "redis://localhost:6379/0"

    @patch("shared.cache.get_settings")
    def test_caches_instance(self, mock_settings):
        mock_settings.return_value.redis_url = ""
        assert get_cache() is get_cache()
        mock_settings.assert_called_once()

    @patch("shared.cache.get_settings")
    def test_reset_cache(self, mock_settings):
        mock_settings.return_value.redis_url = ""
        first = get_cache()
        reset_cache()
        assert get_cache() is not first
