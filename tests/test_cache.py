"""Tests for the cache backends."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, Mock

import pytest

from foundation_mcp.config.settings import CacheConfig, ServerConfig, load_config
from foundation_mcp.core.cache import CacheKeys, MemoryCache, RedisCache, create_cache
from foundation_mcp.core.exceptions import ConfigurationError
from foundation_mcp.core.models import CatalogSnapshot, GridEntry


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestMemoryCache:
    @pytest.mark.asyncio
    async def test_set_get_delete(self) -> None:
        cache = MemoryCache()
        await cache.set("a", {"value": 1})
        assert await cache.has("a")
        assert await cache.get("a") == {"value": 1}

        await cache.delete("a")
        assert await cache.get("a") is None
        assert not await cache.has("a")

    @pytest.mark.asyncio
    async def test_lru_eviction(self) -> None:
        cache = MemoryCache(max_size=2)
        await cache.set("a", 1)
        await cache.set("b", 2)
        # Touch "a" so "b" becomes least recently used
        await cache.get("a")
        await cache.set("c", 3)

        assert await cache.get("a") == 1
        assert await cache.get("b") is None
        assert await cache.get("c") == 3

    @pytest.mark.asyncio
    async def test_ttl_expiry(self) -> None:
        clock = FakeClock()
        cache = MemoryCache(ttl=10, clock=clock)
        await cache.set("a", 1)

        clock.now += 9
        assert await cache.get("a") == 1

        # The read above refreshed the entry's age
        clock.now += 9
        assert await cache.has("a")

        clock.now += 11
        assert await cache.get("a") is None

    @pytest.mark.asyncio
    async def test_per_entry_ttl(self) -> None:
        clock = FakeClock()
        cache = MemoryCache(ttl=100, clock=clock)
        await cache.set("short", 1, ttl=5)
        await cache.set("long", 2)

        clock.now += 6
        assert await cache.get("short") is None
        assert await cache.get("long") == 2

    @pytest.mark.asyncio
    async def test_clear(self) -> None:
        cache = MemoryCache()
        await cache.set("a", 1)
        await cache.set("b", 2)
        await cache.clear()
        assert not await cache.has("a")
        assert not await cache.has("b")


class TestRedisCache:
    @pytest.mark.asyncio
    async def test_models_stored_as_json(self) -> None:
        client = AsyncMock()
        cache = RedisCache("redis://localhost", default_ttl=60, client=client)
        snapshot = CatalogSnapshot(
            grids=(GridEntry(name="XY Grid", slug="xy-grid", scss_path="scss/xy-grid/", description="d"),)
        )

        await cache.set(CacheKeys.index(), snapshot)

        key, ttl, payload = client.setex.await_args.args
        assert key == "foundation:index"
        assert ttl == 60
        assert json.loads(payload)["grids"][0]["slug"] == "xy-grid"

    @pytest.mark.asyncio
    async def test_get_decodes_json(self) -> None:
        client = AsyncMock()
        client.get.return_value = '{"plugins": []}'
        cache = RedisCache("redis://localhost", client=client)

        assert await cache.get("k") == {"plugins": []}

        client.get.return_value = None
        assert await cache.get("k") is None

    @pytest.mark.asyncio
    async def test_has_delete_close(self) -> None:
        client = AsyncMock()
        client.exists.return_value = 1
        cache = RedisCache("redis://localhost", client=client)

        assert await cache.has("k")
        await cache.delete("k")
        client.delete.assert_awaited_once_with("k")
        await cache.close()
        client.aclose.assert_awaited_once()


class TestCreateCache:
    def test_memory_backend(self) -> None:
        config = ServerConfig(cache=CacheConfig(ttl=30, max_size=5))
        cache = create_cache(config)
        assert isinstance(cache, MemoryCache)
        assert cache.max_size == 5
        assert cache.default_ttl == 30

    def test_redis_backend(self, monkeypatch: pytest.MonkeyPatch) -> None:
        client = AsyncMock()
        from_url = Mock(return_value=client)
        monkeypatch.setattr("redis.asyncio.from_url", from_url)

        config = ServerConfig(cache=CacheConfig(backend="redis", ttl=30, redis_url="redis://localhost:6379/0"))
        cache = create_cache(config)

        assert isinstance(cache, RedisCache)
        assert cache.default_ttl == 30
        from_url.assert_called_once_with("redis://localhost:6379/0", decode_responses=True)

    def test_redis_backend_requires_url(self, tmp_path) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(env={"CACHE_BACKEND": "redis"}, repo_path=tmp_path)
        assert "REDIS_URL" in exc_info.value.message
