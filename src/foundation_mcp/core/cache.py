"""Cache backends for the catalog snapshot.

`MemoryCache` is a bounded LRU with per-entry expiry; `RedisCache` stores
JSON payloads so several server processes can share one index.
"""

from __future__ import annotations

import json
import threading
import time
from collections import OrderedDict
from collections.abc import Callable
from typing import Any

from loguru import logger
from pydantic import BaseModel

from ..config.settings import ServerConfig
from .interfaces import CacheBackend


class CacheKeys:
    """Namespaced cache key helpers."""

    PREFIX = "foundation"

    @classmethod
    def index(cls) -> str:
        """Composite key holding the whole catalog snapshot."""
        return f"{cls.PREFIX}:index"


class MemoryCache:
    """In-process LRU cache with TTL.

    Reads refresh both recency and age, so an entry that keeps being used
    does not expire under an active server. Each operation holds the lock
    for its whole duration.
    """

    def __init__(
        self,
        max_size: int = 1000,
        ttl: int = 3600,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_size = max_size
        self.default_ttl = ttl
        self._clock = clock
        self._entries: OrderedDict[str, tuple[Any, float, int]] = OrderedDict()
        self._lock = threading.Lock()

    async def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._live_entry(key)
            if entry is None:
                return None
            value, _, ttl = entry
            self._entries[key] = (value, self._clock() + ttl, ttl)
            self._entries.move_to_end(key)
            return value

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        ttl = ttl or self.default_ttl
        with self._lock:
            self._entries[key] = (value, self._clock() + ttl, ttl)
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Cache full, evicted {evicted}")

    async def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    async def has(self, key: str) -> bool:
        with self._lock:
            return self._live_entry(key) is not None

    async def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def _live_entry(self, key: str) -> tuple[Any, float, int] | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry[1] <= self._clock():
            del self._entries[key]
            return None
        return entry


class RedisCache:
    """Redis-backed cache; values are stored as JSON documents."""

    def __init__(self, redis_url: str, default_ttl: int = 3600, client: Any = None) -> None:
        if client is None:
            import redis.asyncio as redis

            client = redis.from_url(redis_url, decode_responses=True)
        self._client = client
        self.default_ttl = default_ttl

    async def get(self, key: str) -> Any | None:
        raw = await self._client.get(key)
        return json.loads(raw) if raw else None

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        if isinstance(value, BaseModel):
            payload = value.model_dump_json()
        else:
            payload = json.dumps(value)
        await self._client.setex(key, ttl or self.default_ttl, payload)

    async def delete(self, key: str) -> None:
        await self._client.delete(key)

    async def has(self, key: str) -> bool:
        return await self._client.exists(key) == 1

    async def clear(self) -> None:
        await self._client.flushdb()

    async def close(self) -> None:
        await self._client.aclose()


def create_cache(config: ServerConfig) -> CacheBackend:
    """Create the cache backend selected by configuration."""
    if config.cache.backend == "redis":
        logger.info("Using Redis cache backend")
        return RedisCache(config.cache.redis_url, config.cache.ttl)

    logger.debug(f"Using in-memory cache (max_size={config.cache.max_size}, ttl={config.cache.ttl}s)")
    return MemoryCache(config.cache.max_size, config.cache.ttl)
