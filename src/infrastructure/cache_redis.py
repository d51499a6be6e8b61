"""Redis-backed key-value store for contest maps."""

from collections.abc import Iterable
from typing import Optional

import redis.asyncio as redis
from loguru import logger
from redis.exceptions import RedisError

from domain.exceptions import CacheError

DEFAULT_REDIS_URL = "redis://localhost:6379/0"


class AsyncRedisCache:
    """String key-value store on Redis. Entries never expire."""

    def __init__(self, url: str = DEFAULT_REDIS_URL):
        self.url = url
        self._client: Optional[redis.Redis] = None

    async def connect(self) -> None:
        """Open the connection and ping the server."""
        self._client = redis.from_url(self.url, decode_responses=True)
        try:
            await self._client.ping()
        except RedisError as e:
            raise CacheError(f"Cannot connect to Redis at {self.url}: {e}") from e
        logger.debug(f"Connected to Redis at {self.url}")

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.debug("Redis connection closed")

    @property
    def client(self) -> redis.Redis:
        if self._client is None:
            raise CacheError("Redis client is not connected")
        return self._client

    async def get(self, key: str) -> Optional[str]:
        try:
            return await self.client.get(key)
        except RedisError as e:
            raise CacheError(f"Failed to read {key}: {e}") from e

    async def put(self, key: str, value: str) -> None:
        try:
            await self.client.set(key, value)
        except RedisError as e:
            raise CacheError(f"Failed to write {key}: {e}") from e

    async def keys(self, prefix: str) -> set[str]:
        """Return every key starting with prefix (SCAN, not KEYS)."""
        try:
            return {key async for key in self.client.scan_iter(match=f"{prefix}*")}
        except RedisError as e:
            raise CacheError(f"Failed to list keys with prefix {prefix!r}: {e}") from e

    async def put_many(self, entries: Iterable[tuple[str, str]]) -> int:
        """Write all entries in one pipeline. Returns number of keys written."""
        count = 0
        try:
            async with self.client.pipeline(transaction=False) as pipe:
                for key, value in entries:
                    pipe.set(key, value)
                    count += 1
                await pipe.execute()
        except RedisError as e:
            raise CacheError(f"Bulk write failed: {e}") from e

        logger.info(f"Bulk wrote {count} keys to Redis")
        return count
