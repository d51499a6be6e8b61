"""Contest cache: per-contest maps of problem index to title."""

from typing import Optional

from loguru import logger

from domain.contest_map import deserialize_contest_map, serialize_contest_map
from domain.exceptions import CacheError
from domain.models import ContestMap, Platform
from infrastructure.interfaces import KeyValueStoreProtocol


def contest_cache_key(platform: Platform, contest_id: str) -> str:
    """Return "cf:{id}" or "atc:{id}"."""
    return f"{platform.cache_prefix}:{contest_id}"


class ContestCache:
    """Append-only cache of contest maps over a string key-value store."""

    def __init__(self, store: KeyValueStoreProtocol):
        self.store = store

    async def get(self, key: str) -> Optional[str]:
        """Raw stored value; read failures count as absent."""
        try:
            return await self.store.get(key)
        except CacheError as e:
            logger.warning(f"Cache read failed for {key}: {e}")
            return None

    async def put(self, key: str, value: str) -> bool:
        """Store raw value. Returns False (and logs) when the write fails."""
        try:
            await self.store.put(key, value)
        except CacheError as e:
            logger.warning(f"Cache write skipped for key {key!r}: {e}")
            return False
        return True

    async def get_contest_map(self, platform: Platform, contest_id: str) -> Optional[ContestMap]:
        """Cached map for the contest, or None on miss or corrupt entry."""
        key = contest_cache_key(platform, contest_id)
        raw = await self.get(key)
        if raw is None:
            return None

        contest_map = deserialize_contest_map(raw)
        if contest_map is None:
            logger.warning(f"Invalid JSON in cache for {key}; refreshing from source")
            return None

        logger.debug(f"Cache hit for {key}")
        return contest_map

    async def put_contest_map(
        self, platform: Platform, contest_id: str, contest_map: ContestMap
    ) -> bool:
        key = contest_cache_key(platform, contest_id)
        return await self.put(key, serialize_contest_map(contest_map))
