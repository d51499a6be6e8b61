"""Shared fixtures: in-memory store and mocked upstream clients."""

from typing import Optional
from unittest.mock import AsyncMock

import pytest

from domain.exceptions import CacheError
from services.contest_cache import ContestCache
from services.result_builder import ResultBuilder
from services.title_resolver import TitleResolver


class InMemoryStore:
    """Dict-backed stand-in for the Redis store."""

    def __init__(self, data: Optional[dict[str, str]] = None, fail_writes: bool = False):
        self.data = dict(data or {})
        self.fail_writes = fail_writes
        self.puts: list[tuple[str, str]] = []

    async def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    async def put(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise CacheError("quota exceeded")
        self.puts.append((key, value))
        self.data[key] = value


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def codeforces_client():
    client = AsyncMock()
    client.fetch_contest_problems.return_value = []
    return client


@pytest.fixture
def atcoder_client():
    client = AsyncMock()
    client.fetch_problems.return_value = []
    return client


@pytest.fixture
def resolver(store, codeforces_client, atcoder_client):
    return TitleResolver(
        cache=ContestCache(store),
        codeforces_client=codeforces_client,
        atcoder_client=atcoder_client,
    )


@pytest.fixture
def result_builder(resolver):
    return ResultBuilder(resolver)


@pytest.fixture
def make_store():
    return InMemoryStore


@pytest.fixture
def make_resolver(codeforces_client, atcoder_client):
    def _make(store):
        return TitleResolver(
            cache=ContestCache(store),
            codeforces_client=codeforces_client,
            atcoder_client=atcoder_client,
        )

    return _make
