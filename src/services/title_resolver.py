"""Service resolving problem titles through the contest cache."""

from typing import Optional

from loguru import logger

from domain.contest_map import atcoder_contest_map, codeforces_contest_map
from domain.exceptions import UpstreamFetchError
from domain.models import ContestMap, NormalizedQuery, Platform
from infrastructure.interfaces import AtcoderAPIClientProtocol, CodeforcesAPIClientProtocol
from services.contest_cache import ContestCache


class TitleResolver:
    """Turns a contest id into a problem-index to title map with minimal upstream calls."""

    def __init__(
        self,
        *,
        cache: ContestCache,
        codeforces_client: CodeforcesAPIClientProtocol,
        atcoder_client: AtcoderAPIClientProtocol,
    ):
        """Initialize service with dependencies."""
        self.cache = cache
        self.codeforces_client = codeforces_client
        self.atcoder_client = atcoder_client

    async def resolve_contest_map(self, platform: Platform, contest_id: str) -> ContestMap:
        """
        Get the contest map, from cache when possible.

        On a miss the platform is queried, the result filtered and, if
        non-empty, written back once. Upstream failures yield an empty map.
        """
        cached = await self.cache.get_contest_map(platform, contest_id)
        if cached is not None:
            return cached

        try:
            contest_map = await self._fetch_contest_map(platform, contest_id)
        except UpstreamFetchError as e:
            logger.warning(f"Upstream fetch failed for {platform.value} contest {contest_id}: {e}")
            return {}

        if contest_map:
            await self.cache.put_contest_map(platform, contest_id, contest_map)

        logger.info(
            f"Resolved {platform.value} contest {contest_id} from upstream: {len(contest_map)} problem(s)"
        )
        return contest_map

    async def _fetch_contest_map(self, platform: Platform, contest_id: str) -> ContestMap:
        if platform is Platform.CF:
            rows = await self.codeforces_client.fetch_contest_problems(contest_id)
            return codeforces_contest_map(rows)

        rows = await self.atcoder_client.fetch_problems()
        return atcoder_contest_map(rows, contest_id)

    async def resolve_title(self, descriptor: NormalizedQuery) -> Optional[str]:
        """Title for one problem, or None when unknown."""
        contest_map = await self.resolve_contest_map(descriptor.platform, descriptor.contest_id)
        if descriptor.platform is Platform.CF:
            return contest_map.get(descriptor.problem_index.upper())
        return contest_map.get(descriptor.problem_index.lower())
