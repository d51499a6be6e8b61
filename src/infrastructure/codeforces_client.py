"""Client for the Codeforces public API."""

from typing import Any

from loguru import logger

from domain.exceptions import UpstreamFetchError
from .interfaces import HTTPClientProtocol

API_BASE = "https://codeforces.com/api"


class CodeforcesApiClient:
    """Reads contest problem lists from the Codeforces API."""

    def __init__(self, http_client: HTTPClientProtocol):
        self.http_client = http_client

    async def _call(self, method: str, params: dict[str, str] | None = None) -> Any:
        body = await self.http_client.get_json(f"{API_BASE}/{method}", params=params)
        if not isinstance(body, dict) or body.get("status") != "OK":
            comment = body.get("comment") if isinstance(body, dict) else None
            raise UpstreamFetchError(f"Codeforces {method} not OK: {comment or 'unexpected body'}")
        return body.get("result")

    async def fetch_contest_problems(self, contest_id: str) -> list[dict[str, Any]]:
        """
        Fetch the problems of one contest via contest.standings.

        Only the first standings row is requested; the problem list comes with it.
        """
        logger.debug(f"Fetching Codeforces problems for contest {contest_id}")
        result = await self._call(
            "contest.standings",
            {"contestId": contest_id, "from": "1", "count": "1"},
        )
        problems = result.get("problems") if isinstance(result, dict) else None
        if not isinstance(problems, list):
            raise UpstreamFetchError(f"Codeforces standings for {contest_id} has no problem list")
        return problems
