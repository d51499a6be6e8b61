"""Client for the kenkoooo AtCoder Problems dataset."""

from typing import Any

from loguru import logger

from domain.exceptions import UpstreamFetchError
from .interfaces import HTTPClientProtocol

PROBLEMS_URL = "https://kenkoooo.com/atcoder/resources/problems.json"


class AtcoderProblemsClient:
    """Downloads the full AtCoder problem list."""

    def __init__(self, http_client: HTTPClientProtocol, url: str = PROBLEMS_URL):
        self.http_client = http_client
        self.url = url

    async def fetch_problems(self) -> list[dict[str, Any]]:
        logger.debug(f"Fetching AtCoder problem list from {self.url}")
        body = await self.http_client.get_json(self.url)
        if not isinstance(body, list):
            raise UpstreamFetchError("AtCoder problems.json is not a JSON array")
        return body
