"""Async HTTP client built on curl_cffi."""

from typing import Any, Optional

from curl_cffi import CurlError
from curl_cffi.requests import AsyncSession
from loguru import logger

from domain.exceptions import UpstreamFetchError

DEFAULT_USER_AGENT = "ProbLinkBot/1.0"
DEFAULT_TIMEOUT = 15.0


class AsyncHTTPClient:
    """Thin JSON-over-HTTP client. A fresh session is opened per request."""

    def __init__(self, user_agent: str = DEFAULT_USER_AGENT, timeout: float = DEFAULT_TIMEOUT):
        self.user_agent = user_agent
        self.timeout = timeout

    async def get_json(self, url: str, params: Optional[dict[str, str]] = None) -> Any:
        """GET a URL and decode its JSON body."""
        logger.debug(f"GET {url} params={params}")
        try:
            async with AsyncSession() as session:
                response = await session.get(
                    url,
                    params=params,
                    headers={"User-Agent": self.user_agent},
                    timeout=self.timeout,
                )
        except CurlError as e:
            raise UpstreamFetchError(f"Request to {url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise UpstreamFetchError(f"GET {url} returned HTTP {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamFetchError(f"Malformed JSON from {url}: {e}") from e

    async def post_json(self, url: str, payload: dict[str, Any]) -> tuple[int, Any]:
        """
        POST a JSON payload.

        Returns:
            (status code, decoded body). The body is None when it is not JSON.
        """
        logger.debug(f"POST {url}")
        try:
            async with AsyncSession() as session:
                response = await session.post(
                    url,
                    json=payload,
                    headers={"User-Agent": self.user_agent},
                    timeout=self.timeout,
                )
        except CurlError as e:
            raise UpstreamFetchError(f"Request to {url} failed: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = None
        return response.status_code, body
