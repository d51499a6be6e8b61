"""Protocol interfaces for infrastructure collaborators."""

from typing import Any, Optional, Protocol


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def get_json(self, url: str, params: Optional[dict[str, str]] = None) -> Any:
        """Get decoded JSON from URL."""
        ...

    async def post_json(self, url: str, payload: dict[str, Any]) -> tuple[int, Any]:
        """Post JSON and return (status, decoded body)."""
        ...


class KeyValueStoreProtocol(Protocol):
    """Protocol for the persistent string key-value store."""

    async def get(self, key: str) -> Optional[str]:
        """Get value for key, None when absent."""
        ...

    async def put(self, key: str, value: str) -> None:
        """Store value under key, no expiry."""
        ...


class CodeforcesAPIClientProtocol(Protocol):
    """Protocol for Codeforces API client."""

    async def fetch_contest_problems(self, contest_id: str) -> list[dict[str, Any]]:
        """Get the problem rows of one contest."""
        ...


class AtcoderAPIClientProtocol(Protocol):
    """Protocol for the AtCoder problems dataset client."""

    async def fetch_problems(self) -> list[dict[str, Any]]:
        """Get every AtCoder problem row."""
        ...
