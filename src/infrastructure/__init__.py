"""Infrastructure: HTTP, upstream judge clients, Redis store, Telegram."""

from .atcoder_client import AtcoderProblemsClient
from .cache_redis import AsyncRedisCache
from .codeforces_client import CodeforcesApiClient
from .http_client import AsyncHTTPClient
from .telegram_client import TelegramClient

__all__ = [
    "AsyncHTTPClient",
    "AsyncRedisCache",
    "AtcoderProblemsClient",
    "CodeforcesApiClient",
    "TelegramClient",
]
