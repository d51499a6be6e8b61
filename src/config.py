"""Process settings loaded from the environment (and a .env file)."""

import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv
from loguru import logger

from domain.exceptions import ConfigurationError


@dataclass(frozen=True)
class Settings:
    bot_token: str = ""
    webhook_secret: str = ""
    admin_chat_id: str = ""
    redis_url: str = "redis://localhost:6379/0"
    http_timeout: float = 15.0
    user_agent: str = "ProbLinkBot/1.0"
    log_level: str = "INFO"
    inline_cache_seconds: int = 300
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        """Load .env (if any) and read settings from environment variables."""
        load_dotenv()
        defaults = cls()
        return cls(
            bot_token=os.getenv("BOT_TOKEN", ""),
            webhook_secret=os.getenv("WEBHOOK_SECRET", ""),
            admin_chat_id=os.getenv("ADMIN_CHAT_ID", ""),
            redis_url=os.getenv("REDIS_URL", defaults.redis_url),
            http_timeout=float(os.getenv("HTTP_TIMEOUT", defaults.http_timeout)),
            user_agent=os.getenv("USER_AGENT", defaults.user_agent),
            log_level=os.getenv("LOG_LEVEL", defaults.log_level),
            inline_cache_seconds=int(
                os.getenv("INLINE_CACHE_SECONDS", defaults.inline_cache_seconds)
            ),
            host=os.getenv("HOST", defaults.host),
            port=int(os.getenv("PORT", defaults.port)),
        )

    def require(self, *names: str) -> None:
        """Raise ConfigurationError for the first empty setting among names."""
        for name in names:
            if not getattr(self, name):
                raise ConfigurationError(f"missing required env: {name.upper()}")


def setup_logging(level: str = "INFO") -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)
