"""Entry point: serve the webhook app with uvicorn."""

import uvicorn
from litestar import Litestar
from loguru import logger

from api.app import create_app
from application.inline_service import InlineQueryService
from config import Settings, setup_logging
from domain.exceptions import CacheError
from infrastructure import AsyncHTTPClient, AsyncRedisCache, TelegramClient
from services import create_result_builder


def build_app(settings: Settings) -> Litestar:
    http_client = AsyncHTTPClient(user_agent=settings.user_agent, timeout=settings.http_timeout)
    store = AsyncRedisCache(settings.redis_url)

    async def connect_store() -> None:
        try:
            await store.connect()
        except CacheError as e:
            # Titles still resolve from upstream, just uncached
            logger.warning(f"Failed to connect to Redis, caching disabled: {e}")

    return create_app(
        settings,
        inline_service=InlineQueryService(create_result_builder(store, http_client)),
        telegram=TelegramClient(http_client, settings.bot_token),
        on_startup=[connect_store],
        on_shutdown=[store.close],
    )


def main() -> None:
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    uvicorn.run(build_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
