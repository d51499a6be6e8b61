"""Client for the Telegram Bot API."""

from typing import Any

from loguru import logger

from domain.exceptions import TelegramAPIError
from .interfaces import HTTPClientProtocol

API_BASE = "https://api.telegram.org"


class TelegramClient:
    """Calls Bot API methods with a JSON payload."""

    def __init__(self, http_client: HTTPClientProtocol, bot_token: str):
        self.http_client = http_client
        self.bot_token = bot_token

    async def call(self, method: str, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Call a Bot API method.

        Raises:
            TelegramAPIError: On non-2xx status or an "ok": false answer
        """
        url = f"{API_BASE}/bot{self.bot_token}/{method}"
        status, body = await self.http_client.post_json(url, payload)

        ok = isinstance(body, dict) and body.get("ok") is True
        if not 200 <= status < 300 or not ok:
            description = body.get("description") if isinstance(body, dict) else None
            raise TelegramAPIError(method, description or f"HTTP {status}")

        logger.debug(f"Telegram {method} succeeded")
        return body

    async def answer_inline_query(
        self,
        inline_query_id: str,
        results: list[dict[str, Any]],
        cache_time: int,
    ) -> dict[str, Any]:
        return await self.call(
            "answerInlineQuery",
            {
                "inline_query_id": inline_query_id,
                "results": results,
                "cache_time": cache_time,
                "is_personal": True,
            },
        )

    async def send_message(self, chat_id: str, text: str) -> dict[str, Any]:
        return await self.call(
            "sendMessage",
            {
                "chat_id": chat_id,
                "text": text,
                "parse_mode": "Markdown",
                "disable_web_page_preview": True,
            },
        )

    async def set_webhook(
        self, webhook_url: str, secret_token: str, drop_pending_updates: bool = False
    ) -> dict[str, Any]:
        return await self.call(
            "setWebhook",
            {
                "url": webhook_url,
                "secret_token": secret_token,
                "allowed_updates": ["inline_query", "chosen_inline_result"],
                "drop_pending_updates": drop_pending_updates,
            },
        )
