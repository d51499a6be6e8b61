"""Telegram-specific rendering of suggestions and usage logs."""

from typing import Any

from api.schemas.telegram import TelegramUser
from domain.models import NormalizedQuery, Platform, Suggestion

THUMBNAIL_URLS = {
    Platform.CF: "https://www.google.com/s2/favicons?sz=128&domain=codeforces.com",
    Platform.ATC: "https://www.google.com/s2/favicons?sz=128&domain=atcoder.jp",
}


def escape_markdown(value: str) -> str:
    """Escape characters that legacy Telegram Markdown treats as markup."""
    for char in ("\\", "*", "_", "[", "`"):
        value = value.replace(char, f"\\{char}")
    return value


def inline_article(suggestion: Suggestion) -> dict[str, Any]:
    """Render a suggestion as an InlineQueryResultArticle."""
    return {
        "type": "article",
        "id": suggestion.id,
        "title": suggestion.display_title,
        "description": suggestion.url,
        "thumbnail_url": THUMBNAIL_URLS[suggestion.platform],
        "input_message_content": {
            "message_text": suggestion.markdown_link,
            "parse_mode": "Markdown",
            "disable_web_page_preview": True,
        },
    }


def usage_log_text(user: TelegramUser, descriptor: NormalizedQuery) -> str:
    """Admin chat message describing who shared which problem."""
    user_tag = f"@{escape_markdown(user.username)}" if user.username else "(no username)"
    return (
        f"👤 {user_tag} (`{user.id}`)\n"
        f"📘 *{descriptor.platform.value}*\n"
        f"[{descriptor.normalized}]({descriptor.url})"
    )
