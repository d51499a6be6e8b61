"""Unit tests for Telegram message rendering."""

from api.rendering import escape_markdown, usage_log_text
from api.schemas.telegram import TelegramUser
from domain.parsers import QueryParser


def test_escape_markdown():
    assert escape_markdown("a_b*c[d`e\\f") == "a\\_b\\*c\\[d\\`e\\\\f"


def test_usage_log_without_username():
    text = usage_log_text(TelegramUser(id=9), QueryParser.parse_problem("150d"))

    assert text.splitlines() == [
        "👤 (no username) (`9`)",
        "📘 *CF*",
        "[150D](https://codeforces.com/contest/150/problem/D)",
    ]
