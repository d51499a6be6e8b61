"""Tests for the webhook HTTP surface."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from litestar.testing import TestClient

from api.app import create_app
from config import Settings
from domain.exceptions import TelegramAPIError
from domain.models import Platform, Suggestion
from domain.parsers import QueryParser

SECRET = "s3cret"
HEADERS = {"X-Telegram-Bot-Api-Secret-Token": SECRET}
SETTINGS = Settings(bot_token="123:abc", webhook_secret=SECRET, admin_chat_id="42")

SUGGESTION = Suggestion(
    id="CF:150D",
    display_title="150D - Divide by 2 or 3",
    url="https://codeforces.com/contest/150/problem/D",
    platform=Platform.CF,
)


@pytest.fixture
def inline_service():
    service = MagicMock()
    service.answer = AsyncMock(return_value=[SUGGESTION])
    service.resolve_chosen.side_effect = QueryParser.resolve_chosen
    return service


@pytest.fixture
def telegram():
    return AsyncMock()


def make_client(inline_service, telegram, settings=SETTINGS):
    app = create_app(settings, inline_service=inline_service, telegram=telegram)
    return TestClient(app=app)


def test_health(inline_service, telegram):
    with make_client(inline_service, telegram) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.text == "ok"


def test_unknown_route(inline_service, telegram):
    with make_client(inline_service, telegram) as client:
        response = client.get("/nope")

    assert response.status_code == 404
    assert response.json() == {"ok": False, "error": "not_found"}


@pytest.mark.parametrize("headers", [{}, {"X-Telegram-Bot-Api-Secret-Token": "wrong"}])
def test_webhook_rejects_bad_secret(inline_service, telegram, headers):
    with make_client(inline_service, telegram) as client:
        response = client.post("/webhook", json={"update_id": 1}, headers=headers)

    assert response.status_code == 401
    assert response.json() == {"ok": False, "error": "unauthorized"}
    telegram.answer_inline_query.assert_not_awaited()


def test_webhook_requires_configuration(inline_service, telegram):
    settings = Settings(bot_token="123:abc", webhook_secret=SECRET)

    with make_client(inline_service, telegram, settings) as client:
        response = client.post("/webhook", json={"update_id": 1}, headers=HEADERS)

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "missing required env: ADMIN_CHAT_ID"}


def test_webhook_answers_inline_query(inline_service, telegram):
    update = {
        "update_id": 7,
        "inline_query": {"id": "q1", "from": {"id": 5, "username": "alice"}, "query": "150D", "offset": ""},
    }

    with make_client(inline_service, telegram) as client:
        response = client.post("/webhook", json=update, headers=HEADERS)

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    inline_service.answer.assert_awaited_once_with("150D")

    telegram.answer_inline_query.assert_awaited_once()
    inline_query_id, results = telegram.answer_inline_query.await_args.args
    assert inline_query_id == "q1"
    assert telegram.answer_inline_query.await_args.kwargs == {"cache_time": 300}
    assert results == [
        {
            "type": "article",
            "id": "CF:150D",
            "title": "150D - Divide by 2 or 3",
            "description": "https://codeforces.com/contest/150/problem/D",
            "thumbnail_url": "https://www.google.com/s2/favicons?sz=128&domain=codeforces.com",
            "input_message_content": {
                "message_text": "[150D - Divide by 2 or 3](https://codeforces.com/contest/150/problem/D)",
                "parse_mode": "Markdown",
                "disable_web_page_preview": True,
            },
        }
    ]


def test_webhook_survives_telegram_failure(inline_service, telegram):
    telegram.answer_inline_query.side_effect = TelegramAPIError("answerInlineQuery", "query is too old")
    update = {"inline_query": {"id": "q1", "from": {"id": 5}, "query": "150D"}}

    with make_client(inline_service, telegram) as client:
        response = client.post("/webhook", json=update, headers=HEADERS)

    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_webhook_logs_chosen_result(inline_service, telegram):
    update = {
        "chosen_inline_result": {
            "result_id": "ATC:abc150_d",
            "from": {"id": 5, "username": "bob_smith"},
            "query": "abc150",
        }
    }

    with make_client(inline_service, telegram) as client:
        response = client.post("/webhook", json=update, headers=HEADERS)

    assert response.status_code == 200
    chat_id, text = telegram.send_message.await_args.args
    assert chat_id == "42"
    assert "@bob\\_smith (`5`)" in text
    assert "*ATC*" in text
    assert text.endswith("[abc150_d](https://atcoder.jp/contests/abc150/tasks/abc150_d)")


def test_webhook_ignores_unresolvable_chosen_result(inline_service, telegram):
    update = {"chosen_inline_result": {"result_id": "junk", "from": {"id": 5}, "query": "hello"}}

    with make_client(inline_service, telegram) as client:
        response = client.post("/webhook", json=update, headers=HEADERS)

    assert response.status_code == 200
    telegram.send_message.assert_not_awaited()


def test_set_webhook(inline_service, telegram):
    telegram.set_webhook.return_value = {"ok": True, "result": True}

    with make_client(inline_service, telegram) as client:
        response = client.post("/set-webhook?drop_pending_updates=true")

    assert response.status_code == 200
    assert response.json() == {"ok": True, "result": True}
    webhook_url, secret = telegram.set_webhook.await_args.args
    assert webhook_url.endswith("/webhook")
    assert secret == SECRET
    assert telegram.set_webhook.await_args.kwargs == {"drop_pending_updates": True}


def test_secret_header_parameter_is_not_deprecated():
    import importlib
    import warnings

    from litestar import Litestar

    import api.routes.webhook as webhook_module

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        importlib.reload(webhook_module)
        Litestar(route_handlers=[webhook_module.WebhookController])

    deprecations = [
        str(w.message)
        for w in caught
        if issubclass(w.category, DeprecationWarning) and "header" in str(w.message).lower()
    ]
    assert deprecations == []
