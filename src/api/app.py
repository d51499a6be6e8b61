"""Litestar application factory."""

from collections.abc import Callable, Sequence
from typing import Any

from litestar import Litestar, Request, Response
from litestar.datastructures import State
from litestar.exceptions import HTTPException, NotFoundException
from litestar.status_codes import HTTP_404_NOT_FOUND, HTTP_500_INTERNAL_SERVER_ERROR
from loguru import logger

from api.routes import WebhookController, health
from application.inline_service import InlineQueryService
from config import Settings
from infrastructure.telegram_client import TelegramClient


def not_found_handler(_: Request, __: NotFoundException) -> Response:
    return Response({"ok": False, "error": "not_found"}, status_code=HTTP_404_NOT_FOUND)


def http_error_handler(_: Request, exc: HTTPException) -> Response:
    return Response({"ok": False, "error": exc.detail}, status_code=exc.status_code)


def internal_error_handler(_: Request, exc: Exception) -> Response:
    logger.error(f"Unhandled error: {exc}")
    message = str(exc) or "unknown error"
    return Response({"ok": False, "error": message}, status_code=HTTP_500_INTERNAL_SERVER_ERROR)


def create_app(
    settings: Settings,
    *,
    inline_service: InlineQueryService,
    telegram: TelegramClient,
    on_startup: Sequence[Callable[[], Any]] = (),
    on_shutdown: Sequence[Callable[[], Any]] = (),
) -> Litestar:
    """Build the app with its collaborators placed on application state."""
    return Litestar(
        route_handlers=[health, WebhookController],
        state=State(
            {"settings": settings, "inline_service": inline_service, "telegram": telegram}
        ),
        exception_handlers={
            NotFoundException: not_found_handler,
            HTTPException: http_error_handler,
            Exception: internal_error_handler,
        },
        on_startup=list(on_startup),
        on_shutdown=list(on_shutdown),
    )
