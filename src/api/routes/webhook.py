"""API routes for the Telegram webhook."""

from typing import Annotated, Optional

from litestar import Controller, Request, Response, post
from litestar.background_tasks import BackgroundTask, BackgroundTasks
from litestar.datastructures import State
from litestar.params import Parameter
from litestar.status_codes import HTTP_200_OK, HTTP_401_UNAUTHORIZED
from loguru import logger

from api.rendering import inline_article, usage_log_text
from api.schemas.telegram import ChosenInlineResult, InlineQuery, TelegramUpdate
from domain.exceptions import ProbLinkError

SECRET_HEADER = "X-Telegram-Bot-Api-Secret-Token"


async def answer_inline_query(state: State, inline_query: InlineQuery) -> None:
    """Resolve suggestions and send them back. Runs after the webhook has answered."""
    try:
        suggestions = await state.inline_service.answer(inline_query.query)
        await state.telegram.answer_inline_query(
            inline_query.id,
            [inline_article(suggestion) for suggestion in suggestions],
            cache_time=state.settings.inline_cache_seconds,
        )
    except ProbLinkError as e:
        logger.error(f"Failed to answer inline query {inline_query.id}: {e}")


async def log_chosen_result(state: State, chosen: ChosenInlineResult) -> None:
    """Report a picked suggestion to the admin chat."""
    descriptor = state.inline_service.resolve_chosen(chosen.result_id, chosen.query)
    if descriptor is None:
        logger.debug(f"Chosen result {chosen.result_id!r} does not resolve; not logged")
        return

    try:
        await state.telegram.send_message(
            state.settings.admin_chat_id, usage_log_text(chosen.from_user, descriptor)
        )
    except ProbLinkError as e:
        logger.error(f"Failed to log chosen result {chosen.result_id}: {e}")


class WebhookController(Controller):
    """Controller for Telegram webhook endpoints."""

    @post("/webhook", status_code=HTTP_200_OK)
    async def receive_update(
        self,
        state: State,
        data: TelegramUpdate,
        secret: Annotated[Optional[str], Parameter(header=SECRET_HEADER)] = None,
    ) -> Response[dict[str, object]]:
        """
        Accept a Telegram update.

        Work is scheduled as background tasks; the response never waits for it.
        """
        state.settings.require("bot_token", "webhook_secret", "admin_chat_id")
        if not secret or secret != state.settings.webhook_secret:
            logger.warning("Rejected webhook call with bad secret token")
            return Response({"ok": False, "error": "unauthorized"}, status_code=HTTP_401_UNAUTHORIZED)

        tasks = []
        if data.inline_query is not None:
            tasks.append(BackgroundTask(answer_inline_query, state, data.inline_query))
        if data.chosen_inline_result is not None:
            tasks.append(BackgroundTask(log_chosen_result, state, data.chosen_inline_result))

        return Response({"ok": True}, background=BackgroundTasks(tasks) if tasks else None)

    @post("/set-webhook", status_code=HTTP_200_OK)
    async def set_webhook(
        self,
        request: Request,
        state: State,
        drop_pending_updates: str = "false",
    ) -> dict[str, object]:
        """Register {origin}/webhook with Telegram."""
        state.settings.require("bot_token", "webhook_secret")
        origin = str(request.base_url).rstrip("/")
        webhook_url = f"{origin}/webhook"

        logger.info(f"Registering webhook at {webhook_url}")
        return await state.telegram.set_webhook(
            webhook_url,
            state.settings.webhook_secret,
            drop_pending_updates=drop_pending_updates == "true",
        )
