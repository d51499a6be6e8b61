"""Pydantic schemas for Telegram webhook updates."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TelegramUser(BaseModel):
    """Sender of an inline query."""

    id: int
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class InlineQuery(BaseModel):
    """Text typed into the inline box."""

    id: str
    from_user: TelegramUser = Field(alias="from")
    query: str = ""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ChosenInlineResult(BaseModel):
    """Result the user picked from our suggestions."""

    result_id: str
    from_user: TelegramUser = Field(alias="from")
    query: str = ""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class TelegramUpdate(BaseModel):
    """Webhook update. Only the two inline update kinds are read."""

    update_id: Optional[int] = None
    inline_query: Optional[InlineQuery] = None
    chosen_inline_result: Optional[ChosenInlineResult] = None

    model_config = ConfigDict(extra="ignore")
