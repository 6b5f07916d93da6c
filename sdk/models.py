"""Pydantic data models for the slice of the Telegram Bot API this bot touches.

Every class mirrors the Telegram object of the same name.  Inbound updates
are validated with :meth:`Update.model_validate_json` at the webhook
boundary; outbound inline results are dumped with ``exclude_none=True``
before they go on the wire.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class Update(BaseModel):
    """This [object](https://core.telegram.org/bots/api/#available-types) represents an incoming update. At most **one** of the optional parameters can be present in any given update."""

    update_id: int
    message: Optional["Message"] = None
    inline_query: Optional["InlineQuery"] = None
    callback_query: Optional["CallbackQuery"] = None

    model_config = {"populate_by_name": True}


class User(BaseModel):
    """This object represents a Telegram user or bot."""

    id: int
    is_bot: bool
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None

    model_config = {"populate_by_name": True}


class Chat(BaseModel):
    """This object represents a chat."""

    id: int
    type: str
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    model_config = {"populate_by_name": True}


class Message(BaseModel):
    """This object represents a message."""

    message_id: int
    date: int
    chat: "Chat"
    from_field: Optional["User"] = Field(None, alias="from")
    text: Optional[str] = None

    model_config = {"populate_by_name": True}


class InlineQuery(BaseModel):
    """This object represents an incoming inline query. When the user sends an empty query, your bot could return some default or trending results."""

    id: str
    from_field: "User" = Field(..., alias="from")
    query: str
    offset: str
    chat_type: Optional[str] = None

    model_config = {"populate_by_name": True}


class CallbackQuery(BaseModel):
    """This object represents an incoming callback query from a callback button in an inline keyboard. For game buttons, *game_short_name* identifies the game to launch."""

    id: str
    from_field: "User" = Field(..., alias="from")
    chat_instance: str
    message: Optional["Message"] = None
    inline_message_id: Optional[str] = None
    data: Optional[str] = None
    game_short_name: Optional[str] = None

    model_config = {"populate_by_name": True}


class InlineQueryResultGame(BaseModel):
    """Represents a [Game](https://core.telegram.org/bots/api/#games)."""

    type: str = "game"
    id: str
    game_short_name: str

    model_config = {"populate_by_name": True}
