"""Inbound update variants and the classifier that builds them.

A raw Telegram :class:`~sdk.models.Update` is turned into exactly one of
:class:`CommandMessage`, :class:`InlineQueryRequest`, :class:`GameCallback`
or :class:`Unhandled` at the parse boundary.  Everything downstream works on
these variants instead of probing optional fields.
"""

from __future__ import annotations

import dataclasses
from typing import Union

from sdk.models import Update


@dataclasses.dataclass(frozen=True, slots=True)
class CommandMessage:
    """A text message; only ``/start`` and ``/game`` are acted upon."""
    chat_id: int
    text: str


@dataclasses.dataclass(frozen=True, slots=True)
class InlineQueryRequest:
    """An inline query addressed to the bot from any chat."""
    query_id: str


@dataclasses.dataclass(frozen=True, slots=True)
class GameCallback:
    """A game-button click for this bot's game."""
    query_id: str
    from_user_id: int
    inline_message_id: str
    game_short_name: str


@dataclasses.dataclass(frozen=True, slots=True)
class Unhandled:
    """Anything else.  Not an error; *reason* is for debug logs."""
    reason: str


InboundUpdate = Union[CommandMessage, InlineQueryRequest, GameCallback, Unhandled]


def classify_update(update: Update, game_short_name: str) -> InboundUpdate:
    """Classify *update* into one variant.  First match wins:

    1. a message with non-empty text,
    2. an inline query,
    3. a callback query for *game_short_name*,
    4. otherwise :class:`Unhandled`.
    """
    message = update.message
    if message is not None and message.text:
        return CommandMessage(chat_id=message.chat.id, text=message.text)

    if update.inline_query is not None:
        return InlineQueryRequest(query_id=update.inline_query.id)

    callback = update.callback_query
    if callback is not None:
        if callback.game_short_name == game_short_name:
            return GameCallback(
                query_id=callback.id,
                from_user_id=callback.from_field.id,
                inline_message_id=callback.inline_message_id or "",
                game_short_name=callback.game_short_name,
            )
        return Unhandled(reason="callback query for another game")

    return Unhandled(reason="no message text, inline query or callback query")
