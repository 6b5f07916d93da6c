"""Outbound action variants and the executor that turns them into Bot API calls.

Handlers and the score relay only *describe* what should happen by returning
one of the dataclasses below; :func:`perform` is the single place that talks
to Telegram and the single place where SDK failures become
:class:`~core.errors.UpstreamError`.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Dict, Union

import requests

from core.errors import UpstreamError
from core.logger import Snake4DLogger
from sdk.client import Snake4DClient
from sdk.exceptions import APIException
from sdk.models import InlineQueryResultGame

logger = Snake4DLogger.get_logger()


@dataclasses.dataclass(frozen=True, slots=True)
class SendWelcomeMessage:
    chat_id: int
    text: str


@dataclasses.dataclass(frozen=True, slots=True)
class LaunchGamePrompt:
    chat_id: int
    game_short_name: str


@dataclasses.dataclass(frozen=True, slots=True)
class AnswerInlineWithGame:
    inline_query_id: str
    game_short_name: str


@dataclasses.dataclass(frozen=True, slots=True)
class AnswerCallbackWithURL:
    callback_query_id: str
    url: str


@dataclasses.dataclass(frozen=True, slots=True)
class SetGameScore:
    user_id: str
    score: int
    inline_message_id: str


OutboundAction = Union[
    SendWelcomeMessage,
    LaunchGamePrompt,
    AnswerInlineWithGame,
    AnswerCallbackWithURL,
    SetGameScore,
]


def _call(client: Snake4DClient, action: OutboundAction) -> Dict[str, Any]:
    """Issue the Bot API call that corresponds to *action*."""
    if isinstance(action, SendWelcomeMessage):
        return client.send_message(action.chat_id, action.text)
    if isinstance(action, LaunchGamePrompt):
        return client.send_game(action.chat_id, action.game_short_name)
    if isinstance(action, AnswerInlineWithGame):
        result = InlineQueryResultGame(
            id=action.game_short_name,
            game_short_name=action.game_short_name,
        )
        return client.answer_inline_query(action.inline_query_id, [result])
    if isinstance(action, AnswerCallbackWithURL):
        return client.answer_callback_query(action.callback_query_id, url=action.url)
    if isinstance(action, SetGameScore):
        return client.set_game_score(
            action.user_id,
            action.score,
            inline_message_id=action.inline_message_id,
        )
    raise TypeError(f"Unknown outbound action: {action!r}")


def perform(client: Snake4DClient, action: OutboundAction) -> Dict[str, Any]:
    """Execute *action* against the Bot API.

    Raises:
        UpstreamError: On a non-2xx response or a transport failure.
    """
    name = type(action).__name__
    try:
        data = _call(client, action)
    except APIException as exc:
        logger.error("Bot API rejected action", extra={"action": name, "status_code": exc.status_code, "error": str(exc)})
        raise UpstreamError(str(exc), status_code=exc.status_code) from exc
    except requests.RequestException as exc:
        logger.error("Bot API request failed", extra={"action": name, "error": str(exc)})
        raise UpstreamError(f"failed to call telegram API: {exc}") from exc

    logger.info("Action performed", extra={"action": name})
    return data
