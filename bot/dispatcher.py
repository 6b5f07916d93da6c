"""Update dispatcher and local polling loop.

Routes each classified update to the handler in :mod:`bot.handlers` or
:mod:`bot.callbacks` that produces its outbound action, then performs that
action through the SDK client.  The webhook surface in :mod:`bot.webhook`
and the polling loop below are the only callers, and the only places where
handler errors are logged and suppressed.
"""

import time
from typing import Optional

import requests
from pydantic import ValidationError

from config import BotConfig
from core.errors import GameBotError
from core.logger import Snake4DLogger
from sdk.client import Snake4DClient
from sdk.exceptions import APIException
from sdk.models import Update
from bot.actions import OutboundAction, perform
from bot.callbacks import handle_callback_query
from bot.events import CommandMessage, GameCallback, InboundUpdate, InlineQueryRequest, Unhandled, classify_update
from bot.handlers import handle_command, handle_inline_query

logger = Snake4DLogger.get_logger()

_POLL_RETRY_DELAY = 5


def dispatch(event: InboundUpdate, config: BotConfig) -> Optional[OutboundAction]:
    """Return the outbound action for *event*, or ``None`` when there is nothing to do."""
    if isinstance(event, CommandMessage):
        return handle_command(event, config)
    if isinstance(event, InlineQueryRequest):
        return handle_inline_query(event, config)
    if isinstance(event, GameCallback):
        return handle_callback_query(event, config)
    if isinstance(event, Unhandled):
        logger.debug("Update not handled", extra={"reason": event.reason})
        return None
    raise TypeError(f"Unknown inbound update: {event!r}")


def process_update(client: Snake4DClient, config: BotConfig, update: Update) -> Optional[OutboundAction]:
    """Classify, dispatch and perform a single Telegram update.

    Returns the performed action (``None`` when the update was ignored).

    Raises:
        UpstreamError: If the Bot API call fails.
        ConfigurationError: If a setting the handler needs is missing.
    """
    event = classify_update(update, config.game_short_name)
    logger.debug("Update classified", extra={"update_id": update.update_id, "kind": type(event).__name__})

    action = dispatch(event, config)
    if action is not None:
        perform(client, action)
    return action


def run(config: BotConfig) -> None:
    """Start the long-polling loop for local development.

    Any registered webhook is removed first, since Telegram refuses
    ``getUpdates`` while one is set.

    Raises:
        ConfigurationError: If the bot token or game URL is missing.
    """
    config.require_token()
    config.require_game_url()

    client = Snake4DClient.from_config(config)
    client.delete_webhook()
    offset: Optional[int] = None

    logger.info("Snake 4D bot is running. Polling for updates...")
    while True:
        try:
            data = client.get_updates(offset)
        except (APIException, requests.RequestException) as exc:
            logger.warning("getUpdates failed, retrying", extra={"api_endpoint": "getUpdates", "error": str(exc), "retry_in": _POLL_RETRY_DELAY})
            time.sleep(_POLL_RETRY_DELAY)
            continue

        updates = data.get("result", [])
        if updates:
            logger.debug("Received updates", extra={"count": len(updates)})
        for raw in updates:
            offset = raw["update_id"] + 1
            try:
                process_update(client, config, Update.model_validate(raw))
            except GameBotError as exc:
                logger.error("Error handling update", extra={"update_id": raw["update_id"], "error": str(exc)})
            except ValidationError as exc:
                logger.warning("Failed to parse update", extra={"update_id": raw["update_id"], "error": str(exc)})
