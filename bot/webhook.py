"""Telegram webhook surface.

Turns one raw webhook body into exactly one :class:`~core.responses.ResponseEnvelope`.
Once the update has been parsed, the answer is always ``200 OK``: errors
raised while handling it are logged here and nowhere else, so Telegram
never re-delivers an update the bot has already seen.
"""

from typing import Optional, Union

from pydantic import ValidationError

from config import BotConfig
from core.errors import ConfigurationError, GameBotError
from core.logger import Snake4DLogger
from core.responses import ResponseEnvelope, text_response
from sdk.client import Snake4DClient
from sdk.models import Update
from bot.dispatcher import process_update

logger = Snake4DLogger.get_logger()


def handle_webhook(
    body: Union[str, bytes, None],
    config: BotConfig,
    client: Optional[Snake4DClient] = None,
) -> ResponseEnvelope:
    """Handle one webhook delivery.

    Responses:
        400 ``Invalid request body`` for an empty body,
        500 ``Server configuration error`` when the token or game URL is missing,
        400 ``Invalid update format`` when the body is not a Telegram update,
        200 ``OK`` otherwise.
    """
    if not body:
        logger.warning("Webhook called with empty body")
        return text_response(400, "Invalid request body")

    try:
        config.require_token()
        config.require_game_url()
    except ConfigurationError as exc:
        logger.error("Webhook configuration error", extra={"error": str(exc)})
        return text_response(500, "Server configuration error")

    try:
        update = Update.model_validate_json(body)
    except ValidationError as exc:
        logger.warning("Failed to parse update", extra={"error": str(exc)})
        return text_response(400, "Invalid update format")

    logger.info("Webhook received", extra={"update_id": update.update_id})

    if client is None:
        client = Snake4DClient.from_config(config)

    try:
        process_update(client, config, update)
    except GameBotError as exc:
        logger.error("Error handling update", extra={"update_id": update.update_id, "error": str(exc)})

    return text_response(200, "OK")
