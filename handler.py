"""AWS Lambda entry points for the Snake 4D bot.

Thin adapters between API Gateway proxy events and the two inbound surfaces:

* ``webhook``: Telegram webhook (``POST``), see :mod:`bot.webhook`.
* ``score_update``: score submissions from the game (``POST``/``OPTIONS``),
  see :mod:`bot.score_relay`.

Configuration is loaded once per Lambda container and reused across warm
invocations.
"""

import base64
import binascii
from typing import Any, Dict, Optional

from config import BotConfig, load_config
from core.logger import Snake4DLogger
from core.responses import error_response
from bot.score_relay import submit
from bot.webhook import handle_webhook

logger = Snake4DLogger.get_logger()

# Module-level config for Lambda warm starts
_config: Optional[BotConfig] = None


def get_config() -> BotConfig:
    """Return the process configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def request_body(event: Dict[str, Any]) -> Optional[str]:
    """Return the request body, decoding it when API Gateway base64-encoded it.

    Raises:
        ValueError: If a base64 body cannot be decoded.
    """
    body = event.get("body")
    if body and event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as exc:
            raise ValueError(f"undecodable base64 body: {exc}") from exc
    return body


def request_method(event: Dict[str, Any]) -> str:
    """Return the HTTP method from an HTTP API (v2) or REST API (v1) event."""
    http = (event.get("requestContext") or {}).get("http") or {}
    return (http.get("method") or event.get("httpMethod") or "POST").upper()


def webhook(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """Handle a Telegram webhook delivery."""
    try:
        body = request_body(event)
    except ValueError as exc:
        logger.warning("Webhook body could not be decoded", extra={"error": str(exc)})
        body = None
    return handle_webhook(body, get_config()).to_dict()


def score_update(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """Handle a score submission from the client-side game."""
    method = request_method(event)
    try:
        body = request_body(event)
    except ValueError as exc:
        logger.warning("Score body could not be decoded", extra={"error": str(exc)})
        return error_response(400, "Invalid request body").to_dict()
    return submit(body, get_config(), method=method).to_dict()
