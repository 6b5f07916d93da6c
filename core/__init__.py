"""Core building blocks: errors, response envelopes, and logging.

This package is framework-agnostic. It must NEVER import from ``bot/`` or ``sdk/``.
"""

from core.errors import ConfigurationError, GameBotError, InvalidRequestError, UpstreamError
from core.logger import Snake4DLogger
from core.responses import (
    CORS_HEADERS,
    ResponseEnvelope,
    build_response,
    error_response,
    success_response,
    text_response,
)

__all__ = [
    "GameBotError",
    "ConfigurationError",
    "InvalidRequestError",
    "UpstreamError",
    "Snake4DLogger",
    "CORS_HEADERS",
    "ResponseEnvelope",
    "build_response",
    "error_response",
    "success_response",
    "text_response",
]
