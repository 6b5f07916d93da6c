"""Telegram Bot API SDK: Pydantic models, service client, and exceptions.

The :class:`Snake4DClient` class wraps the handful of endpoints the bot calls
(``sendMessage``, ``sendGame``, ``answerInlineQuery``,
``answerCallbackQuery``, ``setGameScore`` and the polling helpers).

Usage::

    from sdk import Snake4DClient, APIException
    from sdk.models import Update, CallbackQuery
"""

from sdk.client import Snake4DClient
from sdk.exceptions import APIException

__all__ = [
    "Snake4DClient",
    "APIException",
]
