"""Exception hierarchy shared by the webhook and score-relay pipelines."""

from typing import Optional


class GameBotError(Exception):
    """Base class for every error raised by the bot core."""


class ConfigurationError(GameBotError):
    """A required setting (bot token, game URL) is missing.

    The message is for logs only; callers answer with a generic
    ``"Server configuration error"``.
    """


class InvalidRequestError(GameBotError):
    """The inbound payload is malformed or incomplete.

    The message is safe to return to the client verbatim.
    """


class UpstreamError(GameBotError):
    """A Telegram Bot API call failed or returned a non-2xx status.

    Attributes:
        status_code: Upstream HTTP status, or ``None`` for transport failures.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
