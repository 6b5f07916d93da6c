"""Callback-query handler for game-button clicks.

Telegram fires a callback query when a user taps "Play" on a game message.
The bot answers it with a URL; the identifiers the client-side game needs
to submit a score later travel in the URL fragment.
"""

from config import BotConfig
from core.logger import Snake4DLogger
from bot.actions import AnswerCallbackWithURL
from bot.events import GameCallback

logger = Snake4DLogger.get_logger()


def build_game_url(game_url: str, user_id: int, inline_message_id: str) -> str:
    """Return ``<game_url>#userId=<user_id>&messageId=<inline_message_id>``."""
    return f"{game_url}#userId={user_id}&messageId={inline_message_id}"


def handle_callback_query(callback: GameCallback, config: BotConfig) -> AnswerCallbackWithURL:
    """Answer a game-button click with the launch URL.

    Raises:
        ConfigurationError: If ``GAME_URL`` is not configured.
    """
    url = build_game_url(config.require_game_url(), callback.from_user_id, callback.inline_message_id)
    logger.info(
        "Launching game",
        extra={"callback_query_id": callback.query_id, "user_id": callback.from_user_id},
    )
    return AnswerCallbackWithURL(callback_query_id=callback.query_id, url=url)
