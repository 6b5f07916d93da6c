"""Command and inline-query handlers for the Snake 4D bot.

Each command handler is registered with :data:`bot.registry.registry` and
returns the outbound action to perform; the dispatcher in
:mod:`bot.dispatcher` decides what to do with it.
"""

from typing import Optional

from config import BotConfig
from core.logger import Snake4DLogger
from bot.actions import AnswerInlineWithGame, LaunchGamePrompt, OutboundAction, SendWelcomeMessage
from bot.events import CommandMessage, InlineQueryRequest
from bot.registry import registry

logger = Snake4DLogger.get_logger()


def welcome_text(bot_username: str) -> str:
    """Onboarding text sent in reply to ``/start``."""
    return (
        "Welcome to the Snake 4D Game Bot! "
        f"Use @{bot_username} followed by some text in any chat to start playing."
    )


@registry.register("/start")
def handle_start(message: CommandMessage, config: BotConfig) -> SendWelcomeMessage:
    """Handle /start: greet the user with usage instructions."""
    logger.info("User invoked /start", extra={"chat_id": message.chat_id, "command": "/start"})
    return SendWelcomeMessage(chat_id=message.chat_id, text=welcome_text(config.bot_username))


@registry.register("/game")
def handle_game(message: CommandMessage, config: BotConfig) -> LaunchGamePrompt:
    """Handle /game: post the game message for this chat."""
    logger.info("User invoked /game", extra={"chat_id": message.chat_id, "command": "/game"})
    return LaunchGamePrompt(chat_id=message.chat_id, game_short_name=config.game_short_name)


def handle_command(message: CommandMessage, config: BotConfig) -> Optional[OutboundAction]:
    """Route a text message to its registered command; other text is ignored."""
    action = registry.dispatch(message, config)
    if action is None:
        logger.debug("No command matched", extra={"chat_id": message.chat_id, "text": message.text[:80]})
    return action


def handle_inline_query(query: InlineQueryRequest, config: BotConfig) -> AnswerInlineWithGame:
    """Offer the single game result for any inline query."""
    logger.info("Answering inline query", extra={"inline_query_id": query.query_id})
    return AnswerInlineWithGame(
        inline_query_id=query.query_id,
        game_short_name=config.game_short_name,
    )
