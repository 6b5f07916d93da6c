"""Bot application layer: update dispatch, game handlers, webhook and score relay.

This package may import from ``core/``, ``sdk/`` and ``config`` only.
"""

from bot.callbacks import build_game_url, handle_callback_query
from bot.dispatcher import dispatch, process_update, run
from bot.handlers import handle_command, handle_game, handle_inline_query, handle_start
from bot.score_relay import ScoreSubmission, submit
from bot.webhook import handle_webhook

__all__ = [
    # Dispatcher
    "run",
    "dispatch",
    "process_update",
    # Handlers
    "handle_start",
    "handle_game",
    "handle_command",
    "handle_inline_query",
    "handle_callback_query",
    "build_game_url",
    # Inbound surfaces
    "handle_webhook",
    "submit",
    "ScoreSubmission",
]
