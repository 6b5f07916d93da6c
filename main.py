"""Entry point: run the Snake 4D bot locally with long polling.

Usage::

    python main.py

Reads configuration from the environment / ``.env`` and processes updates
until interrupted.  In production the bot runs behind the webhook instead,
see :mod:`handler`.
"""

import sys

from config import load_config
from core.errors import ConfigurationError
from core.logger import Snake4DLogger
from bot.dispatcher import run

logger = Snake4DLogger.get_logger()


def main() -> int:
    config = load_config()
    try:
        run(config)
    except ConfigurationError as exc:
        logger.error("Cannot start polling", extra={"error": str(exc)})
        return 1
    except KeyboardInterrupt:
        logger.info("Bot stopped by user")
    return 0


if __name__ == "__main__":
    sys.exit(main())
