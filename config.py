"""Application configuration: environment variables resolved into a frozen value.

Loads ``TELEGRAM_BOT_TOKEN``, ``GAME_URL`` and the optional tuning knobs from
the environment via ``python-dotenv``.  :func:`load_config` is called once per
process (Lambda container or polling runner) and the resulting
:class:`BotConfig` is passed by reference into both request pipelines; nothing
re-reads the environment while a request is being handled.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import dataclasses
import os
from typing import Mapping, Optional

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── core ─────────────────────────────────────────────────────────────────────
from core.errors import ConfigurationError
from core.logger import Snake4DLogger

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()

logger = Snake4DLogger.get_logger()

DEFAULT_GAME_SHORT_NAME = "snake4d"
DEFAULT_BOT_USERNAME = "snake4dbot"
DEFAULT_API_BASE_URL = "https://api.telegram.org"
DEFAULT_REQUEST_TIMEOUT = 5.0


@dataclasses.dataclass(frozen=True)
class BotConfig:
    """Read-only settings shared by the webhook and score-relay pipelines.

    ``bot_token`` and ``game_url`` may be ``None``; each pipeline decides
    whether their absence is fatal for the request it is handling.
    """

    bot_token: Optional[str] = None
    game_url: Optional[str] = None
    game_short_name: str = DEFAULT_GAME_SHORT_NAME
    bot_username: str = DEFAULT_BOT_USERNAME
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @property
    def api_url(self) -> str:
        """Bot API base URL for this token, e.g. ``https://api.telegram.org/bot<token>``."""
        return f"{self.api_base_url.rstrip('/')}/bot{self.bot_token or ''}"

    def require_token(self) -> str:
        """Return the bot token or raise :class:`ConfigurationError`."""
        if not self.bot_token:
            raise ConfigurationError("TELEGRAM_BOT_TOKEN is not set")
        return self.bot_token

    def require_game_url(self) -> str:
        """Return the game URL or raise :class:`ConfigurationError`."""
        if not self.game_url:
            raise ConfigurationError("GAME_URL is not set")
        return self.game_url


# ── Helper functions (private) ───────────────────────────────────────────────


def _clean(raw: Optional[str]) -> Optional[str]:
    """Strip whitespace; treat blank values as unset."""
    if raw is None:
        return None
    raw = raw.strip()
    return raw or None


def _parse_timeout(raw: Optional[str]) -> float:
    """Parse ``REQUEST_TIMEOUT`` seconds, falling back to the default on bad input."""
    value = _clean(raw)
    if value is None:
        return DEFAULT_REQUEST_TIMEOUT
    try:
        timeout = float(value)
    except ValueError:
        logger.warning("Invalid REQUEST_TIMEOUT, using default", extra={"raw_value": value})
        return DEFAULT_REQUEST_TIMEOUT
    if timeout <= 0:
        logger.warning("Non-positive REQUEST_TIMEOUT, using default", extra={"raw_value": value})
        return DEFAULT_REQUEST_TIMEOUT
    return timeout


# ── Public API ───────────────────────────────────────────────────────────────


def load_config(environ: Optional[Mapping[str, str]] = None) -> BotConfig:
    """Build a :class:`BotConfig` from *environ* (defaults to ``os.environ``).

    Missing required values are logged here but never raised: the request
    pipelines turn them into a ``500 Server configuration error``.
    """
    env = os.environ if environ is None else environ

    config = BotConfig(
        bot_token=_clean(env.get("TELEGRAM_BOT_TOKEN")),
        game_url=_clean(env.get("GAME_URL")),
        game_short_name=_clean(env.get("GAME_SHORT_NAME")) or DEFAULT_GAME_SHORT_NAME,
        bot_username=_clean(env.get("BOT_USERNAME")) or DEFAULT_BOT_USERNAME,
        api_base_url=_clean(env.get("TELEGRAM_API_URL")) or DEFAULT_API_BASE_URL,
        request_timeout=_parse_timeout(env.get("REQUEST_TIMEOUT")),
    )

    # ── Startup diagnostics ──────────────────────────────────────────────
    if config.bot_token:
        logger.info("Config loaded, TELEGRAM_BOT_TOKEN is set")
    else:
        logger.warning("Config loaded, TELEGRAM_BOT_TOKEN is NOT set")

    if config.game_url:
        logger.info("GAME_URL resolved", extra={"game_url": config.game_url})
    else:
        logger.warning("GAME_URL is NOT set")

    logger.info(
        "Game settings",
        extra={
            "game_short_name": config.game_short_name,
            "bot_username": config.bot_username,
            "request_timeout": config.request_timeout,
        },
    )
    return config
