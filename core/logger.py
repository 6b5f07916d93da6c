"""Snake4DLogger: Singleton JSON logger for the webhook, score relay and polling runner.

Every record is one JSON object per line on stdout, which is what CloudWatch
ingests from a Lambda function.  Two environment variables tune it:

* ``LOG_LEVEL``: level name such as ``DEBUG`` or ``WARNING`` (default ``INFO``).
* ``LOG_DIR``: when set, records are also written to ``<LOG_DIR>/snake4d.log``
  with size-based rotation.  Left unset on Lambda, whose filesystem is
  read-only outside ``/tmp``.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, List, Optional

_LOGGER_NAME = "snake4d"


class _JsonFormatter(logging.Formatter):
    """Render a record as a single-line JSON object.

    Fields passed through ``extra=`` land at the top level next to the fixed
    ones, so a call such as::

        logger.warning("Rejected score submission", extra={"error": "Missing required fields"})

    yields ``{"timestamp": ..., "level": "WARNING", ..., "error": "Missing required fields"}``.
    A record logged with ``exc_info`` carries the formatted traceback under
    ``exception``.
    """

    _RESERVED: frozenset[str] = frozenset(vars(logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None,
    ))) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "func_name": record.funcName,
        }
        entry.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in self._RESERVED and key not in entry
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def _level_from_env() -> int:
    """Resolve ``LOG_LEVEL`` to a numeric level; unknown names fall back to INFO."""
    name = os.environ.get("LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


class Snake4DLogger:
    """Process-wide logger, configured once on first use.

    Usage::

        from core.logger import Snake4DLogger

        logger = Snake4DLogger.get_logger()
        logger.info("Update classified", extra={"update_id": 100, "kind": "CommandMessage"})
    """

    _instance: Optional["Snake4DLogger"] = None
    _logger: Optional[logging.Logger] = None

    _LOG_FILE: str = "snake4d.log"
    _MAX_BYTES: int = 5 * 1024 * 1024  # 5 MB
    _BACKUP_COUNT: int = 5

    def __new__(cls, level: Optional[int] = None) -> "Snake4DLogger":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._configure(_level_from_env() if level is None else level)
            cls._instance = instance
        return cls._instance

    def _configure(self, level: int) -> None:
        logger = logging.getLogger(_LOGGER_NAME)
        logger.setLevel(level)
        # A reloaded module must not stack a second set of handlers.
        if not logger.handlers:
            formatter = _JsonFormatter()
            for handler in self._build_handlers():
                handler.setLevel(level)
                handler.setFormatter(formatter)
                logger.addHandler(handler)
        self._logger = logger

    def _build_handlers(self) -> List[logging.Handler]:
        handlers: List[logging.Handler] = [logging.StreamHandler()]
        log_dir = os.environ.get("LOG_DIR")
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            handlers.append(RotatingFileHandler(
                os.path.join(log_dir, self._LOG_FILE),
                maxBytes=self._MAX_BYTES,
                backupCount=self._BACKUP_COUNT,
                encoding="utf-8",
            ))
        return handlers

    @staticmethod
    def get_logger(level: Optional[int] = None) -> logging.Logger:
        """Return the shared ``snake4d`` logger.

        *level* only matters on the very first call; later calls get the
        already configured logger unchanged.
        """
        instance = Snake4DLogger(level)
        assert instance._logger is not None  # set in __new__
        return instance._logger
