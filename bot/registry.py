"""Command registry: single source of truth for slash-command → action mapping.

Design:
- ``CommandHandler`` is a :class:`Protocol` describing the handler shape:
  it receives the classified :class:`~bot.events.CommandMessage` and the
  process :class:`~config.BotConfig` and *returns* an outbound action
  instead of calling Telegram itself.
- ``CommandRegistry`` is a :class:`Generic` singleton that stores
  ``CommandEntry`` metadata and exposes lookup helpers.
- ``@register`` is a decorator applied in ``handlers.py`` to bind a
  function to its slash-command in one place.

Commands match the message text literally; ``/start now`` or
``/start@snake4dbot`` are not commands.
"""

from __future__ import annotations

import dataclasses
from typing import (
    Any,
    Callable,
    Generic,
    Optional,
    Protocol,
    TypeVar,
    runtime_checkable,
)

from config import BotConfig
from bot.actions import OutboundAction
from bot.events import CommandMessage

T = TypeVar("T")  # message type handed to handlers


@runtime_checkable
class CommandHandler(Protocol):
    """Handler that maps a command message to an outbound action."""
    def __call__(self, message: CommandMessage, config: BotConfig) -> OutboundAction: ...  # noqa: E704


@dataclasses.dataclass(frozen=True, slots=True)
class CommandEntry(Generic[T]):
    """Metadata for a single registered slash-command."""
    command: str  # e.g. "/game"
    handler: CommandHandler


class CommandRegistry(Generic[T]):
    """Singleton command registry, generic over the message type *T*.

    Usage::

        registry: CommandRegistry[CommandMessage] = CommandRegistry()

        @registry.register("/ping")
        def handle_ping(message, config): ...

        # In the dispatcher:
        action = registry.dispatch(message, config)
    """

    _instance: CommandRegistry[Any] | None = None
    _entries: dict[str, CommandEntry[T]]

    def __new__(cls) -> CommandRegistry[T]:
        if cls._instance is None:
            inst = super().__new__(cls)
            inst._entries = {}
            cls._instance = inst
        return cls._instance  # type: ignore[return-value]

    # ── decorator ────────────────────────────────────────────────────────

    def register(
        self,
        command: str,
    ) -> Callable[[CommandHandler], CommandHandler]:
        """Decorator that registers *handler* for *command*.

        Example::

            @registry.register("/game")
            def handle_game(message, config): ...
        """
        def decorator(func: CommandHandler) -> CommandHandler:
            self._entries[command] = CommandEntry(
                command=command,
                handler=func,
            )
            return func
        return decorator

    # ── lookup helpers ───────────────────────────────────────────────────

    def get(self, command: str) -> CommandEntry[T] | None:
        """Return the entry for *command*, or ``None``."""
        return self._entries.get(command)

    def entries(self) -> dict[str, CommandEntry[T]]:
        """Return a copy of all registered commands."""
        return dict(self._entries)

    def dispatch(self, message: CommandMessage, config: BotConfig) -> Optional[OutboundAction]:
        """Look up ``message.text`` and return its handler's action, or ``None``."""
        entry = self._entries.get(message.text)
        if entry is None:
            return None
        return entry.handler(message, config)


# Module-level singleton; import this everywhere.
registry: CommandRegistry[CommandMessage] = CommandRegistry()
