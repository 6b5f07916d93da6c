"""Snake4DClient -- service layer wrapping the Telegram Bot API endpoints the bot uses.

HTTP calls use the ``requests`` library with a bounded timeout on every call.
Inline query results may be passed as Pydantic models; they are dumped to
plain dicts before serialisation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

import requests
from pydantic import BaseModel

from sdk.exceptions import APIException
from sdk.models import InlineQueryResultGame

if TYPE_CHECKING:
    from config import BotConfig


class Snake4DClient:
    """Client-side service layer for the Telegram Bot API.

    Each public method corresponds to a Telegram Bot API endpoint and returns
    the decoded JSON body.  Non-2xx responses raise :class:`APIException`;
    transport failures surface as :class:`requests.RequestException`.
    """

    _DEFAULT_TIMEOUT: float = 5

    def __init__(self, base_url: str, timeout: float = _DEFAULT_TIMEOUT) -> None:
        """Create a new client bound to *base_url*.

        Args:
            base_url: Full Bot API base URL (e.g. ``https://api.telegram.org/bot<token>``).
            timeout: Default request timeout in seconds.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @classmethod
    def from_config(cls, config: BotConfig) -> Snake4DClient:
        """Build a client from a :class:`config.BotConfig`."""
        return cls(config.api_url, timeout=config.request_timeout)

    # ------------------------------------------------------------------
    #  Internal helpers
    # ------------------------------------------------------------------

    def _post(
        self,
        endpoint: str,
        payload: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> Dict[str, Any]:
        """Send a POST request and return the parsed JSON body.

        Raises:
            APIException: If the response status code is not 2xx.
            requests.RequestException: On transport-level failures.
        """
        url = f"{self._base_url}/{endpoint.lstrip('/')}"
        response = requests.post(url, json=payload, timeout=timeout or self._timeout)
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not 200 <= response.status_code < 300:
            raise APIException(
                response.status_code,
                body if isinstance(body, dict) else None,
                response.text,
            )
        return body if isinstance(body, dict) else {"result": body}

    # ------------------------------------------------------------------
    #  Updates
    # ------------------------------------------------------------------

    def get_updates(self, offset: Optional[int] = None, timeout: int = 30) -> Dict[str, Any]:
        """Receive incoming updates using long polling.  The HTTP timeout is padded past *timeout*."""
        payload: Dict[str, Any] = {"timeout": timeout}
        if offset is not None:
            payload["offset"] = offset
        return self._post("getUpdates", payload, timeout=timeout + 5)

    def delete_webhook(self) -> Dict[str, Any]:
        """Remove webhook integration so ``getUpdates`` can be used."""
        return self._post("deleteWebhook", {})

    # ------------------------------------------------------------------
    #  Messages and games
    # ------------------------------------------------------------------

    def send_message(self, chat_id: Union[int, str], text: str) -> Dict[str, Any]:
        """Send a text message.  On success, the sent Message is returned."""
        return self._post("sendMessage", {"chat_id": chat_id, "text": text})

    def send_game(self, chat_id: int, game_short_name: str) -> Dict[str, Any]:
        """Send a game.  On success, the sent Message is returned."""
        return self._post("sendGame", {"chat_id": chat_id, "game_short_name": game_short_name})

    def answer_inline_query(self, inline_query_id: str, results: List[Union[InlineQueryResultGame, Dict[str, Any]]]) -> Dict[str, Any]:
        """Send answers to an inline query.  No more than **50** results per query are allowed."""
        payload: Dict[str, Any] = {
            "inline_query_id": inline_query_id,
            "results": [
                r.model_dump(exclude_none=True) if isinstance(r, BaseModel) else r
                for r in results
            ],
        }
        return self._post("answerInlineQuery", payload)

    def answer_callback_query(self, callback_query_id: str, url: Optional[str] = None) -> Dict[str, Any]:
        """Answer a callback query.  For game buttons, *url* opens the game for the user."""
        payload: Dict[str, Any] = {"callback_query_id": callback_query_id}
        if url is not None:
            payload["url"] = url
        return self._post("answerCallbackQuery", payload)

    def set_game_score(self, user_id: Union[int, str], score: int, inline_message_id: str) -> Dict[str, Any]:
        """Set the score of the specified user in an inline game message."""
        payload: Dict[str, Any] = {
            "inline_message_id": inline_message_id,
            "user_id": user_id,
            "score": score,
        }
        return self._post("setGameScore", payload)
