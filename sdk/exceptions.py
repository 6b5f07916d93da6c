"""Exception hierarchy for the Snake 4D Telegram SDK."""

from typing import Any, Dict, Optional


class APIException(Exception):
    """Raised for non-2xx responses from the Telegram Bot API.

    Attributes:
        status_code: HTTP status code returned by the API.
        response_body: Parsed JSON body as a dict, when the body was JSON.
        response_text: Raw response body text.
    """

    def __init__(
        self,
        status_code: int,
        response_body: Optional[Dict[str, Any]] = None,
        response_text: str = "",
    ) -> None:
        """Initialise with the HTTP status code and the captured body."""
        self.status_code = status_code
        self.response_body = response_body or {}
        self.response_text = response_text
        detail = response_text.strip() or self.response_body.get("description", "Unknown error")
        super().__init__(f"telegram API returned status {status_code}: {detail}")
