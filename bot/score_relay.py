"""Score relay: validates a score submission from the game and forwards it to ``setGameScore``.

Request body::

    {"userId": "42", "score": 100, "messageId": "AgAAAB..."}

The pipeline is linear (preflight → config → parse → validate → forward)
and every exit returns exactly one :class:`~core.responses.ResponseEnvelope`.
A submission reaches Telegram at most once per call.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field, ValidationError

from config import BotConfig
from core.errors import ConfigurationError, InvalidRequestError, UpstreamError
from core.logger import Snake4DLogger
from core.responses import ResponseEnvelope, build_response, error_response, success_response
from sdk.client import Snake4DClient
from bot.actions import SetGameScore, perform

logger = Snake4DLogger.get_logger()

# Scores are signed 64-bit integers.
_MIN_SCORE = -(2**63)
_MAX_SCORE = 2**63 - 1


class ScoreSubmission(BaseModel):
    """Payload posted by the client-side game.

    Types are strict (``"100"`` is not a score) and the score must fit in a
    signed 64-bit integer; absent or ``null`` fields
    parse to ``None`` and are rejected by :meth:`to_action`.
    """

    user_id: Optional[str] = Field(None, alias="userId")
    score: Optional[int] = Field(None, ge=_MIN_SCORE, le=_MAX_SCORE)
    message_id: Optional[str] = Field(None, alias="messageId")

    model_config = {"populate_by_name": True, "strict": True}

    def is_complete(self) -> bool:
        """True when all three fields are present and non-empty / non-zero.

        A score of ``0`` counts as missing.
        """
        return bool(self.user_id and self.score and self.message_id)

    def to_action(self) -> SetGameScore:
        """Reshape into the ``setGameScore`` action.

        Raises:
            InvalidRequestError: If any field is missing.
        """
        if not self.is_complete():
            raise InvalidRequestError("Missing required fields")
        return SetGameScore(
            user_id=self.user_id,
            score=self.score,
            inline_message_id=self.message_id,
        )


def parse_submission(raw: Union[str, bytes, None]) -> ScoreSubmission:
    """Parse *raw* JSON into a :class:`ScoreSubmission`.

    Raises:
        InvalidRequestError: If the body is not a JSON object of the expected shape.
    """
    try:
        return ScoreSubmission.model_validate_json(raw or b"")
    except ValidationError as exc:
        raise InvalidRequestError("Invalid request body") from exc


def submit(
    raw: Union[str, bytes, None],
    config: BotConfig,
    method: str = "POST",
    client: Optional[Snake4DClient] = None,
) -> ResponseEnvelope:
    """Validate one score submission and relay it to Telegram."""
    body_length = len(raw) if raw else 0
    logger.info("Score submission received", extra={"method": method, "body_length": body_length})

    if method.upper() == "OPTIONS":
        return build_response(200)

    try:
        config.require_token()
    except ConfigurationError as exc:
        logger.error("Score relay configuration error", extra={"error": str(exc)})
        return error_response(500, "Server configuration error")

    try:
        submission = parse_submission(raw)
        action = submission.to_action()
    except InvalidRequestError as exc:
        logger.warning("Rejected score submission", extra={"error": str(exc), "body_length": body_length})
        return error_response(400, str(exc))

    logger.info(
        "Relaying score",
        extra={"user_id": action.user_id, "score": action.score, "inline_message_id": action.inline_message_id},
    )

    if client is None:
        client = Snake4DClient.from_config(config)

    try:
        perform(client, action)
    except UpstreamError as exc:
        return error_response(500, f"Failed to update score: {exc}")

    logger.info("Score updated", extra={"user_id": action.user_id})
    return success_response()
