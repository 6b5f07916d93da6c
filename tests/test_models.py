"""Tests for the Telegram Pydantic models and the score-submission payload."""

import sys
import os
import pytest

# Ensure the project root is importable.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pydantic import ValidationError

from sdk.models import CallbackQuery, InlineQueryResultGame, Message, Update, User
from bot.score_relay import ScoreSubmission


# ── User ─────────────────────────────────────────────────────────────────────


class TestUserModel:
    """Validate the User schema."""

    def test_minimal_user(self) -> None:
        u = User(id=42, is_bot=False, first_name="Ada")
        assert u.id == 42
        assert u.last_name is None
        assert u.username is None

    def test_missing_required_raises(self) -> None:
        with pytest.raises(ValidationError):
            User(id=1, is_bot=False)  # missing first_name


# ── Message / CallbackQuery aliases ──────────────────────────────────────────


class TestAliases:
    """``from`` is a Python keyword; models expose it as ``from_field``."""

    def test_message_from_alias(self) -> None:
        msg = Message.model_validate({
            "message_id": 1,
            "date": 0,
            "chat": {"id": 5, "type": "private"},
            "from": {"id": 7, "is_bot": False, "first_name": "Eve"},
            "text": "/game",
        })
        assert msg.from_field is not None
        assert msg.from_field.id == 7

    def test_callback_query_game_short_name(self) -> None:
        cq = CallbackQuery.model_validate({
            "id": "cb1",
            "from": {"id": 7, "is_bot": False, "first_name": "Eve"},
            "chat_instance": "ci",
            "inline_message_id": "xyz",
            "game_short_name": "snake4d",
        })
        assert cq.from_field.id == 7
        assert cq.game_short_name == "snake4d"
        assert cq.data is None


# ── Update ───────────────────────────────────────────────────────────────────


class TestUpdateModel:
    """Validate webhook payload parsing."""

    def test_parse_json_ignores_unknown_fields(self) -> None:
        update = Update.model_validate_json(
            '{"update_id": 9, "poll": {"id": "p"}, "inline_query": '
            '{"id": "iq", "from": {"id": 1, "is_bot": false, "first_name": "A"}, "query": "", "offset": ""}}'
        )
        assert update.update_id == 9
        assert update.inline_query is not None
        assert update.message is None

    def test_missing_update_id_raises(self) -> None:
        with pytest.raises(ValidationError):
            Update.model_validate_json('{"message": null}')

    def test_not_json_raises(self) -> None:
        with pytest.raises(ValidationError):
            Update.model_validate_json("not json")


# ── InlineQueryResultGame ────────────────────────────────────────────────────


class TestInlineQueryResultGame:
    def test_type_defaults_to_game(self) -> None:
        result = InlineQueryResultGame(id="snake4d", game_short_name="snake4d")
        assert result.model_dump(exclude_none=True) == {
            "type": "game",
            "id": "snake4d",
            "game_short_name": "snake4d",
        }


# ── ScoreSubmission ──────────────────────────────────────────────────────────


class TestScoreSubmission:
    """Validate the client payload model."""

    def test_camel_case_fields(self) -> None:
        sub = ScoreSubmission.model_validate_json('{"userId": "42", "score": 100, "messageId": "abc"}')
        assert sub.user_id == "42"
        assert sub.score == 100
        assert sub.message_id == "abc"
        assert sub.is_complete()

    def test_absent_fields_are_none(self) -> None:
        sub = ScoreSubmission.model_validate_json("{}")
        assert sub.user_id is None
        assert not sub.is_complete()

    def test_zero_score_is_incomplete(self) -> None:
        sub = ScoreSubmission.model_validate_json('{"userId": "42", "score": 0, "messageId": "abc"}')
        assert not sub.is_complete()

    @pytest.mark.parametrize("body", [
        '{"userId": 42, "score": 100, "messageId": "abc"}',
        '{"userId": "42", "score": "100", "messageId": "abc"}',
        '{"userId": "42", "score": 1.5, "messageId": "abc"}',
        '{"userId": "42", "score": true, "messageId": "abc"}',
        '["42", 100, "abc"]',
    ])
    def test_wrong_types_raise(self, body: str) -> None:
        with pytest.raises(ValidationError):
            ScoreSubmission.model_validate_json(body)

    def test_score_bounds_are_64_bit(self) -> None:
        top = ScoreSubmission.model_validate_json('{"userId": "42", "score": 9223372036854775807, "messageId": "abc"}')
        assert top.score == 2**63 - 1
        with pytest.raises(ValidationError):
            ScoreSubmission.model_validate_json('{"userId": "42", "score": 9223372036854775808, "messageId": "abc"}')
