"""Tests for Snake4DClient and APIException."""

import sys
import os
from unittest.mock import patch, MagicMock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from config import BotConfig
from sdk.client import Snake4DClient
from sdk.exceptions import APIException
from sdk.models import InlineQueryResultGame


def _response(status_code: int = 200, json_body=None, text: str = "") -> MagicMock:
    """Build a fake ``requests.Response``."""
    resp = MagicMock()
    resp.status_code = status_code
    if json_body is None:
        resp.json.side_effect = ValueError("No JSON")
    else:
        resp.json.return_value = json_body
    resp.text = text
    return resp


# ── APIException ─────────────────────────────────────────────────────────────


class TestAPIException:
    """Validate the base exception class."""

    def test_attributes(self) -> None:
        exc = APIException(403, {"description": "Forbidden"}, '{"description": "Forbidden"}')
        assert exc.status_code == 403
        assert exc.response_body == {"description": "Forbidden"}
        assert "403" in str(exc)
        assert "Forbidden" in str(exc)

    def test_raw_text_is_the_detail(self) -> None:
        exc = APIException(503, None, "rate limited")
        assert str(exc) == "telegram API returned status 503: rate limited"

    def test_default_body(self) -> None:
        exc = APIException(500)
        assert exc.response_body == {}
        assert "Unknown error" in str(exc)

    def test_is_exception(self) -> None:
        assert issubclass(APIException, Exception)


# ── Snake4DClient construction ──────────────────────────────────────────────


class TestClientInit:
    """Validate client initialisation."""

    def test_base_url_strip(self) -> None:
        c = Snake4DClient("https://api.example.com/bot123/")
        assert c._base_url == "https://api.example.com/bot123"

    def test_default_timeout(self) -> None:
        c = Snake4DClient("https://api.example.com")
        assert c._timeout == 5

    def test_custom_timeout(self) -> None:
        c = Snake4DClient("https://api.example.com", timeout=30)
        assert c._timeout == 30

    def test_from_config(self) -> None:
        config = BotConfig(bot_token="TOKEN", api_base_url="https://api.example.com/", request_timeout=2.5)
        c = Snake4DClient.from_config(config)
        assert c._base_url == "https://api.example.com/botTOKEN"
        assert c._timeout == 2.5


# ── _post helper ─────────────────────────────────────────────────────────────


class TestPostHelper:
    """Validate the internal _post method."""

    @patch("sdk.client.requests.post")
    def test_success(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(200, {"ok": True, "result": True})

        c = Snake4DClient("https://api.example.com")
        result = c._post("getMe")
        assert result == {"ok": True, "result": True}
        mock_post.assert_called_once_with("https://api.example.com/getMe", json=None, timeout=5)

    @patch("sdk.client.requests.post")
    def test_any_2xx_is_success(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(204)

        c = Snake4DClient("https://api.example.com")
        assert c._post("setGameScore", {}) == {}

    @patch("sdk.client.requests.post")
    def test_api_error_raises(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(
            401, {"ok": False, "description": "Unauthorized"}, '{"ok": false, "description": "Unauthorized"}'
        )

        c = Snake4DClient("https://api.example.com")
        with pytest.raises(APIException) as exc_info:
            c._post("getMe")
        assert exc_info.value.status_code == 401
        assert exc_info.value.response_body["description"] == "Unauthorized"

    @patch("sdk.client.requests.post")
    def test_redirect_is_not_success(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(302, text="moved")

        c = Snake4DClient("https://api.example.com")
        with pytest.raises(APIException):
            c._post("getMe")

    @patch("sdk.client.requests.post")
    def test_non_json_error_keeps_text(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(503, text="rate limited")

        c = Snake4DClient("https://api.example.com")
        with pytest.raises(APIException) as exc_info:
            c._post("setGameScore")
        assert exc_info.value.response_text == "rate limited"
        assert "rate limited" in str(exc_info.value)

    @patch("sdk.client.requests.post")
    def test_network_error_propagates(self, mock_post: MagicMock) -> None:
        import requests as req_lib

        mock_post.side_effect = req_lib.ConnectionError("offline")

        c = Snake4DClient("https://api.example.com")
        with pytest.raises(req_lib.ConnectionError):
            c._post("getMe")


# ── Endpoint methods ─────────────────────────────────────────────────────────


class TestEndpointMethods:
    """Check the payload each endpoint wrapper sends."""

    @patch("sdk.client.requests.post")
    def test_send_message(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(200, {"ok": True})

        Snake4DClient("https://api.example.com").send_message(1000, "hello")
        args, kwargs = mock_post.call_args
        assert args[0] == "https://api.example.com/sendMessage"
        assert kwargs["json"] == {"chat_id": 1000, "text": "hello"}

    @patch("sdk.client.requests.post")
    def test_send_game(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(200, {"ok": True})

        Snake4DClient("https://api.example.com").send_game(1000, "snake4d")
        args, kwargs = mock_post.call_args
        assert args[0].endswith("/sendGame")
        assert kwargs["json"] == {"chat_id": 1000, "game_short_name": "snake4d"}

    @patch("sdk.client.requests.post")
    def test_answer_inline_query_dumps_models(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(200, {"ok": True, "result": True})

        result = InlineQueryResultGame(id="snake4d", game_short_name="snake4d")
        Snake4DClient("https://api.example.com").answer_inline_query("iq1", [result])
        _, kwargs = mock_post.call_args
        assert kwargs["json"] == {
            "inline_query_id": "iq1",
            "results": [{"type": "game", "id": "snake4d", "game_short_name": "snake4d"}],
        }

    @patch("sdk.client.requests.post")
    def test_answer_callback_query_with_url(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(200, {"ok": True, "result": True})

        Snake4DClient("https://api.example.com").answer_callback_query("cb1", url="https://g.example#userId=7&messageId=xyz")
        _, kwargs = mock_post.call_args
        assert kwargs["json"] == {
            "callback_query_id": "cb1",
            "url": "https://g.example#userId=7&messageId=xyz",
        }

    @patch("sdk.client.requests.post")
    def test_set_game_score(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(200, {"ok": True, "result": True})

        Snake4DClient("https://api.example.com").set_game_score("42", 100, inline_message_id="abc")
        args, kwargs = mock_post.call_args
        assert args[0].endswith("/setGameScore")
        assert kwargs["json"] == {"inline_message_id": "abc", "user_id": "42", "score": 100}

    @patch("sdk.client.requests.post")
    def test_get_updates_pads_timeout(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(200, {"ok": True, "result": []})

        Snake4DClient("https://api.example.com").get_updates(offset=11, timeout=30)
        _, kwargs = mock_post.call_args
        assert kwargs["json"] == {"timeout": 30, "offset": 11}
        assert kwargs["timeout"] == 35

    @patch("sdk.client.requests.post")
    def test_delete_webhook(self, mock_post: MagicMock) -> None:
        mock_post.return_value = _response(200, {"ok": True, "result": True})

        Snake4DClient("https://api.example.com").delete_webhook()
        args, kwargs = mock_post.call_args
        assert args[0].endswith("/deleteWebhook")
        assert kwargs["json"] == {}
