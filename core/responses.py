"""HTTP response envelopes returned to the inbound caller.

Every envelope carries the CORS header set, whether it reports success or
failure.  Error bodies always have the shape
``{"success": false, "error": <message>}``.
"""

import dataclasses
import json
from typing import Any, Dict, Optional

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "OPTIONS,POST",
}


@dataclasses.dataclass(frozen=True)
class ResponseEnvelope:
    """Status, headers and body of one HTTP response."""

    status_code: int
    headers: Dict[str, str]
    body: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Render as an API Gateway proxy response."""
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }


def build_response(
    status_code: int,
    body: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> ResponseEnvelope:
    """Build an envelope with a JSON body (or an empty one when *body* is None).

    Caller-supplied *headers* are applied first; the CORS set is merged on
    top so it can never be dropped.
    """
    merged: Dict[str, str] = {"Content-Type": "application/json"}
    if headers:
        merged.update(headers)
    merged.update(CORS_HEADERS)
    text = json.dumps(body) if body is not None else ""
    return ResponseEnvelope(status_code=status_code, headers=merged, body=text)


def text_response(status_code: int, text: str) -> ResponseEnvelope:
    """Build a plain-text envelope (used by the webhook surface)."""
    envelope = build_response(status_code, headers={"Content-Type": "text/plain; charset=utf-8"})
    return dataclasses.replace(envelope, body=text)


def error_response(status_code: int, message: str) -> ResponseEnvelope:
    """Build ``{"success": false, "error": message}``."""
    return build_response(status_code, {"success": False, "error": message})


def success_response() -> ResponseEnvelope:
    """Build ``200 {"success": true}``."""
    return build_response(200, {"success": True})
