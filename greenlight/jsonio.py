"""Reading and writing JSON request and response bodies."""

from __future__ import annotations

import json
import re
from collections.abc import Callable, Mapping
from typing import Any

from werkzeug.wrappers import Response

MAX_BODY_BYTES = 1_048_576
INVALID_ID = "invalid id parameter"

_WS = " \t\n\r"
_ID_RX = re.compile(r"[+-]?[0-9]+\Z")
_HTML_ESCAPES = str.maketrans(
    {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026", "\u2028": "\\u2028", "\u2029": "\\u2029"}
)


class JSONBodyError(ValueError):
    """Raised when a request body cannot be decoded into the expected fields."""


def write_json(status: int, data: Mapping[str, Any], headers=None) -> Response:
    """Build a response holding ``data`` as tab-indented JSON with a trailing newline."""
    payload = json.dumps(dict(sorted(data.items())), indent="\t", ensure_ascii=False)
    response = Response(payload.translate(_HTML_ESCAPES) + "\n", status=status)
    for key, value in (headers or {}).items():
        response.headers.setlist(key, list(value) if isinstance(value, (list, tuple)) else [value])
    response.headers["Content-Type"] = "application/json"
    return response


def _convert(obj: dict[str, Any], fields: Mapping[str, Callable[[Any], Any]]) -> dict[str, Any]:
    folded = {name.lower(): name for name in fields}
    result: dict[str, Any] = {}
    for key, raw in obj.items():
        name = key if key in fields else folded.get(key.lower())
        if name is None:
            raise JSONBodyError(f"body contains unknown filed: {json.dumps(key, ensure_ascii=False)}")
        try:
            result[name] = fields[name](raw)
        except TypeError:
            raise JSONBodyError(f'body contains incorrect json type for field "{name}"') from None
        except ValueError as exc:
            raise JSONBodyError(str(exc)) from None
    return result


def read_json(body: bytes | str, fields: Mapping[str, Callable[[Any], Any]]) -> dict[str, Any]:
    """Decode a single JSON object from ``body`` into the named ``fields``.

    Keys match case-insensitively; each converter raises TypeError for a value
    of the wrong JSON type or ValueError with a message for a malformed one.
    """
    if len(body) > MAX_BODY_BYTES:
        raise JSONBodyError(f"body must not be large than {MAX_BODY_BYTES} bytes")
    text = body.decode("utf-8", errors="replace") if isinstance(body, (bytes, bytearray)) else body
    start = len(text) - len(text.lstrip(_WS))
    if start == len(text):
        raise JSONBodyError("body must not be empty")
    try:
        value, end = json.JSONDecoder().raw_decode(text, start)
    except json.JSONDecodeError as exc:
        if exc.msg.startswith("Unterminated string") or not text[exc.pos:].strip(_WS):
            raise JSONBodyError("unexpected EOF") from None
        raise JSONBodyError(f"body contains badly-formed json(at character {exc.pos + 1})") from None
    if not isinstance(value, dict):
        raise JSONBodyError(f"body contains incorrect json type(at character {end})")
    result = _convert(value, fields)
    if text[end:].strip(_WS):
        raise JSONBodyError("body must only contain a single Json value")
    return result


def read_id_param(value: str | None) -> int:
    """Parse a positive decimal id from a URL parameter."""
    if value is None or not _ID_RX.match(value) or not 1 <= int(value) < 2**63:
        raise ValueError(INVALID_ID)
    return int(value)