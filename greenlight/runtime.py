"""Movie runtime in minutes, carried in JSON as a "<n> mins" string."""

from __future__ import annotations

import re
from typing import Any

_OCTAL_RX = re.compile(r"([+-]?)0(_?[0-7][0-7_]*)")


class InvalidRuntimeFormatError(ValueError):
    """Raised when a runtime value is not of the form "<n> mins"."""

    def __init__(self, message: str = "invalid runtime format") -> None:
        super().__init__(message)


class Runtime(int):
    """A runtime in whole minutes."""

    def to_json(self) -> str:
        """Return the JSON string value, e.g. "102 mins"."""
        return f"{int(self)} mins"


def _parse_int32(text: str) -> int:
    if text.strip() != text:
        raise ValueError(text)
    octal = _OCTAL_RX.fullmatch(text)
    number = int(f"{octal[1]}0o{octal[2]}", 0) if octal else int(text, 0)
    if not -(2**31) <= number < 2**31:
        raise ValueError(text)
    return number


def parse_runtime(value: Any) -> Runtime:
    """Parse a decoded JSON value of the form "<n> mins" into a Runtime."""
    parts = value.split(" ") if isinstance(value, str) else []
    if len(parts) != 2 or parts[1] != "mins":
        raise InvalidRuntimeFormatError()
    try:
        return Runtime(_parse_int32(parts[0]))
    except ValueError:
        raise InvalidRuntimeFormatError() from None