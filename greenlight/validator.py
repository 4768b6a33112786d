"""Collecting per-field validation errors and a few reusable checks."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

EMAIL_RX = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+\/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\. [a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*\Z"
)


@dataclass
class Validator:
    """Holds the first error message recorded for each field."""

    field_errors: dict[str, str] = field(default_factory=dict)

    def valid(self) -> bool:
        """Return True when no field errors have been recorded."""
        return not self.field_errors

    def add_field_error(self, key: str, message: str) -> None:
        """Record an error for ``key`` unless one is already present."""
        self.field_errors.setdefault(key, message)

    def check(self, ok: bool, key: str, message: str) -> None:
        """Record ``message`` for ``key`` when ``ok`` is false."""
        if not ok:
            self.add_field_error(key, message)


def is_in(value: str, *args: str) -> bool:
    """Return True if ``value`` equals one of ``args``."""
    return value in args


def matches(value: str, pattern: re.Pattern[str] | str) -> bool:
    """Return True if ``pattern`` matches somewhere in ``value``."""
    return re.search(pattern, value) is not None


def unique(values: Iterable[str]) -> bool:
    """Return True if no value occurs more than once."""
    items = list(values)
    return len(items) == len(set(items))