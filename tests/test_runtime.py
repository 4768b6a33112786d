import json

import pytest

from greenlight.runtime import InvalidRuntimeFormatError, Runtime, parse_runtime


def test_to_json_format():
    assert Runtime(102).to_json() == "102 mins"


def test_to_json_encodes_as_json_string():
    assert json.dumps(Runtime(102).to_json()) == '"102 mins"'


@pytest.mark.parametrize("minutes", [0, 1, 102, -5, 2147483647, -2147483648])
def test_round_trip(minutes):
    parsed = parse_runtime(Runtime(minutes).to_json())
    assert parsed == minutes
    assert isinstance(parsed, Runtime)


def test_parse_accepts_base_prefixes():
    assert parse_runtime("0x1f mins") == 0x1F
    assert parse_runtime("017 mins") == 0o17
    assert parse_runtime("0b101 mins") == 0b101


def test_parse_accepts_plus_sign():
    assert parse_runtime("+42 mins") == parse_runtime("42 mins")


@pytest.mark.parametrize(
    "value",
    [
        102,
        None,
        ["102 mins"],
        "102",
        "102 minutes",
        "102  mins",
        " 102 mins",
        "102 mins ",
        "abc mins",
        " mins",
        "1.5 mins",
        "2147483648 mins",
        "-2147483649 mins",
        "--5 mins",
        "0x mins",
        "09 mins",
    ],
)
def test_parse_rejects(value):
    with pytest.raises(InvalidRuntimeFormatError):
        parse_runtime(value)


def test_error_message_and_type():
    with pytest.raises(ValueError, match="invalid runtime format"):
        parse_runtime("ten mins")