import re

import pytest

from greenlight.validator import EMAIL_RX, Validator, is_in, matches, unique


def test_new_validator_is_valid():
    v = Validator()
    assert v.valid() is True
    assert v.field_errors == {}


def test_add_field_error_keeps_first_message():
    v = Validator()
    v.add_field_error("title", "must be provided")
    v.add_field_error("title", "must not be more than 500 bytes long")
    assert v.field_errors == {"title": "must be provided"}
    assert v.valid() is False


def test_check_records_only_failures():
    v = Validator()
    v.check(True, "year", "must be provided")
    assert v.valid() is True
    v.check(False, "year", "must be provided")
    assert v.field_errors == {"year": "must be provided"}


def test_check_multiple_fields():
    v = Validator()
    v.check(False, "a", "first")
    v.check(False, "b", "second")
    v.check(False, "a", "third")
    assert v.field_errors == {"a": "first", "b": "second"}


@pytest.mark.parametrize(
    "value, options, expected",
    [
        ("development", ("development", "production"), True),
        ("production", ("development", "production"), True),
        ("staging", ("development", "production"), False),
        ("x", (), False),
    ],
)
def test_is_in(value, options, expected):
    assert is_in(value, *options) is expected


@pytest.mark.parametrize(
    "values, expected",
    [
        ([], True),
        (["drama"], True),
        (["drama", "romance", "war"], True),
        (["drama", "war", "drama"], False),
    ],
)
def test_unique(values, expected):
    assert unique(values) is expected


def test_unique_accepts_generator():
    assert unique(g for g in ["a", "b", "a"]) is False


def test_matches_with_compiled_and_string_patterns():
    assert matches("abc123", re.compile(r"^[a-z]+\d+$")) is True
    assert matches("abc", r"\d") is False


def test_email_regex_accepts_single_label_domain():
    assert matches("alice@localhost", EMAIL_RX) is True


@pytest.mark.parametrize(
    "value", ["not-an-email", "@localhost", "alice@", "alice@localhost\n", "alice@-bad"]
)
def test_email_regex_rejects(value):
    assert matches(value, EMAIL_RX) is False