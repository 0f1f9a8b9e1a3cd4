"""Unit tests for identifier conversion."""

import pytest

from jsonapi_marshal.core.errors import InvalidIdentifierError
from jsonapi_marshal.core.ids import is_zero_id, to_id


class UInt8(int):
    """Fixed-width unsigned integer stand-in."""


def test_int_identifier_is_base10() -> None:
    assert to_id(7) == "7"
    assert to_id(-12) == "-12"


def test_unsigned_identifier_is_base10() -> None:
    assert to_id(UInt8(7)) == "7"


def test_string_identifier_is_unchanged() -> None:
    assert to_id("abc") == "abc"
    assert to_id("") == ""


@pytest.mark.parametrize("value", [7.0, True, None, b"7", [7]])
def test_unsupported_identifier_raises_value_error(value: object) -> None:
    with pytest.raises(ValueError, match="unsupported identifier type"):
        to_id(value)


def test_invalid_identifier_error_keeps_value() -> None:
    with pytest.raises(InvalidIdentifierError) as excinfo:
        to_id(1.5)
    assert excinfo.value.value == 1.5


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0, True), (UInt8(0), True), ("0", True), ("", True), (1, False), ("a", False), (False, False)],
)
def test_is_zero_id(value: object, expected: bool) -> None:
    assert is_zero_id(value) is expected
