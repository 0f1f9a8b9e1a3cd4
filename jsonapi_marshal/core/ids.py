"""Identifier conversion rules."""

from __future__ import annotations

import numbers
from typing import Any

from .errors import InvalidIdentifierError


def to_id(value: Any) -> str:
    """Return the canonical string form of an identifier value.

    Integers of any width become their base-10 representation and strings are
    returned unchanged. Booleans, floats and everything else raise
    ``InvalidIdentifierError``.
    """
    if isinstance(value, bool):
        raise InvalidIdentifierError(value)
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, str):
        return value
    raise InvalidIdentifierError(value)


def is_zero_id(value: Any) -> bool:
    """Return True if ``value`` is the zero value of its identifier kind.

    Both ``""`` and ``"0"`` count as zero for string identifiers, so a to-one
    link to a record with an empty string id is omitted rather than recorded
    as ``""``.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return int(value) == 0
    if isinstance(value, str):
        return value in ("", "0")
    return False
