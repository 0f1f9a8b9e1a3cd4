"""Core marshaling helpers: identifiers, documents and errors."""

from .document import MarshalDocumentBuilder
from .errors import (
    InvalidIdentifierError,
    JSONAPIErrorBuilder,
    MarshalError,
    ProgrammerError,
)
from .ids import is_zero_id, to_id

__all__ = [
    "InvalidIdentifierError",
    "JSONAPIErrorBuilder",
    "MarshalDocumentBuilder",
    "MarshalError",
    "ProgrammerError",
    "is_zero_id",
    "to_id",
]
