"""Record descriptor types shared by every record kind."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable

from jsonapi_marshal.core.errors import ProgrammerError
from jsonapi_marshal.utils.inflection import jsonify, pluralize


class FieldKind(enum.Enum):
    """How a record field is marshaled."""

    IDENTIFIER = "identifier"
    ATTRIBUTE = "attribute"
    TO_ONE = "to_one"
    TO_MANY = "to_many"
    ID_LIST = "id_list"


@dataclass(frozen=True)
class FieldDescriptor:
    """One classified record field."""

    name: str
    key: str
    kind: FieldKind
    target: type | None = None
    getter: Callable[[Any], Any] | None = None

    def value(self, instance: Any) -> Any:
        """Return the field value read from ``instance``."""
        if self.getter is not None:
            return self.getter(instance)
        return getattr(instance, self.name)


@dataclass(frozen=True)
class RecordDescriptor:
    """Explicit marshaling description of one record type."""

    model: type
    type_name: str
    fields: tuple[FieldDescriptor, ...]
    id_attribute: str | None = None

    @property
    def has_identifier(self) -> bool:
        return self.id_attribute is not None

    def get_id(self, instance: Any) -> Any:
        """Return the raw identifier value of ``instance``."""
        if self.id_attribute is None:
            raise ProgrammerError(
                f"{self.model.__name__} is used as a related record but has no id field"
            )
        return getattr(instance, self.id_attribute)


def type_name_for(model: type) -> str:
    """Return the pluralized wire name of a record type.

    A ``JSONAPIMeta`` inner class with a ``type_`` attribute overrides the
    name derived from the class name.
    """
    meta = getattr(model, "JSONAPIMeta", None)
    type_ = getattr(meta, "type_", "") if meta is not None else ""
    return type_ or pluralize(jsonify(model.__name__))


def identifier_attribute(fields: tuple[FieldDescriptor, ...]) -> str | None:
    for field in fields:
        if field.kind is FieldKind.IDENTIFIER:
            return field.name
    return None
