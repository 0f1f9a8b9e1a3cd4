"""Record descriptors for SQLAlchemy mapped classes."""

from __future__ import annotations

from typing import Any, Callable

from sqlalchemy.inspection import inspect
from sqlalchemy.orm import ColumnProperty, RelationshipProperty

from jsonapi_marshal.schemas.fields import (
    FieldDescriptor,
    FieldKind,
    RecordDescriptor,
    identifier_attribute,
    type_name_for,
)
from jsonapi_marshal.utils.inflection import jsonify


def is_mapped_class(model: Any) -> bool:
    """Return True if ``model`` is a SQLAlchemy mapped class."""
    return isinstance(model, type) and inspect(model, raiseerr=False) is not None


def describe_mapped(model: type) -> RecordDescriptor:
    """Describe a mapped class from its mapper.

    Relationships with ``uselist`` are to-many, other relationships are to-one,
    the ``id`` column is the identifier and every other column is an attribute.
    """
    mapper = inspect(model)
    fields: list[FieldDescriptor] = []
    for prop in sorted(mapper.attrs, key=_declaration_position):
        key = jsonify(prop.key)
        if isinstance(prop, RelationshipProperty):
            fields.append(
                FieldDescriptor(
                    name=prop.key,
                    key=key,
                    kind=FieldKind.TO_MANY if prop.uselist else FieldKind.TO_ONE,
                    target=prop.mapper.class_,
                    getter=_loaded_relationship(prop.key),
                )
            )
        elif isinstance(prop, ColumnProperty):
            kind = FieldKind.IDENTIFIER if key == "id" else FieldKind.ATTRIBUTE
            fields.append(FieldDescriptor(name=prop.key, key=key, kind=kind))
        # synonyms and composites mirror columns already listed

    frozen = tuple(fields)
    return RecordDescriptor(
        model=model,
        type_name=type_name_for(model),
        fields=frozen,
        id_attribute=identifier_attribute(frozen),
    )


def _declaration_position(prop: Any) -> int:
    # Columns and relationship() objects are stamped with a creation counter
    # when the class body runs; mapper.attrs lists relationships first.
    if isinstance(prop, ColumnProperty) and prop.columns:
        return getattr(prop.columns[0], "_creation_order", 0)
    return getattr(prop, "_creation_order", 0)


def _loaded_relationship(key: str) -> Callable[[Any], Any]:
    # Unloaded relationships read as absent so marshaling never emits SQL.
    def getter(instance: Any) -> Any:
        if key in inspect(instance).unloaded:
            return None
        return getattr(instance, key)

    return getter
