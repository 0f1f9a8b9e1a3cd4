"""Record descriptors built from type annotations."""

from __future__ import annotations

import collections.abc
import dataclasses
import types
import typing
from typing import Any, Union

from pydantic import BaseModel

from jsonapi_marshal.core.errors import ProgrammerError
from jsonapi_marshal.schemas.fields import (
    FieldDescriptor,
    FieldKind,
    RecordDescriptor,
    identifier_attribute,
    type_name_for,
)
from jsonapi_marshal.sqlalchemy.descriptor import describe_mapped, is_mapped_class
from jsonapi_marshal.utils.inflection import jsonify

_NOT_A_SEQUENCE = object()
_SEQUENCE_ORIGINS = (list, tuple, set, frozenset)


def is_record_type(annotation: Any) -> bool:
    """Return True for dataclasses, pydantic models and mapped classes."""
    if typing.get_origin(annotation) is not None or not isinstance(annotation, type):
        return False
    return (
        dataclasses.is_dataclass(annotation)
        or issubclass(annotation, BaseModel)
        or is_mapped_class(annotation)
    )


def describe(model: Any, *, id_list_suffix: str = "_ids") -> RecordDescriptor:
    """Return the descriptor for a record type.

    Raises:
        ProgrammerError: ``model`` is not a dataclass, pydantic model or
            SQLAlchemy mapped class, or its annotations cannot be resolved.
    """
    if not is_record_type(model):
        raise ProgrammerError(
            f"{model!r} is not a record type; use a dataclass, a pydantic model "
            "or a SQLAlchemy mapped class"
        )
    if is_mapped_class(model):
        return describe_mapped(model)

    fields = tuple(
        classify_field(name, annotation, id_list_suffix=id_list_suffix)
        for name, annotation in _annotations(model)
    )
    return RecordDescriptor(
        model=model,
        type_name=type_name_for(model),
        fields=fields,
        id_attribute=identifier_attribute(fields),
    )


def classify_field(name: str, annotation: Any, *, id_list_suffix: str) -> FieldDescriptor:
    """Classify one annotated field.

    Sequences are checked first, then the identifier key, then nested records;
    everything else is a plain attribute.
    """
    key = jsonify(name)
    annotation = _unwrap_optional(annotation)

    item = _sequence_item(annotation)
    if item is not _NOT_A_SEQUENCE:
        item = _unwrap_optional(item)
        if is_record_type(item):
            return FieldDescriptor(name=name, key=key, kind=FieldKind.TO_MANY, target=item)
        if id_list_suffix and key.endswith(id_list_suffix):
            key = key[: -len(id_list_suffix)]
        return FieldDescriptor(name=name, key=key, kind=FieldKind.ID_LIST)

    if key == "id":
        return FieldDescriptor(name=name, key=key, kind=FieldKind.IDENTIFIER)
    if is_record_type(annotation):
        return FieldDescriptor(name=name, key=key, kind=FieldKind.TO_ONE, target=annotation)
    return FieldDescriptor(name=name, key=key, kind=FieldKind.ATTRIBUTE)


def _annotations(model: type) -> list[tuple[str, Any]]:
    if issubclass(model, BaseModel):
        return [(name, info.annotation) for name, info in model.model_fields.items()]
    try:
        hints = typing.get_type_hints(model)
    except NameError as exc:
        raise ProgrammerError(f"cannot resolve annotations of {model.__name__}: {exc}") from exc
    return [(field.name, hints.get(field.name, Any)) for field in dataclasses.fields(model)]


def _unwrap_optional(annotation: Any) -> Any:
    origin = typing.get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _sequence_item(annotation: Any) -> Any:
    """Return the item type of a sequence annotation.

    Returns ``_NOT_A_SEQUENCE`` for non-sequences and ``Any`` for sequences
    without a parameter.
    """
    origin = typing.get_origin(annotation)
    if origin is None:
        origin = annotation
    if not isinstance(origin, type) or issubclass(origin, (str, bytes, bytearray)):
        return _NOT_A_SEQUENCE
    if not (
        origin in _SEQUENCE_ORIGINS
        or issubclass(origin, (collections.abc.Sequence, collections.abc.Set))
    ):
        return _NOT_A_SEQUENCE
    args = typing.get_args(annotation)
    if not args:
        return Any
    return args[0]
