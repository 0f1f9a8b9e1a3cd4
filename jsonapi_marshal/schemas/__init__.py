"""Record descriptors for JSON:API marshaling."""

from .descriptor import classify_field, describe, is_record_type
from .fields import FieldDescriptor, FieldKind, RecordDescriptor, type_name_for

__all__ = [
    "FieldDescriptor",
    "FieldKind",
    "RecordDescriptor",
    "classify_field",
    "describe",
    "is_record_type",
    "type_name_for",
]
