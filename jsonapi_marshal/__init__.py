"""Marshal records into JSON:API-style documents."""

from .config import MarshalSettings, configure_logging, load_settings
from .core.document import MarshalDocumentBuilder
from .core.errors import (
    InvalidIdentifierError,
    JSONAPIErrorBuilder,
    MarshalError,
    ProgrammerError,
)
from .core.ids import to_id
from .marshal import marshal, marshal_to_json
from .serializers.base import ResourceSerializer

__all__ = [
    "InvalidIdentifierError",
    "JSONAPIErrorBuilder",
    "MarshalDocumentBuilder",
    "MarshalError",
    "MarshalSettings",
    "ProgrammerError",
    "ResourceSerializer",
    "configure_logging",
    "load_settings",
    "marshal",
    "marshal_to_json",
    "to_id",
]
