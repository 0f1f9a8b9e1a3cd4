"""Marshal records into JSON:API-style documents."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from fastapi.encoders import jsonable_encoder

from jsonapi_marshal.config import MarshalSettings
from jsonapi_marshal.core.document import MarshalDocumentBuilder
from jsonapi_marshal.core.errors import ProgrammerError
from jsonapi_marshal.schemas.descriptor import describe
from jsonapi_marshal.serializers.base import ResourceSerializer

logger = logging.getLogger(__name__)


def marshal(
    data: Any,
    *,
    model: type | None = None,
    settings: MarshalSettings | None = None,
) -> dict[str, Any]:
    """Marshal one record or a sequence of records into a document tree.

    Args:
        data: A record (dataclass, pydantic model or SQLAlchemy mapped
            instance) or a sequence of records of one type.
        model: The root record type. Required for empty sequences; otherwise
            inferred from ``data``.
        settings: Marshaling settings; defaults to ``MarshalSettings()``.

    Returns:
        ``{<root name>: [resource, ...], "linked": {<type name>: [...]}}``
        with ``"linked"`` omitted when no related resources were found.

    Raises:
        ProgrammerError: ``data`` is None, or the root type cannot be
            determined, or an element is not an instance of the root type.
        InvalidIdentifierError: An identifier is neither an int nor a str.
    """
    if data is None:
        raise ProgrammerError("None passed to marshal")

    settings = settings or MarshalSettings()
    is_sequence = isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray))
    items = list(data) if is_sequence else [data]
    root_model = model or _infer_root_model(items, is_sequence=is_sequence)

    for item in items:
        if not isinstance(item, root_model):
            raise ProgrammerError(
                f"cannot marshal {type(item).__name__} as {root_model.__name__}"
            )

    root_descriptor = describe(root_model, id_list_suffix=settings.id_list_suffix)
    builder = MarshalDocumentBuilder(
        root_descriptor.type_name,
        linked_key=settings.linked_key,
        dedupe_root=settings.dedupe_root,
    )
    serializer = ResourceSerializer(builder, root_model=root_model, settings=settings)
    logger.debug("Marshaling %d %s record(s)", len(items), root_descriptor.type_name)
    for item in items:
        serializer.serialize(item, root_model)
    return builder.build()


def marshal_to_json(data: Any, **kwargs: Any) -> bytes:
    """Marshal ``data`` and encode the document as UTF-8 JSON."""
    document = marshal(data, **kwargs)
    return json.dumps(jsonable_encoder(document), ensure_ascii=False).encode("utf-8")


def _infer_root_model(items: list[Any], *, is_sequence: bool) -> type:
    if not is_sequence:
        return type(items[0])
    models = {type(item) for item in items}
    if len(models) != 1:
        # Empty or mixed sequences carry no usable type name.
        raise ProgrammerError(
            "cannot determine the root type of this sequence; "
            "pass a non-empty sequence of one record type or model=YourRecord"
        )
    return models.pop()
