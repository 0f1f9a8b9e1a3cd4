"""Record serializer that walks one record into marshaled resources."""

from __future__ import annotations

from typing import Any

from jsonapi_marshal.config import MarshalSettings
from jsonapi_marshal.core.document import MarshalDocumentBuilder
from jsonapi_marshal.core.ids import is_zero_id, to_id
from jsonapi_marshal.schemas.descriptor import describe
from jsonapi_marshal.schemas.fields import FieldKind, RecordDescriptor


class ResourceSerializer:
    """Serialize records into resources and submit them to a document builder.

    A serializer is bound to one builder and one root type for the lifetime
    of a single ``marshal`` call. Descriptors are memoized per instance only.
    """

    def __init__(
        self,
        builder: MarshalDocumentBuilder,
        *,
        root_model: type,
        settings: MarshalSettings | None = None,
    ) -> None:
        self.builder = builder
        self.root_model = root_model
        self.settings = settings or MarshalSettings()
        self._descriptors: dict[type, RecordDescriptor] = {}

    def get_descriptor(self, model: type) -> RecordDescriptor:
        """Return the (memoized) descriptor for ``model``."""
        descriptor = self._descriptors.get(model)
        if descriptor is None:
            descriptor = describe(model, id_list_suffix=self.settings.id_list_suffix)
            self._descriptors[model] = descriptor
        return descriptor

    def serialize(self, instance: Any, model: type) -> None:
        """Marshal ``instance`` as a ``model`` and submit it to the builder."""
        descriptor = self.get_descriptor(model)
        resource = self.to_resource(instance, descriptor)
        self.builder.add_value(
            descriptor.type_name,
            resource,
            is_root=descriptor.model is self.root_model,
        )

    def to_resource(self, instance: Any, descriptor: RecordDescriptor) -> dict[str, Any]:
        """Return the resource for ``instance``, recursing into to-many records."""
        resource: dict[str, Any] = {}
        links: dict[str, Any] = {}

        for field in descriptor.fields:
            value = field.value(instance)

            if field.kind is FieldKind.TO_MANY:
                if value is None:
                    continue
                target = self.get_descriptor(field.target)
                ids: list[str] = []
                for item in value:
                    if item is None:
                        continue
                    ids.append(to_id(target.get_id(item)))
                    self.serialize(item, field.target)
                links[field.key] = ids

            elif field.kind is FieldKind.ID_LIST:
                if value is None:
                    continue
                # Links collected from nested records take precedence.
                existing = links.get(field.key)
                if existing is None or existing == []:
                    links[field.key] = [to_id(item) for item in value]

            elif field.kind is FieldKind.IDENTIFIER:
                resource["id"] = to_id(value)

            elif field.kind is FieldKind.TO_ONE:
                if value is None:
                    continue
                target = self.get_descriptor(field.target)
                if not target.has_identifier:
                    continue
                raw_id = target.get_id(value)
                related_id = to_id(raw_id)
                if is_zero_id(raw_id):
                    continue
                links[field.key] = related_id

            else:
                resource[field.key] = value

        if links:
            resource[self.settings.links_key] = links
        return resource
