"""Marshaled document construction."""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


class MarshalDocumentBuilder:
    """Accumulate marshaled resources into a root list and a linked map.

    One builder belongs to exactly one ``marshal`` call. Root resources are
    appended in submission order; linked resources are bucketed by type name
    and deduplicated by ``id`` in first-seen order.
    """

    def __init__(
        self,
        root_name: str,
        *,
        linked_key: str = "linked",
        dedupe_root: bool = False,
    ) -> None:
        self.root_name = root_name
        self.linked_key = linked_key
        self.dedupe_root = dedupe_root
        self._root: list[dict[str, Any]] = []
        self._linked: dict[str, list[dict[str, Any]]] | None = None
        self._root_seen: set[Any] = set()
        self._seen: dict[str, set[Any]] = {}

    def add_value(self, name: str, resource: dict[str, Any], *, is_root: bool) -> None:
        """Add one resource under ``name``."""
        if is_root:
            if self.dedupe_root and _mark_seen(self._root_seen, resource):
                return
            self._root.append(resource)
            return

        if self._linked is None:
            self._linked = {}
        bucket = self._linked.setdefault(name, [])
        if _mark_seen(self._seen.setdefault(name, set()), resource):
            logger.debug("Skipping already linked %s/%s", name, resource.get("id"))
            return
        bucket.append(resource)

    def build(self) -> dict[str, Any]:
        """Return the document tree."""
        document: dict[str, Any] = {self.root_name: self._root}
        if self._linked is not None:
            document[self.linked_key] = self._linked
        return document


def _mark_seen(seen: set[Any], resource: dict[str, Any]) -> bool:
    """Record the resource id in ``seen``; return True if it was already there."""
    resource_id = resource.get("id")
    if resource_id in seen:
        return True
    seen.add(resource_id)
    return False
