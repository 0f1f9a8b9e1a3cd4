"""Unit tests for the marshaled document builder."""

from jsonapi_marshal.core.document import MarshalDocumentBuilder


def test_empty_builder_has_only_root() -> None:
    assert MarshalDocumentBuilder("posts").build() == {"posts": []}


def test_root_values_are_never_deduplicated() -> None:
    builder = MarshalDocumentBuilder("posts")
    builder.add_value("posts", {"id": "1"}, is_root=True)
    builder.add_value("posts", {"id": "1"}, is_root=True)
    assert builder.build() == {"posts": [{"id": "1"}, {"id": "1"}]}


def test_root_deduplication_can_be_enabled() -> None:
    builder = MarshalDocumentBuilder("posts", dedupe_root=True)
    builder.add_value("posts", {"id": "1", "title": "first"}, is_root=True)
    builder.add_value("posts", {"id": "1", "title": "again"}, is_root=True)
    builder.add_value("posts", {"id": "2"}, is_root=True)
    assert builder.build() == {"posts": [{"id": "1", "title": "first"}, {"id": "2"}]}


def test_linked_values_are_deduplicated_per_type() -> None:
    builder = MarshalDocumentBuilder("posts")
    builder.add_value("comments", {"id": "1", "text": "a"}, is_root=False)
    builder.add_value("people", {"id": "1"}, is_root=False)
    builder.add_value("comments", {"id": "1", "text": "b"}, is_root=False)
    builder.add_value("comments", {"id": "2", "text": "c"}, is_root=False)
    assert builder.build() == {
        "posts": [],
        "linked": {
            "comments": [{"id": "1", "text": "a"}, {"id": "2", "text": "c"}],
            "people": [{"id": "1"}],
        },
    }


def test_root_flag_decides_placement_not_name() -> None:
    builder = MarshalDocumentBuilder("posts")
    builder.add_value("posts", {"id": "9"}, is_root=False)
    assert builder.build() == {"posts": [], "linked": {"posts": [{"id": "9"}]}}


def test_custom_linked_key() -> None:
    builder = MarshalDocumentBuilder("posts", linked_key="included")
    builder.add_value("comments", {"id": "1"}, is_root=False)
    assert builder.build() == {"posts": [], "included": {"comments": [{"id": "1"}]}}


def test_root_deduplication_ignores_linked_resources_sharing_the_root_name() -> None:
    builder = MarshalDocumentBuilder("items", dedupe_root=True)
    builder.add_value("items", {"id": "1", "kind": "folder"}, is_root=False)
    builder.add_value("items", {"id": "1", "kind": "item"}, is_root=True)
    assert builder.build() == {
        "items": [{"id": "1", "kind": "item"}],
        "linked": {"items": [{"id": "1", "kind": "folder"}]},
    }
