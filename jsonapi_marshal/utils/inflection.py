"""Key naming and pluralization helpers for wire-format keys."""

from __future__ import annotations

import re

_ACRONYM_PLURAL = re.compile(r"([A-Z]+)s(?=[A-Z_]|$)")
_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")

_IRREGULAR_PLURALS: dict[str, str] = {
    "child": "children",
    "foot": "feet",
    "man": "men",
    "mouse": "mice",
    "person": "people",
    "tooth": "teeth",
    "woman": "women",
}

_UNCOUNTABLE: frozenset[str] = frozenset(
    {"data", "equipment", "information", "media", "metadata", "news", "series", "species"}
)


def jsonify(name: str) -> str:
    """Return the wire-format key for a field or type name.

    ``"BlogPost"`` -> ``"blog_post"``, ``"ID"`` -> ``"id"``,
    ``"CommentIDs"`` -> ``"comment_ids"``, ``"author_name"`` is unchanged.
    """
    name = _ACRONYM_PLURAL.sub(lambda match: match.group(1).capitalize() + "s", name)
    return _WORD_BOUNDARY.sub("_", name).lower()


def pluralize(word: str) -> str:
    """Return the English plural of the last word of a snake_case key."""
    if not word:
        return word
    head, sep, last = word.rpartition("_")
    return f"{head}{sep}{_pluralize_word(last)}"


def _pluralize_word(word: str) -> str:
    if not word or word in _UNCOUNTABLE:
        return word
    if word in _IRREGULAR_PLURALS:
        return _IRREGULAR_PLURALS[word]
    if word.endswith(("s", "x", "z", "ch", "sh")):
        return f"{word}es"
    if word.endswith("y") and len(word) > 1 and word[-2] not in "aeiou":
        return f"{word[:-1]}ies"
    return f"{word}s"
