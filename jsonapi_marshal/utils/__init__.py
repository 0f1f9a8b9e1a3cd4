"""String helpers for wire-format keys."""

from .inflection import jsonify, pluralize

__all__ = ["jsonify", "pluralize"]
