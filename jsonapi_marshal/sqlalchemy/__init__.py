"""SQLAlchemy helpers for JSON:API marshaling."""

from .descriptor import describe_mapped, is_mapped_class

__all__ = ["describe_mapped", "is_mapped_class"]
