"""Record serializers for JSON:API marshaling."""

from .base import ResourceSerializer

__all__ = ["ResourceSerializer"]
