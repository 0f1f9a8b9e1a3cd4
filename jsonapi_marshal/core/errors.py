"""Marshaling exceptions and JSON:API error object helpers."""

from typing import Any


class MarshalError(Exception):
    """Base class for every error raised while marshaling."""


class ProgrammerError(MarshalError, TypeError):
    """Caller-side type contract violation (not a data problem)."""


class InvalidIdentifierError(MarshalError, ValueError):
    """Identifier value is neither an integer nor a string."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"unsupported identifier type {type(value).__name__!r}: need int or string"
        )


class JSONAPIErrorBuilder:
    """Build JSON:API error objects and error documents."""

    def error_object(
        self,
        *,
        status: str | None = None,
        code: str | None = None,
        title: str | None = None,
        detail: str | None = None,
        source: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API error object."""
        error: dict[str, Any] = {}
        if status is not None:
            error["status"] = status
        if code is not None:
            error["code"] = code
        if title is not None:
            error["title"] = title
        if detail is not None:
            error["detail"] = detail
        if source is not None:
            error["source"] = source
        if meta is not None:
            error["meta"] = meta
        if not error:
            raise ValueError("Error object must include at least one field.")
        return error

    def error_from_exception(self, exc: Exception) -> dict[str, Any]:
        """Return an error object describing a marshaling failure."""
        if isinstance(exc, InvalidIdentifierError):
            return self.error_object(
                status="422",
                code="invalid_identifier",
                title="Invalid resource identifier",
                detail=str(exc),
            )
        return self.error_object(
            status="500",
            title="Internal Server Error",
            detail=str(exc),
        )

    def error_document(self, errors: list[dict[str, Any]]) -> dict[str, Any]:
        """Return a JSON:API document with an errors array."""
        return {"errors": errors}
