"""JSON:API error handling middleware."""

import logging
from typing import Any

from starlette.responses import JSONResponse

from jsonapi_marshal.core.errors import InvalidIdentifierError, JSONAPIErrorBuilder

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Convert marshaling failures into JSON:API error documents."""

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.error_builder = JSONAPIErrorBuilder()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions and serialize JSON:API error documents."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        try:
            await self.app(scope, receive, send)
        except InvalidIdentifierError as exc:
            logger.warning("Rejected resource with invalid identifier: %s", exc)
            await self._respond(exc, 422, scope, receive, send)
        except Exception as exc:  # noqa: BLE001 - last-resort handler
            logger.exception("Unhandled error while building a JSON:API response")
            await self._respond(exc, 500, scope, receive, send)

    async def _respond(
        self, exc: Exception, status_code: int, scope: dict[str, Any], receive: Any, send: Any
    ) -> None:
        error = self.error_builder.error_from_exception(exc)
        response = JSONResponse(
            self.error_builder.error_document([error]),
            status_code=status_code,
            media_type="application/vnd.api+json",
        )
        await response(scope, receive, send)
