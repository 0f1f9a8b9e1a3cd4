"""Starlette response that marshals its content."""

from __future__ import annotations

from typing import Any

from starlette.background import BackgroundTask
from starlette.responses import JSONResponse

from jsonapi_marshal.config import MarshalSettings
from jsonapi_marshal.marshal import marshal_to_json


class JSONAPIResponse(JSONResponse):
    """Render records as a marshaled JSON:API document."""

    media_type = "application/vnd.api+json"

    def __init__(
        self,
        content: Any,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
        *,
        model: type | None = None,
        settings: MarshalSettings | None = None,
        background: BackgroundTask | None = None,
    ) -> None:
        self.model = model
        self.settings = settings
        super().__init__(content, status_code=status_code, headers=headers, background=background)

    def render(self, content: Any) -> bytes:
        return marshal_to_json(content, model=self.model, settings=self.settings)
