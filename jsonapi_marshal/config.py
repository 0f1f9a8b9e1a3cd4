"""
Marshaling settings and logging configuration.
Settings are immutable and passed explicitly into each marshal call.
"""

from __future__ import annotations

import logging
import os
from typing import Final, Mapping

from pydantic import BaseModel, ConfigDict

ENV_PREFIX: Final[str] = "JSONAPI_MARSHAL_"
LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class MarshalSettings(BaseModel):
    """Typed marshaling configuration."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    linked_key: str = "linked"
    links_key: str = "links"
    id_list_suffix: str = "_ids"
    dedupe_root: bool = False
    log_level: str = "WARNING"


def load_settings(environ: Mapping[str, str] | None = None) -> MarshalSettings:
    """Build settings from ``JSONAPI_MARSHAL_*`` environment variables."""

    environ = os.environ if environ is None else environ
    values = {
        name: environ[f"{ENV_PREFIX}{name.upper()}"]
        for name in MarshalSettings.model_fields
        if f"{ENV_PREFIX}{name.upper()}" in environ
    }
    return MarshalSettings.model_validate(values)


def configure_logging(settings: MarshalSettings | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger at the configured level."""

    settings = settings or load_settings()
    logger = logging.getLogger("jsonapi_marshal")
    level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    logger.setLevel(level)
    if not any(getattr(handler, "_jsonapi_marshal", False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._jsonapi_marshal = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
