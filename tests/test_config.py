"""Settings loading and logging configuration."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from jsonapi_marshal.config import MarshalSettings, configure_logging, load_settings


def test_defaults() -> None:
    settings = load_settings({})
    assert settings == MarshalSettings()
    assert settings.linked_key == "linked"
    assert settings.links_key == "links"
    assert settings.id_list_suffix == "_ids"
    assert settings.dedupe_root is False


def test_environment_overrides() -> None:
    settings = load_settings(
        {
            "JSONAPI_MARSHAL_LINKED_KEY": "included",
            "JSONAPI_MARSHAL_DEDUPE_ROOT": "true",
            "JSONAPI_MARSHAL_LOG_LEVEL": "debug",
            "UNRELATED": "ignored",
        }
    )
    assert settings.linked_key == "included"
    assert settings.dedupe_root is True
    assert settings.log_level == "debug"


def test_process_environment_is_read(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JSONAPI_MARSHAL_ID_LIST_SUFFIX", "_keys")
    assert load_settings().id_list_suffix == "_keys"


def test_invalid_value_is_rejected() -> None:
    with pytest.raises(ValidationError):
        load_settings({"JSONAPI_MARSHAL_DEDUPE_ROOT": "maybe"})


def test_settings_are_frozen() -> None:
    with pytest.raises(ValidationError):
        MarshalSettings().dedupe_root = True  # type: ignore[misc]


def test_configure_logging_is_idempotent() -> None:
    logger = configure_logging(MarshalSettings(log_level="DEBUG"))
    handlers = list(logger.handlers)
    assert configure_logging(MarshalSettings(log_level="INFO")) is logger
    assert logger.handlers == handlers
    assert logger.level == logging.INFO
