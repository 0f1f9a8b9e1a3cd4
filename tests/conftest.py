"""
Shared test configuration.
Marshaling tests never read process-wide settings, so the environment is cleared of package overrides.
"""

from __future__ import annotations

import os

import pytest

from jsonapi_marshal.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def clean_marshal_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove any JSONAPI_MARSHAL_* overrides from the environment."""

    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
