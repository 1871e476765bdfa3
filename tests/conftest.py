# tests/conftest.py
from __future__ import annotations

from collections.abc import Generator

import pytest

from anomaly.config.settings import get_settings

_SETTINGS_ENV = (
    "ANOMALY_ENVIRONMENT",
    "ANOMALY_LOG_LEVEL",
    "ANOMALY_EXPOSE_SERVER_ERROR_DETAILS",
    "ANOMALY_SERVER_ERROR_MESSAGE",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Start every test from a clean environment and an empty settings cache."""
    for key in _SETTINGS_ENV:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
