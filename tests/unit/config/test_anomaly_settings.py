from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from anomaly.config.settings import AnomalySettings, Environment, get_settings


def test_settings_defaults() -> None:
    """Without env, server internals stay hidden."""
    s = AnomalySettings()

    assert s.environment == Environment.DEVELOPMENT
    assert s.log_level == "INFO"
    assert s.expose_server_error_details is False
    assert s.server_error_message == "Internal server error"


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Settings should hydrate deterministically from environment variables."""
    monkeypatch.setenv("ANOMALY_ENVIRONMENT", "test")
    monkeypatch.setenv("ANOMALY_LOG_LEVEL", "debug")
    monkeypatch.setenv("ANOMALY_EXPOSE_SERVER_ERROR_DETAILS", "true")
    monkeypatch.setenv("ANOMALY_SERVER_ERROR_MESSAGE", "Something went wrong")

    s = AnomalySettings()

    assert s.environment == Environment.TEST
    assert s.log_level == "DEBUG"
    assert s.expose_server_error_details is True
    assert s.server_error_message == "Something went wrong"


def test_settings_forbid_extra_fields() -> None:
    """Model should reject unexpected fields."""
    with pytest.raises(ValidationError):
        AnomalySettings.model_validate({"UNEXPECTED_FIELD": "boom"})


def test_settings_reject_exposed_details_in_production() -> None:
    """Exposing 5xx internals is a development/test convenience only."""
    with pytest.raises(ValidationError):
        AnomalySettings.model_validate(
            {"ANOMALY_ENVIRONMENT": "production", "ANOMALY_EXPOSE_SERVER_ERROR_DETAILS": True}
        )


def test_get_settings_is_cached() -> None:
    """The accessor returns a process-wide singleton."""
    assert get_settings() is get_settings()


def test_get_settings_wraps_validation_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    """Invalid configuration surfaces as RuntimeError."""
    monkeypatch.setenv("ANOMALY_ENVIRONMENT", "mars")

    with pytest.raises(RuntimeError, match="Invalid configuration"):
        get_settings()


def test_settings_ignore_host_application_configuration(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Unprefixed variables and the host's .env file belong to the host app."""
    (tmp_path / ".env").write_text(
        "DATABASE_URL=postgres://x\nANOMALY_EXPOSE_SERVER_ERROR_DETAILS=true\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ENVIRONMENT", "prod")
    monkeypatch.setenv("LOG_LEVEL", "nonsense")

    s = get_settings()

    assert s.environment == Environment.DEVELOPMENT
    assert s.log_level == "INFO"
    assert s.expose_server_error_details is False
