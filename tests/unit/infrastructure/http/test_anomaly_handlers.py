from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from anomaly.config.settings import AnomalySettings, Environment
from anomaly.domain.exceptions.base import AnomalyError
from anomaly.domain.services import raisers
from anomaly.infrastructure.http import errors
from anomaly.infrastructure.logging.logger import _JsonFormatter, set_request_context


def _make_app(settings: AnomalySettings | None = None) -> FastAPI:
    """Build a FastAPI app wired with the anomaly handlers under test."""
    app = FastAPI()
    errors.register_anomaly_handlers(app, settings)

    @app.middleware("http")
    async def add_trace_id(request: Request, call_next):  # type: ignore[no-untyped-def]
        """Inject a deterministic trace_id so tests can assert on it."""
        request.state.trace_id = "trace-xyz"
        return await call_next(request)

    @app.get("/plans/{plan_id}")
    async def get_plan(plan_id: str) -> dict[str, Any]:
        raisers.not_found("Therapy plan not found", {"plan_id": plan_id})

    @app.get("/login")
    async def login() -> dict[str, Any]:
        raisers.unauthorized()

    @app.get("/search")
    async def search() -> dict[str, Any]:
        raisers.unavailable("Index is rebuilding", {"retry_in": 30})

    @app.get("/unhandled")
    async def unhandled() -> dict[str, Any]:
        raise RuntimeError("boom")

    return app


def test_anomaly_error_maps_to_category_status() -> None:
    """A raised not-found anomaly becomes a 404 envelope with details."""
    client = TestClient(_make_app())

    resp = client.get("/plans/p-9")

    assert resp.status_code == 404
    assert resp.headers["X-Request-ID"] == "trace-xyz"
    assert resp.json() == {
        "error": {
            "code": "NOT_FOUND",
            "http_status": 404,
            "message": "Therapy plan not found",
            "details": {"plan_id": "p-9"},
            "trace_id": "trace-xyz",
        }
    }


def test_unauthorized_default_message_reaches_client() -> None:
    """Client errors expose their message."""
    resp = TestClient(_make_app()).get("/login")

    assert resp.status_code == 401
    assert resp.json()["error"]["message"] == "Authentication required"


def test_server_anomaly_hidden_by_default() -> None:
    """5xx anomalies keep their status but hide internals."""
    resp = TestClient(_make_app()).get("/search")

    err = resp.json()["error"]
    assert resp.status_code == 503
    assert err["code"] == "UNAVAILABLE"
    assert err["message"] == "Internal server error"
    assert "details" not in err


def test_server_anomaly_exposed_with_settings() -> None:
    """Explicit settings on the app enable exposure."""
    settings = AnomalySettings.model_validate(
        {"ANOMALY_ENVIRONMENT": Environment.TEST, "ANOMALY_EXPOSE_SERVER_ERROR_DETAILS": True}
    )
    resp = TestClient(_make_app(settings)).get("/search")

    err = resp.json()["error"]
    assert err["message"] == "Index is rebuilding"
    assert err["details"] == {"retry_in": 30}


def test_unhandled_exception_is_a_fault(caplog: pytest.LogCaptureFixture) -> None:
    """Foreign exceptions are normalized to fault and logged as errors."""
    # Don't re-raise server exceptions, we want the 500 response.
    client = TestClient(_make_app(), raise_server_exceptions=False)

    resp = client.get("/unhandled")

    assert resp.status_code == 500
    err = resp.json()["error"]
    assert err["code"] == "FAULT"
    assert err["http_status"] == 500
    assert err["message"] == "Internal server error"
    assert err["trace_id"] == "trace-xyz"
    assert any(
        r.levelname == "ERROR" and r.name == errors.__name__ for r in caplog.records
    )


def test_client_anomaly_logged_as_warning(caplog: pytest.LogCaptureFixture) -> None:
    """4xx anomalies are logged at WARNING with their category."""
    TestClient(_make_app()).get("/plans/p-1")

    records = [r for r in caplog.records if r.name == errors.__name__]
    assert records
    assert records[-1].levelname == "WARNING"
    assert records[-1].extra["category"] == "not-found"  # type: ignore[attr-defined]


def _bare_app() -> FastAPI:
    """App with a not-found route and no trace middleware."""
    app = FastAPI()

    @app.get("/plans/{plan_id}")
    async def get_plan(plan_id: str) -> dict[str, Any]:
        raisers.not_found("Therapy plan not found", {"plan_id": plan_id})

    return app


def test_host_configuration_does_not_break_mapping(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """A host .env with foreign keys and a foreign ENVIRONMENT keep 404 a 404."""
    (tmp_path / ".env").write_text("DATABASE_URL=postgres://x\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ENVIRONMENT", "prod")

    resp = TestClient(_make_app()).get("/plans/p-1")

    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "NOT_FOUND"


def test_invalid_settings_fail_at_registration(monkeypatch: pytest.MonkeyPatch) -> None:
    """Bad anomaly configuration surfaces when handlers are installed."""
    monkeypatch.setenv("ANOMALY_ENVIRONMENT", "mars")

    with pytest.raises(RuntimeError, match="Invalid configuration"):
        errors.register_anomaly_handlers(FastAPI())


def test_manually_installed_handlers_fall_back_to_defaults(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Handlers added directly still answer with the mapped status on bad config."""
    app = _bare_app()
    app.add_exception_handler(AnomalyError, errors.handle_anomaly_error)
    monkeypatch.setenv("ANOMALY_ENVIRONMENT", "mars")

    resp = TestClient(app).get("/plans/p-2")

    assert resp.status_code == 404
    assert resp.json()["error"]["details"] == {"plan_id": "p-2"}


def test_request_id_header_is_used_as_trace_id(caplog: pytest.LogCaptureFixture) -> None:
    """Without a trace middleware, X-Request-ID correlates body, headers and logs."""
    app = _bare_app()
    errors.register_anomaly_handlers(app)

    resp = TestClient(app).get("/plans/p-3", headers={"X-Request-ID": "req-42"})

    assert resp.headers["X-Request-ID"] == "req-42"
    assert resp.json()["error"]["trace_id"] == "req-42"
    record = [r for r in caplog.records if r.name == errors.__name__][-1]
    assert record.request_id == "req-42"  # type: ignore[attr-defined]


def test_trace_id_falls_back_to_request_context() -> None:
    """The request id from the logging context is the last correlation source."""
    request = Request({"type": "http", "method": "GET", "path": "/", "headers": []})
    set_request_context(request_id="ctx-req")
    try:
        assert errors._trace_id(request) == "ctx-req"
    finally:
        set_request_context(request_id="")


@pytest.fixture()
def _restore_root() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.mark.usefixtures("_restore_root")
def test_register_can_configure_json_logging() -> None:
    """configure_logging installs the JSON root handler at the settings' level."""
    logging.getLogger().handlers.clear()
    settings = AnomalySettings.model_validate({"ANOMALY_LOG_LEVEL": "debug"})

    errors.register_anomaly_handlers(FastAPI(), settings, configure_logging=True)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert [type(h.formatter) for h in root.handlers] == [_JsonFormatter]
