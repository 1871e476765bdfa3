# src/anomaly/infrastructure/http/errors.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""FastAPI exception handlers mapping anomalies to HTTP responses.

Every caught exception goes through ``to_anomaly`` and the registry's
``http_status``; there is no per-error-type mapping. Exceptions that do not
carry an anomaly are reported as ``fault`` (500).

Typical usage:
    app = FastAPI()
    register_anomaly_handlers(app)
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.responses import Response

from anomaly.adapters.presenters.anomaly_presenter import AnomalyPresenter
from anomaly.config.settings import AnomalySettings, get_settings
from anomaly.domain.entities.anomaly import Anomaly
from anomaly.domain.exceptions.base import AnomalyError
from anomaly.domain.services.extraction import to_anomaly
from anomaly.domain.services.registry import http_status, is_server_error
from anomaly.infrastructure.logging.logger import (
    configure_root_logging,
    get_json_logger,
    get_request_id,
    get_trace_id,
)

__all__ = [
    "handle_anomaly_error",
    "handle_unhandled_exception",
    "register_anomaly_handlers",
]

_LOGGER = get_json_logger(__name__)
_REQUEST_ID_HEADER = "X-Request-ID"
_PRESENTER = AnomalyPresenter()


def _trace_id(request: Request) -> str | None:
    return (
        getattr(getattr(request, "state", None), "trace_id", None)
        or request.headers.get(_REQUEST_ID_HEADER)
        or get_trace_id()
        or get_request_id()
    )


def _settings_for(request: Request) -> AnomalySettings:
    settings = getattr(request.app.state, "anomaly_settings", None)
    if isinstance(settings, AnomalySettings):
        return settings
    try:
        return get_settings()
    except RuntimeError:
        # Handlers installed without register_anomaly_handlers; keep answering.
        _LOGGER.warning("Invalid anomaly settings; using defaults")
        return AnomalySettings.model_construct()


def _log_anomaly(request: Request, anomaly: Anomaly, exc: Exception, trace_id: str | None) -> None:
    extra = {
        "extra": {
            "category": str(anomaly.category),
            "http_status": http_status(anomaly),
            "path": request.url.path,
            "method": request.method,
        },
        "trace_id": trace_id,
        "request_id": request.headers.get(_REQUEST_ID_HEADER) or get_request_id(),
    }
    if is_server_error(anomaly):
        _LOGGER.error(
            "Server anomaly: %s",
            anomaly.message,
            extra=extra,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
    else:
        _LOGGER.warning("Client anomaly: %s", anomaly.message, extra=extra)


def _respond(request: Request, exc: Exception) -> Response:
    anomaly = to_anomaly(exc)
    trace_id = _trace_id(request)
    settings = _settings_for(request)
    _log_anomaly(request, anomaly, exc, trace_id)

    result = _PRESENTER.present_anomaly(
        anomaly,
        trace_id=trace_id,
        expose_server_details=settings.expose_server_error_details,
        server_error_message=settings.server_error_message,
    )
    return JSONResponse(
        status_code=result.status_code,
        content=result.body.model_dump_http(exclude_none=True),
        headers=dict(result.headers),
    )


async def handle_anomaly_error(request: Request, exc: Exception) -> Response:
    """Render an :class:`AnomalyError` using its category's status."""
    return _respond(request, exc)


async def handle_unhandled_exception(request: Request, exc: Exception) -> Response:
    """Render any other exception as a ``fault`` anomaly."""
    return _respond(request, exc)


def register_anomaly_handlers(
    app: FastAPI,
    settings: AnomalySettings | None = None,
    *,
    configure_logging: bool = False,
) -> None:
    """Install the anomaly exception handlers on ``app``.

    Args:
        app: The FastAPI application.
        settings: Settings to use; defaults to :func:`get_settings`, resolved here
            so invalid configuration fails at startup rather than per request.
        configure_logging: Also configure JSON root logging at the settings' level.

    Raises:
        RuntimeError: If settings are not given and the environment is invalid.
    """
    resolved = settings if settings is not None else get_settings()
    app.state.anomaly_settings = resolved
    if configure_logging:
        configure_root_logging(resolved.log_level)
    app.add_exception_handler(AnomalyError, handle_anomaly_error)
    app.add_exception_handler(Exception, handle_unhandled_exception)
