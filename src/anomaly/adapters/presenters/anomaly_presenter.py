# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Anomaly presenter.

Purpose:
    Shape an :class:`~anomaly.domain.entities.anomaly.Anomaly` into the
    canonical HTTP ``ErrorEnvelope`` plus headers.

Responsibilities:
    * Pick the status via the registry and the code via the category.
    * Hide messages and context of server errors unless configured otherwise.
    * Echo ``X-Request-ID`` when a trace id is known.

Layer:
    adapters/presenters
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from anomaly.adapters.schemas.http.envelopes import ErrorEnvelope, ErrorObject
from anomaly.domain.entities.anomaly import Anomaly
from anomaly.domain.enums.category import Category, category_of
from anomaly.domain.services.registry import http_status, is_server_error

DEFAULT_SERVER_ERROR_MESSAGE = "Internal server error"


def _json_safe(details: Mapping[str, Any]) -> dict[str, Any]:
    """Coerce caller context into JSON-native values.

    Unknown value types become ``str``. Mappings json cannot encode at all
    (non-scalar keys, reference cycles) are flattened to ``{str(k): str(v)}``.
    """
    try:
        return json.loads(json.dumps(dict(details), default=str))
    except (TypeError, ValueError):
        return {str(k): str(v) for k, v in details.items()}


@dataclass(slots=True)
class PresentResult[T]:
    """Presentation result envelope.

    Attributes:
        body: A Pydantic envelope instance.
        headers: Extra HTTP headers to apply.
        status_code: HTTP status for the response.
    """

    body: T
    headers: Mapping[str, str]
    status_code: int


class AnomalyPresenter:
    """Presenter turning anomalies into error envelopes."""

    def present_anomaly(
        self,
        anomaly: Anomaly,
        *,
        trace_id: str | None = None,
        expose_server_details: bool = False,
        server_error_message: str = DEFAULT_SERVER_ERROR_MESSAGE,
    ) -> PresentResult[ErrorEnvelope]:
        """Build an ErrorEnvelope for ``anomaly``.

        Args:
            anomaly: The anomaly to present.
            trace_id: Request correlation identifier, echoed in body and headers.
            expose_server_details: Keep message and context of 5xx anomalies.
            server_error_message: Message used when a 5xx message is hidden.

        Returns:
            PresentResult carrying the envelope, headers and status code.
        """
        status = http_status(anomaly)
        code = (category_of(anomaly.category) or Category.FAULT).code

        if is_server_error(anomaly) and not expose_server_details:
            message = server_error_message
            details: dict[str, Any] | None = None
        else:
            message = "" if anomaly.message is None else str(anomaly.message)
            details = _json_safe(anomaly.data) or None

        err = ErrorObject(
            code=code,
            http_status=status,
            message=message,
            details=details,
            trace_id=trace_id,
        )
        headers: dict[str, str] = {}
        if trace_id:
            headers["X-Request-ID"] = trace_id
        return PresentResult(body=ErrorEnvelope(error=err), headers=headers, status_code=status)


__all__ = ["DEFAULT_SERVER_ERROR_MESSAGE", "AnomalyPresenter", "PresentResult"]
