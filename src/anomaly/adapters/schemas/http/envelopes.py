# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""HTTP Error Envelopes (Adapters Layer).

Purpose:
    Canonical transport-facing shapes for anomalies reported over HTTP:
      - ErrorObject
      - ErrorEnvelope

    Error codes are the anomaly category identifiers in UPPER_SNAKE_CASE
    (``NOT_FOUND``, ``UNAUTHORIZED``, ``FAULT``...).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from anomaly.adapters.schemas.http.base import BaseHTTPSchema

__all__ = [
    "ErrorEnvelope",
    "ErrorObject",
]


# ---------------------------------------------------------------------------
# Error Object
# ---------------------------------------------------------------------------


class ErrorObject(BaseModel):
    """Structured error object inside ErrorEnvelope."""

    model_config = ConfigDict(
        title="ErrorObject",
        extra="forbid",
        json_schema_extra={
            "examples": [
                {
                    "code": "NOT_FOUND",
                    "http_status": 404,
                    "message": "Therapy plan not found",
                    "details": {"plan_id": "p-1"},
                    "trace_id": "req-123",
                }
            ]
        },
    )

    code: str = Field(..., description="Stable machine-readable error code.")
    http_status: int = Field(..., description="Associated HTTP status.")
    message: str = Field(..., description="Human-readable error description.")
    details: dict[str, Any] | None = Field(
        default=None,
        description="Optional structured details safe for clients.",
    )
    trace_id: str | None = Field(
        default=None,
        description="Request correlation identifier.",
    )


# ---------------------------------------------------------------------------
# Error Envelope
# ---------------------------------------------------------------------------


class ErrorEnvelope(BaseHTTPSchema):
    r"""Canonical error envelope: {"error": ErrorObject}."""

    model_config = ConfigDict(
        title="ErrorEnvelope",
        extra="forbid",
    )

    error: ErrorObject = Field(..., description="Structured error details.")
