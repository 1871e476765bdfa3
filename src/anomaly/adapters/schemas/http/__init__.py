# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""HTTP Schemas package (Adapters Layer).

Purpose:
    Public, adapter-facing HTTP schema surface. Re-exports the error
    envelopes used by presenters and exception handlers. BaseHTTPSchema stays
    internal to this package.

Layer:
    adapters/schemas/http
"""

from __future__ import annotations

from anomaly.adapters.schemas.http.envelopes import ErrorEnvelope, ErrorObject

__all__ = [
    "ErrorObject",
    "ErrorEnvelope",
]
