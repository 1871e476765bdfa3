# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Base HTTP Schema (Adapters Layer).

Purpose:
    Canonical Pydantic base for adapter-layer HTTP schemas.
    Enforces strict config and deterministic JSON output.

Layer: adapters/schemas/http

Notes:
    - Transport-facing only. The domain registry must not import from this module.
    - All HTTP envelopes must subclass BaseHTTPSchema.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class BaseHTTPSchema(BaseModel):
    """Base class for all HTTP-facing schemas.

    Provides:
        • Strict `extra='forbid'` validation.
        • Enum values (e.g. categories) serialized as their identifiers.
        • Consistent `model_dump_http()` for presenters and handlers.
    """

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        str_strip_whitespace=True,
        ser_json_inf_nan="null",
        use_enum_values=True,
    )

    def model_dump_http(self, **kwargs: Any) -> dict[str, Any]:
        """Return a JSON-serializable dict suitable for HTTP responses.

        Presenters must use this instead of raw model_dump() to ensure
        canonical serialization across all HTTP surfaces.
        """
        return self.model_dump(mode="json", **kwargs)
