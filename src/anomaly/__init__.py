# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Anomaly: a small, universal error-classification vocabulary.

Anomalies are read-only mappings tagged with one of ten categories, each bound
to an HTTP status code. Service code raises them; boundary layers turn any
caught exception into an anomaly and pick a response status from it.

| Category      | HTTP | Description                                    |
|---------------|------|------------------------------------------------|
| unavailable   | 503  | Service temporarily unavailable, retry later   |
| interrupted   | 500  | Operation was interrupted                      |
| incorrect     | 400  | Bad request, invalid input                     |
| forbidden     | 403  | Not authorized to perform this action          |
| unauthorized  | 401  | Authentication required                        |
| not-found     | 404  | Resource not found                             |
| conflict      | 409  | Conflict with current state (e.g., duplicate)  |
| fault         | 500  | Internal server error                          |
| busy          | 503  | Server is busy, retry later                    |
| unsupported   | 501  | Operation not supported                        |

Typical usage:
    import anomaly

    anomaly.not_found("Therapy plan not found", {"plan_id": plan_id})

    try:
        ...
    except Exception as exc:
        status = anomaly.http_status(anomaly.to_anomaly(exc))
"""

from __future__ import annotations

from anomaly.domain.entities.anomaly import Anomaly, make_anomaly
from anomaly.domain.enums.category import (
    CATEGORIES,
    CATEGORY_HTTP_STATUS,
    DEFAULT_HTTP_STATUS,
    Category,
    category_of,
)
from anomaly.domain.exceptions.base import AnomalyError
from anomaly.domain.services.extraction import extract_anomaly, to_anomaly
from anomaly.domain.services.raisers import (
    DEFAULT_UNAUTHORIZED_MESSAGE,
    conflict,
    fault,
    forbidden,
    incorrect,
    not_found,
    raise_anomaly,
    unauthorized,
    unavailable,
    unsupported,
)
from anomaly.domain.services.registry import (
    http_status,
    is_anomaly,
    is_client_error,
    is_server_error,
)

__version__ = "0.1.0"

__all__ = [
    # Categories
    "CATEGORIES",
    "CATEGORY_HTTP_STATUS",
    "DEFAULT_HTTP_STATUS",
    "Category",
    "category_of",
    # Values and errors
    "Anomaly",
    "AnomalyError",
    "make_anomaly",
    # Registry
    "http_status",
    "is_anomaly",
    "is_client_error",
    "is_server_error",
    # Raising
    "DEFAULT_UNAUTHORIZED_MESSAGE",
    "raise_anomaly",
    "conflict",
    "fault",
    "forbidden",
    "incorrect",
    "not_found",
    "unauthorized",
    "unavailable",
    "unsupported",
    # Extraction
    "extract_anomaly",
    "to_anomaly",
]
