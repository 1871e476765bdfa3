# src/anomaly/domain/services/registry.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Anomaly registry: status lookup and classification predicates.

Purpose:
    Total functions answering "which status does this anomaly map to" and
    "is this value an anomaly at all". Malformed input degrades to the safest
    default (500 / ``False``) instead of raising.

Layer:
    domain/services
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from anomaly.domain.entities.anomaly import CATEGORY_KEY
from anomaly.domain.enums.category import DEFAULT_HTTP_STATUS, Category, category_of


def _category_field(value: Any) -> Category | None:
    """Return the recognized category of a record-shaped value, if any."""
    if not isinstance(value, Mapping):
        return None
    try:
        raw = value.get(CATEGORY_KEY)
    except Exception:  # pragma: no cover - hostile Mapping implementations
        return None
    return category_of(raw)


def http_status(anomaly: Any) -> int:
    """Return the HTTP status code for an anomaly.

    Args:
        anomaly: Record with a ``category`` field.

    Returns:
        The mapped status, or 500 for missing/unknown categories and for
        values that are not mappings.
    """
    category = _category_field(anomaly)
    if category is None:
        return DEFAULT_HTTP_STATUS
    return category.http_status


def is_anomaly(value: Any) -> bool:
    """Return True if ``value`` is a mapping whose category is recognized."""
    return _category_field(value) is not None


def is_client_error(anomaly: Any) -> bool:
    """Return True if the anomaly maps to a 4xx status."""
    return 400 <= http_status(anomaly) < 500


def is_server_error(anomaly: Any) -> bool:
    """Return True if the anomaly maps to a 5xx status."""
    return http_status(anomaly) >= 500


__all__ = ["http_status", "is_anomaly", "is_client_error", "is_server_error"]
