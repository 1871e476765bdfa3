# src/anomaly/domain/services/extraction.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Recover anomalies from caught exceptions.

Layer:
    domain/services
"""

from __future__ import annotations

from typing import Any

from anomaly.domain.entities.anomaly import Anomaly, make_anomaly
from anomaly.domain.enums.category import Category
from anomaly.domain.exceptions.base import AnomalyError
from anomaly.domain.services.registry import is_anomaly


def extract_anomaly(error: Any) -> Anomaly | None:
    """Return the anomaly attached to ``error``, if it carries a valid one.

    Args:
        error: Any caught exception (or arbitrary value).

    Returns:
        The attached anomaly, or ``None`` when ``error`` is not an
        :class:`AnomalyError` or its payload has an unrecognized category.
    """
    if not isinstance(error, AnomalyError):
        return None
    payload = getattr(error, "anomaly", None)
    if isinstance(payload, Anomaly) and is_anomaly(payload):
        return payload
    return None


def to_anomaly(error: BaseException) -> Anomaly:
    """Normalize any exception to an anomaly.

    Exceptions already carrying an anomaly yield it unchanged; everything
    else is wrapped as a ``fault`` with the exception text as message.
    """
    extracted = extract_anomaly(error)
    if extracted is not None:
        return extracted
    return make_anomaly(Category.FAULT, str(error))


__all__ = ["extract_anomaly", "to_anomaly"]
