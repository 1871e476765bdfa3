# src/anomaly/domain/services/raisers.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Raising entry points.

Purpose:
    :func:`raise_anomaly` is the only function in the package that signals
    failure. The category-specific helpers fix the category and otherwise
    forward to it.

Usage:
    forbidden("You are not authorized to access this resource")
    not_found("Therapy plan not found", {"plan_id": plan_id})
    incorrect("Invalid email format", {"field": "email"})

Layer:
    domain/services
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final, NoReturn

from anomaly.domain.entities.anomaly import make_anomaly
from anomaly.domain.enums.category import Category
from anomaly.domain.exceptions.base import AnomalyError

DEFAULT_UNAUTHORIZED_MESSAGE: Final[str] = "Authentication required"


def raise_anomaly(
    category: Category | str,
    message: str,
    data: Mapping[str, Any] | None = None,
    *,
    cause: BaseException | None = None,
) -> NoReturn:
    """Raise an :class:`AnomalyError` carrying a freshly built anomaly.

    Args:
        category:
            One of the anomaly categories.
        message:
            Human-readable error message.
        data:
            Optional additional context fields.
        cause:
            Optional underlying exception, chained as ``__cause__``.

    Raises:
        AnomalyError: Always.
    """
    error = AnomalyError(make_anomaly(category, message, data))
    if cause is not None:
        raise error from cause
    raise error


def unauthorized(
    message: str = DEFAULT_UNAUTHORIZED_MESSAGE,
    data: Mapping[str, Any] | None = None,
    *,
    cause: BaseException | None = None,
) -> NoReturn:
    """Raise an ``unauthorized`` (401) anomaly."""
    raise_anomaly(Category.UNAUTHORIZED, message, data, cause=cause)


def forbidden(
    message: str,
    data: Mapping[str, Any] | None = None,
    *,
    cause: BaseException | None = None,
) -> NoReturn:
    """Raise a ``forbidden`` (403) anomaly describing why access is denied."""
    raise_anomaly(Category.FORBIDDEN, message, data, cause=cause)


def not_found(
    message: str,
    data: Mapping[str, Any] | None = None,
    *,
    cause: BaseException | None = None,
) -> NoReturn:
    """Raise a ``not-found`` (404) anomaly."""
    raise_anomaly(Category.NOT_FOUND, message, data, cause=cause)


def incorrect(
    message: str,
    data: Mapping[str, Any] | None = None,
    *,
    cause: BaseException | None = None,
) -> NoReturn:
    """Raise an ``incorrect`` (400) anomaly for validation errors.

    ``data`` typically names the offending fields.
    """
    raise_anomaly(Category.INCORRECT, message, data, cause=cause)


def conflict(
    message: str,
    data: Mapping[str, Any] | None = None,
    *,
    cause: BaseException | None = None,
) -> NoReturn:
    """Raise a ``conflict`` (409) anomaly, e.g. for duplicates."""
    raise_anomaly(Category.CONFLICT, message, data, cause=cause)


def fault(
    message: str,
    data: Mapping[str, Any] | None = None,
    *,
    cause: BaseException | None = None,
) -> NoReturn:
    """Raise a ``fault`` (500) anomaly for internal errors.

    Keep ``message`` generic; ``data`` is meant for logs, not for clients.
    """
    raise_anomaly(Category.FAULT, message, data, cause=cause)


def unavailable(
    message: str,
    data: Mapping[str, Any] | None = None,
    *,
    cause: BaseException | None = None,
) -> NoReturn:
    """Raise an ``unavailable`` (503) anomaly."""
    raise_anomaly(Category.UNAVAILABLE, message, data, cause=cause)


def unsupported(
    message: str,
    data: Mapping[str, Any] | None = None,
    *,
    cause: BaseException | None = None,
) -> NoReturn:
    """Raise an ``unsupported`` (501) anomaly."""
    raise_anomaly(Category.UNSUPPORTED, message, data, cause=cause)


__all__ = [
    "DEFAULT_UNAUTHORIZED_MESSAGE",
    "conflict",
    "fault",
    "forbidden",
    "incorrect",
    "not_found",
    "raise_anomaly",
    "unauthorized",
    "unavailable",
    "unsupported",
]
