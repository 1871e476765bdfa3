# src/anomaly/domain/enums/category.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Anomaly category enumeration.

Purpose:
    Define the closed set of anomaly categories and their binding to HTTP
    status codes. Categories describe *why* an operation failed, independent
    of the transport used to report it.

Layer:
    domain/enums

Notes:
    - Values are the wire identifiers (``"not-found"``, ``"busy"``, ...), so
      members compare equal to plain strings.
    - The status table is derived from :attr:`Category.http_status`, which is
      an exhaustive ``match``. Adding a member without a status fails typing.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Final, assert_never

DEFAULT_HTTP_STATUS: Final[int] = 500


class Category(str, Enum):
    """Closed set of anomaly categories."""

    # ------------------------------------------------------------------ #
    # Client-side problems (4xx)                                         #
    # ------------------------------------------------------------------ #
    INCORRECT = "incorrect"
    FORBIDDEN = "forbidden"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not-found"
    CONFLICT = "conflict"

    # ------------------------------------------------------------------ #
    # Operational / internal problems (5xx)                              #
    # ------------------------------------------------------------------ #
    UNAVAILABLE = "unavailable"
    INTERRUPTED = "interrupted"
    FAULT = "fault"
    BUSY = "busy"
    UNSUPPORTED = "unsupported"

    @property
    def http_status(self) -> int:
        """Return the HTTP status code bound to this category."""
        match self:
            case Category.UNAVAILABLE:
                return 503
            case Category.INTERRUPTED:
                return 500
            case Category.INCORRECT:
                return 400
            case Category.FORBIDDEN:
                return 403
            case Category.UNAUTHORIZED:
                return 401
            case Category.NOT_FOUND:
                return 404
            case Category.CONFLICT:
                return 409
            case Category.FAULT:
                return 500
            case Category.BUSY:
                return 503
            case Category.UNSUPPORTED:
                return 501
            case _:
                assert_never(self)

    @property
    def code(self) -> str:
        """Return the stable machine-readable code (e.g. ``NOT_FOUND``)."""
        return self.value.upper().replace("-", "_")

    def __str__(self) -> str:
        return self.value


def category_of(value: Any) -> Category | None:
    """Resolve ``value`` to a :class:`Category` member, if it names one.

    Accepts members and their string identifiers. Anything else, including
    unhashable values, resolves to ``None``.
    """
    if isinstance(value, Category):
        return value
    if isinstance(value, str):
        try:
            return Category(value)
        except ValueError:
            return None
    return None


CATEGORIES: Final[frozenset[Category]] = frozenset(Category)

CATEGORY_HTTP_STATUS: Final[Mapping[Category, int]] = MappingProxyType(
    {category: category.http_status for category in Category}
)


__all__ = [
    "CATEGORIES",
    "CATEGORY_HTTP_STATUS",
    "DEFAULT_HTTP_STATUS",
    "Category",
    "category_of",
]
