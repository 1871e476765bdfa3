# src/anomaly/domain/entities/anomaly.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Anomaly value object.

Purpose:
    Immutable, record-shaped description of a failure: a ``category``, a
    human-readable ``message`` and any caller-supplied context fields merged
    alongside them.

Layer:
    domain/entities

Notes:
    - Anomalies are read-only mappings and compare equal to any mapping with
      the same items, so ``make_anomaly("not-found", "x")`` equals
      ``{"category": "not-found", "message": "x"}``.
    - Categories outside the closed set are kept as given; they resolve to the
      default status at lookup time instead of failing construction.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Final

from anomaly.domain.enums.category import Category, category_of

CATEGORY_KEY: Final[str] = "category"
MESSAGE_KEY: Final[str] = "message"


class Anomaly(Mapping[str, Any]):
    """Read-only mapping describing why an operation failed.

    Attributes:
        category:
            The category value, normally a :class:`Category` member.
        message:
            Human-readable description of the failure.
        data:
            Caller-supplied context, i.e. every field except ``category`` and
            ``message``.
    """

    __slots__ = ("_fields",)

    _fields: dict[str, Any]

    def __init__(self, fields: Mapping[str, Any]) -> None:
        items = dict(fields)
        normalized = category_of(items.get(CATEGORY_KEY))
        if normalized is not None:
            items[CATEGORY_KEY] = normalized
        object.__setattr__(self, "_fields", items)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Anomaly({self._fields!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._fields,))

    @property
    def category(self) -> Category | Any:
        """Return the category, or ``None`` when the field is absent."""
        return self._fields.get(CATEGORY_KEY)

    @property
    def message(self) -> Any:
        """Return the message, or ``None`` when the field is absent."""
        return self._fields.get(MESSAGE_KEY)

    @property
    def data(self) -> dict[str, Any]:
        """Return a copy of the caller-supplied context fields."""
        return {k: v for k, v in self._fields.items() if k not in (CATEGORY_KEY, MESSAGE_KEY)}


def make_anomaly(
    category: Category | str,
    message: str,
    data: Mapping[str, Any] | None = None,
) -> Anomaly:
    """Build an anomaly from a category, a message and optional context.

    The ``category``/``message`` pair forms the base record and ``data`` is
    merged on top, so same-named keys in ``data`` win.

    Args:
        category:
            A :class:`Category` member or its identifier. Other values are
            accepted and kept as-is.
        message:
            Human-readable error message.
        data:
            Optional additional context fields.

    Returns:
        The new :class:`Anomaly`.

    Examples:
        >>> make_anomaly(Category.NOT_FOUND, "User not found")
        Anomaly({'category': <Category.NOT_FOUND: 'not-found'>, 'message': 'User not found'})
    """
    fields: dict[str, Any] = {CATEGORY_KEY: category, MESSAGE_KEY: message}
    if data:
        fields.update(data)
    return Anomaly(fields)


__all__ = ["CATEGORY_KEY", "MESSAGE_KEY", "Anomaly", "make_anomaly"]
