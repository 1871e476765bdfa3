# src/anomaly/domain/exceptions/base.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Base Anomaly Exception.

Summary:
    Single exception type carrying an :class:`Anomaly` as its structured
    payload, so boundaries can recover the category and context of a failure
    deterministically instead of parsing messages.

Layer:
    domain/exceptions
"""

from __future__ import annotations

from typing import Any

from anomaly.domain.entities.anomaly import Anomaly
from anomaly.domain.enums.category import DEFAULT_HTTP_STATUS, Category, category_of


class AnomalyError(Exception):
    """Exception raised with an anomaly attached.

    Attributes:
        anomaly:
            The structured payload describing the failure.
        code:
            Stable error code derived from the category, suitable for mapping
            to HTTP envelopes and metrics. Unknown categories use ``FAULT``.
        details:
            Caller-supplied context fields of the anomaly.
    """

    def __init__(self, anomaly: Anomaly) -> None:
        """Initialize an AnomalyError instance.

        Args:
            anomaly:
                Payload to attach. Its ``message`` becomes the exception text.
        """
        message = anomaly.message
        super().__init__("" if message is None else str(message))
        self.anomaly: Anomaly = anomaly
        self.details: dict[str, Any] = anomaly.data

    @property
    def category(self) -> Category | Any:
        """Return the category of the attached anomaly."""
        return self.anomaly.category

    @property
    def message(self) -> str:
        """Return the human-readable message."""
        return str(self)

    @property
    def code(self) -> str:
        """Return the stable error code of the attached anomaly."""
        known = category_of(self.anomaly.category)
        return (known or Category.FAULT).code

    @property
    def http_status(self) -> int:
        """Return the HTTP status bound to the category."""
        known = category_of(self.anomaly.category)
        return known.http_status if known is not None else DEFAULT_HTTP_STATUS

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.anomaly,))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.anomaly!r})"


__all__ = ["AnomalyError"]
