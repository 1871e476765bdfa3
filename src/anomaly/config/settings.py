# src/anomaly/config/settings.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Anomaly Boundary Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated configuration for the HTTP boundary that turns anomalies
    into responses. The core registry never reads configuration; only
    adapters/infrastructure do, and they receive `AnomalySettings` explicitly
    or through `get_settings()`.

Design:
    - Pydantic v2 BaseSettings with `extra='forbid'` to catch unknown env.
    - Explicit field declarations; every variable carries the `ANOMALY_` prefix
      so host application variables (ENVIRONMENT, DATABASE_URL...) never leak in.
    - Environment enumeration for behavior toggles (includes TEST).
    - Singleton accessor `get_settings()` with LRU cache.
    - Safe, structured logging of the resolved values.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    """Logical deployment environment."""

    DEVELOPMENT = "development"
    TEST = "test"
    CI = "ci"
    STAGING = "staging"
    PRODUCTION = "production"


class AnomalySettings(BaseSettings):
    """Typed configuration for the anomaly HTTP boundary."""

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Logical deployment environment.",
        validation_alias="ANOMALY_ENVIRONMENT",
    )

    log_level: str = Field(
        default="INFO",
        description="Root logging level used when the boundary configures logging.",
        validation_alias="ANOMALY_LOG_LEVEL",
    )

    expose_server_error_details: bool = Field(
        default=False,
        description=(
            "Include the message and context of 5xx anomalies in HTTP error "
            "envelopes. Client (4xx) anomalies are always exposed."
        ),
        validation_alias="ANOMALY_EXPOSE_SERVER_ERROR_DETAILS",
    )

    server_error_message: str = Field(
        default="Internal server error",
        min_length=1,
        description="Client-facing message used in place of hidden 5xx messages.",
        validation_alias="ANOMALY_SERVER_ERROR_MESSAGE",
    )

    # Process environment only: a host application owns its .env file.
    model_config = SettingsConfigDict(
        env_prefix="ANOMALY_",
        extra="forbid",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def _validate_exposure(self) -> AnomalySettings:
        """Reject exposing server error internals in production.

        Returns:
            AnomalySettings: The validated settings instance.

        Raises:
            ValueError: If server error details are exposed in production.
        """
        if self.expose_server_error_details and self.environment is Environment.PRODUCTION:
            raise ValueError(
                "ANOMALY_EXPOSE_SERVER_ERROR_DETAILS must not be enabled in production.",
            )
        self.log_level = self.log_level.upper()
        return self


@lru_cache(maxsize=1)
def get_settings() -> AnomalySettings:
    """Return a cached singleton `AnomalySettings` instance.

    Returns:
        AnomalySettings: Validated boundary settings.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = AnomalySettings()
        logger.info(
            "Anomaly settings loaded",
            extra={
                "extra": {
                    "environment": settings.environment.value,
                    "log_level": settings.log_level,
                    "expose_server_error_details": settings.expose_server_error_details,
                }
            },
        )
        return settings
    except ValidationError as exc:
        logger.exception("Invalid anomaly configuration")
        raise RuntimeError(f"Invalid configuration: {exc}") from exc


__all__ = ["AnomalySettings", "Environment", "get_settings"]
