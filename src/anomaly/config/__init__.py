# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Boundary configuration."""

from __future__ import annotations

from anomaly.config.settings import AnomalySettings, Environment, get_settings

__all__ = ["AnomalySettings", "Environment", "get_settings"]
