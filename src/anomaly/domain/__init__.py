# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Anomaly registry core (Domain Layer).

Pure data and functions: categories, the status table, anomaly values, the
single exception type and the raising/extraction helpers. Nothing here logs,
performs I/O or imports outer layers.
"""
