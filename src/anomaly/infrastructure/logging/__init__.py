# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
