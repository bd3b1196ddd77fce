# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Replay and combat statistics for JSON-lines game client logs."""

from __future__ import annotations

__version__ = "0.1.0"
