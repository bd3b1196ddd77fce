# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Centralized default values for dsllog."""

from __future__ import annotations

FIGHT_GAP_SECONDS = 300.0
TICK_INTERVAL = 0.1
PLAYBACK_SPEED = 1.0
SKIP_SECONDS = 42.0

NARRATIVE_TYPE = "dsl-message"
DAMAGE_TYPE = "damage"
