# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Application settings."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dsllog.defaults import FIGHT_GAP_SECONDS, PLAYBACK_SPEED, SKIP_SECONDS, TICK_INTERVAL


class Settings(BaseSettings):
    log_level: str = "WARNING"
    fight_gap_seconds: float = Field(default=FIGHT_GAP_SECONDS, gt=0)
    tick_interval: float = Field(default=TICK_INTERVAL, gt=0)
    playback_speed: float = Field(default=PLAYBACK_SPEED, gt=0)
    skip_seconds: float = Field(default=SKIP_SECONDS, ge=0)

    model_config = SettingsConfigDict(
        env_prefix="DSLLOG_",
        extra="ignore",
    )
