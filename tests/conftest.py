# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dsllog.logging import configure_logging
from dsllog.settings import Settings
from tests.helpers import damage_line, message_line, swing

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def quiet_logging() -> None:
    """Rebind structlog to the current stderr so CLI runs cannot leave a closed stream behind."""
    configure_logging(Settings(log_level="WARNING"))


@pytest.fixture
def settings() -> Settings:
    """Settings pinned to defaults regardless of DSLLOG_* environment."""
    return Settings(
        log_level="WARNING",
        fight_gap_seconds=300,
        tick_interval=0.1,
        playback_speed=1.0,
        skip_seconds=42,
    )


@pytest.fixture
def sample_log() -> str:
    """A short session: two fights separated by a long gap."""
    lines = [
        message_line(0, "\x1b[1;31mA wild orc appears!\x1b[0m"),
        damage_line(
            5,
            totalDamage=30,
            hits=2,
            misses=1,
            events=[swing("[Clan] Rogar", 20), swing("Mira", 10), swing("Mira", 0)],
        ),
        message_line(10, "The orc flees."),
        damage_line(
            600,
            totalDamage=12.5,
            hits=1,
            misses=0,
            bySource=[{"actor": "Rogar", "totalAsSource": 12.5, "countAsSource": 1}],
        ),
        message_line(610, ""),
    ]
    return "\n".join(lines) + "\n"


@pytest.fixture
def sample_log_file(tmp_path: Path, sample_log: str) -> Path:
    path = tmp_path / "session.log"
    path.write_text(sample_log, encoding="utf-8")
    return path
