# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Real-time playback loop."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Callable

from dsllog.logging import get_logger

if TYPE_CHECKING:
    from dsllog.replay.pipeline import ReplayPipeline
    from dsllog.replay.sinks import LineSink

logger = get_logger(__name__)


def play(
    pipeline: ReplayPipeline,
    sink: LineSink,
    *,
    speed: float = 1.0,
    tick: float = 0.1,
    start: float = 0.0,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Tick the virtual clock from ``start`` to the end of the session.

    Each tick sleeps ``tick`` seconds of wall time and advances the clock
    by ``tick * speed``. Returns the number of lines written.
    """
    duration = pipeline.duration
    elapsed = min(max(0.0, start), duration)
    step = tick * max(speed, 0.01)

    written = pipeline.run(sink, elapsed)
    while elapsed < duration:
        sleep(tick)
        elapsed = min(elapsed + step, duration)
        written += pipeline.run(sink, elapsed)

    logger.debug("playback_finished", lines=written, duration=duration)
    return written
