# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Timeline playback."""

from __future__ import annotations

from dsllog.replay.cursor import PlaybackCursor
from dsllog.replay.pipeline import PipelineState, ReplayPipeline
from dsllog.replay.player import play
from dsllog.replay.sinks import EchoSink, LineSink, MemorySink

__all__ = [
    "EchoSink",
    "LineSink",
    "MemorySink",
    "PipelineState",
    "PlaybackCursor",
    "ReplayPipeline",
    "play",
]
