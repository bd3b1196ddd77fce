# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Log decoding and timeline construction."""

from __future__ import annotations

from dsllog.timeline.codec import decode_line
from dsllog.timeline.models import ActorRow, DamageEvent, DamageRound, Entry, EntryKind
from dsllog.timeline.parser import load_log, parse_log, session_duration

__all__ = [
    "ActorRow",
    "DamageEvent",
    "DamageRound",
    "Entry",
    "EntryKind",
    "decode_line",
    "load_log",
    "parse_log",
    "session_duration",
]
