# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Build the ordered, deduplicated entry timeline from raw log text."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from dsllog.logging import get_logger
from dsllog.timeline.codec import decode_line
from dsllog.timeline.models import Entry

logger = get_logger(__name__)


def parse_log(text: str) -> list[Entry]:
    """Parse a whole JSON-lines log.

    Entries are stable-sorted by timestamp, so records sharing a timestamp
    keep file order. Narrative entries repeating an earlier
    ``(timestamp, text)`` pair are dropped; damage rounds are always kept
    since separate fights can report identical aggregates.
    """
    raw: list[Entry] = []
    skipped = 0
    for line in text.split("\n"):
        line = line.removesuffix("\r")
        if not line.strip():
            continue
        entry = decode_line(line)
        if entry is None:
            skipped += 1
            continue
        raw.append(entry)

    raw.sort(key=lambda e: e.timestamp)

    seen: set[tuple[datetime, str]] = set()
    entries: list[Entry] = []
    for entry in raw:
        if entry.is_narrative:
            key = (entry.timestamp, entry.text)
            if key in seen:
                continue
            seen.add(key)
        entries.append(entry)

    logger.info(
        "log_parsed",
        entries=len(entries),
        skipped=skipped,
        duplicates=len(raw) - len(entries),
    )
    return entries


def load_log(path: str | Path) -> list[Entry]:
    """Read a UTF-8 log file and parse it."""
    path = Path(path)
    return parse_log(path.read_text(encoding="utf-8", errors="replace"))


def session_duration(entries: list[Entry]) -> float:
    """Seconds between the first and last entry (0 for an empty timeline)."""
    if not entries:
        return 0.0
    return (entries[-1].timestamp - entries[0].timestamp).total_seconds()
