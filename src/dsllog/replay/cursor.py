# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Map virtual elapsed time onto positions in the entry timeline."""

from __future__ import annotations

from bisect import bisect_right
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dsllog.timeline.models import Entry


class PlaybackCursor:
    """Tracks how much of a timeline has been exposed.

    The cutoff for an elapsed value is the first entry's timestamp plus
    that many seconds; every entry at or before the cutoff is visible.
    """

    def __init__(self, entries: Sequence[Entry]) -> None:
        self._stamps = [entry.timestamp for entry in entries]
        self.position = 0

    @property
    def start(self) -> datetime | None:
        return self._stamps[0] if self._stamps else None

    @property
    def duration(self) -> float:
        if not self._stamps:
            return 0.0
        return (self._stamps[-1] - self._stamps[0]).total_seconds()

    @property
    def at_end(self) -> bool:
        return bool(self._stamps) and self.position >= len(self._stamps)

    def cutoff(self, elapsed: float) -> datetime | None:
        if self.start is None:
            return None
        return self.start + timedelta(seconds=elapsed)

    def boundary(self, elapsed: float) -> int:
        """Index of the first entry strictly after the cutoff."""
        cutoff = self.cutoff(elapsed)
        if cutoff is None:
            return 0
        return bisect_right(self._stamps, cutoff)

    def advance(self, elapsed: float) -> range:
        """Expose entries up to ``elapsed`` and return the newly visible indexes.

        Entries already exposed are never returned again, so calling this
        with the same or a smaller value yields an empty range.
        """
        end = self.boundary(elapsed)
        if end <= self.position:
            return range(self.position, self.position)
        exposed = range(self.position, end)
        self.position = end
        return exposed

    def reset(self) -> None:
        self.position = 0
