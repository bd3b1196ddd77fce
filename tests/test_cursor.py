# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from dsllog.replay.cursor import PlaybackCursor
from tests.helpers import at, narrative_entry


def _cursor() -> PlaybackCursor:
    return PlaybackCursor(
        [
            narrative_entry(0, "a"),
            narrative_entry(0, "b"),
            narrative_entry(5, "c"),
            narrative_entry(10, "d"),
        ]
    )


def test_boundary_is_first_entry_after_cutoff() -> None:
    cursor = _cursor()
    assert cursor.cutoff(5) == at(5)
    assert cursor.boundary(0) == 2
    assert cursor.boundary(4.9) == 2
    assert cursor.boundary(5) == 3
    assert cursor.boundary(100) == 4


def test_advance_returns_only_new_entries() -> None:
    cursor = _cursor()
    assert list(cursor.advance(0)) == [0, 1]
    assert list(cursor.advance(7)) == [2]
    assert list(cursor.advance(7)) == []
    assert list(cursor.advance(3)) == []
    assert not cursor.at_end
    assert list(cursor.advance(10)) == [3]
    assert cursor.at_end


def test_large_jump_exposes_everything_in_order() -> None:
    cursor = _cursor()
    assert list(cursor.advance(1_000)) == [0, 1, 2, 3]


def test_reset_and_duration() -> None:
    cursor = _cursor()
    cursor.advance(10)
    cursor.reset()
    assert cursor.position == 0
    assert cursor.duration == 10.0
    assert list(cursor.advance(0)) == [0, 1]


def test_empty_timeline() -> None:
    cursor = PlaybackCursor([])
    assert cursor.duration == 0.0
    assert cursor.cutoff(5) is None
    assert list(cursor.advance(5)) == []
    assert not cursor.at_end
