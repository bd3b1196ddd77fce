# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Replay driver: feeds exposed entries through fight aggregation.

All session state lives in one :class:`PipelineState`. Loading a log
replaces it whole; a backward seek rebuilds it from zero so fight
statistics never count a round twice.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dsllog.combat.aggregator import FightAggregator, FightSummary, tally_round
from dsllog.combat.formatting import round_lines, summary_lines
from dsllog.logging import get_logger
from dsllog.replay.cursor import PlaybackCursor
from dsllog.settings import Settings
from dsllog.terminal.markup import ansi_to_markup
from dsllog.terminal.screen_utils import visible_line
from dsllog.timeline.parser import parse_log

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dsllog.replay.sinks import LineSink
    from dsllog.timeline.models import Entry

logger = get_logger(__name__)


@dataclass
class PipelineState:
    timeline: list[Entry]
    cursor: PlaybackCursor
    aggregator: FightAggregator
    elapsed: float = 0.0
    final_flush_done: bool = False


class ReplayPipeline:
    """Turns virtual elapsed time into output lines for one loaded log."""

    def __init__(self, settings: Settings | None = None, *, markup: bool = False) -> None:
        self.settings = settings or Settings()
        self.markup = markup
        self.state: PipelineState | None = None

    def load(self, text: str) -> PipelineState:
        return self.load_entries(parse_log(text))

    def load_entries(self, entries: Iterable[Entry]) -> PipelineState:
        timeline = list(entries)
        self.state = PipelineState(
            timeline=timeline,
            cursor=PlaybackCursor(timeline),
            aggregator=FightAggregator(self.settings.fight_gap_seconds),
        )
        logger.info("log_loaded", entries=len(timeline), duration=self.duration)
        return self.state

    @property
    def duration(self) -> float:
        return self.state.cursor.duration if self.state else 0.0

    @property
    def elapsed(self) -> float:
        return self.state.elapsed if self.state else 0.0

    def advance(self, elapsed: float) -> list[str]:
        """Process every entry newly exposed at ``elapsed`` and return its lines.

        Rounds crossed by a large jump are all aggregated, in timeline
        order. A fight whose deadline passes during the jump is flushed at
        the point in the timeline where it expired.
        """
        state = self.state
        if state is None or not state.timeline:
            return []

        elapsed = max(elapsed, state.elapsed)
        state.elapsed = elapsed
        aggregator = state.aggregator
        lines: list[str] = []

        for index in state.cursor.advance(elapsed):
            entry = state.timeline[index]
            lines.extend(self._summary(aggregator.check_timeout(entry.timestamp)))
            if entry.is_damage and entry.damage is not None:
                lines.extend(self._summary(aggregator.process_round(entry.damage, entry.timestamp)))
                lines.extend(round_lines(entry.damage, tally_round(entry.damage)))
            else:
                lines.append(self._narrative(entry.text))

        cutoff = state.cursor.cutoff(elapsed)
        if cutoff is not None:
            lines.extend(self._summary(aggregator.check_timeout(cutoff)))

        if state.cursor.at_end and not state.final_flush_done:
            state.final_flush_done = True
            lines.extend(self._summary(aggregator.flush_now(reason="end_of_log")))

        return lines

    def seek(self, elapsed: float) -> list[str]:
        """Move the clock to ``elapsed``.

        Seeking backward resets the cursor and the aggregator and replays
        from zero, so the returned lines are a complete re-render.
        """
        state = self.state
        if state is None:
            return []
        elapsed = max(0.0, elapsed)
        if elapsed < state.elapsed:
            self.reset()
        return self.advance(elapsed)

    def skip_forward(self) -> list[str]:
        return self.seek(min(self.duration, self.elapsed + self.settings.skip_seconds))

    def skip_back(self) -> list[str]:
        return self.seek(max(0.0, self.elapsed - self.settings.skip_seconds))

    def reset(self) -> None:
        """Rewind to zero with an empty accumulator."""
        state = self.state
        if state is None:
            return
        state.cursor.reset()
        state.aggregator.reset()
        state.elapsed = 0.0
        state.final_flush_done = False

    def run(self, sink: LineSink, elapsed: float) -> int:
        """Advance to ``elapsed`` and write the new lines to ``sink``."""
        lines = self.advance(elapsed)
        for line in lines:
            sink.write_line(line)
        return len(lines)

    def _narrative(self, text: str) -> str:
        if self.markup:
            text = ansi_to_markup(text)
        return visible_line(text)

    @staticmethod
    def _summary(summary: FightSummary | None) -> list[str]:
        if summary is None:
            return []
        return summary_lines(summary)
