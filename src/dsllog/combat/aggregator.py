# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Fight aggregation: per-actor damage, hits and misses across rounds.

A fight is a run of damage rounds with no gap of ``gap_seconds`` or more
between them. When a fight ends (a long gap, a timeout on the playback
clock, or the end of the log) its accumulated statistics are flushed as a
:class:`FightSummary` and the accumulator starts over.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from dsllog.defaults import FIGHT_GAP_SECONDS
from dsllog.logging import get_logger

if TYPE_CHECKING:
    from dsllog.timeline.models import DamageRound

logger = get_logger(__name__)

_TAG_PREFIX_RE = re.compile(r"^\s*\[[^\]]*\]\s*")


def normalize_actor_name(name: str) -> str:
    """Strip one leading bracketed tag such as a guild or title.

    ``"[Clan] Rogar"`` becomes ``"Rogar"``. A name that is nothing but a
    tag keeps its original (trimmed) text.
    """
    stripped = _TAG_PREFIX_RE.sub("", name, count=1)
    return stripped or name.strip()


@dataclass
class ActorStats:
    damage: float = 0.0
    hits: int = 0
    misses: int = 0

    def add(self, other: ActorStats) -> None:
        self.damage += other.damage
        self.hits += other.hits
        self.misses += other.misses

    @property
    def is_zero(self) -> bool:
        return self.damage == 0 and self.hits == 0 and self.misses == 0


@dataclass
class RoundTally:
    """Figures one round contributes, keyed by normalized actor."""

    per_actor: dict[str, ActorStats] = field(default_factory=dict)
    totals: ActorStats = field(default_factory=ActorStats)

    def actor(self, name: str) -> ActorStats:
        key = normalize_actor_name(name)
        if key not in self.per_actor:
            self.per_actor[key] = ActorStats()
        return self.per_actor[key]


@dataclass
class FightSummary:
    totals: ActorStats
    actors: list[tuple[str, ActorStats]]


@dataclass
class FightAccumulator:
    per_actor: dict[str, ActorStats] = field(default_factory=dict)
    totals: ActorStats = field(default_factory=ActorStats)
    last_round_at: datetime | None = None
    flush_deadline: datetime | None = None
    flushed_by_timer: bool = False

    @property
    def is_empty(self) -> bool:
        return self.totals.is_zero and all(s.is_zero for s in self.per_actor.values())


def tally_round(damage: DamageRound) -> RoundTally:
    """Derive per-actor and total figures for one round.

    Damage and hits come from ``by_source`` when it has rows, else from
    the raw events with a positive amount. With neither, the round's own
    totals count toward the fight total only. Misses are counted from the
    raw events (amount == 0) when there are any, else taken from the
    round's ``misses`` field.
    """
    tally = RoundTally()
    events = damage.events or []

    if damage.by_source:
        for row in damage.by_source:
            stats = tally.actor(row.actor)
            stats.damage += row.total_as_source
            stats.hits += row.count_as_source
            tally.totals.damage += row.total_as_source
            tally.totals.hits += row.count_as_source
    elif events:
        for event in events:
            if event.amount > 0:
                stats = tally.actor(event.source)
                stats.damage += event.amount
                stats.hits += 1
                tally.totals.damage += event.amount
                tally.totals.hits += 1
    else:
        tally.totals.damage += damage.total_damage
        tally.totals.hits += damage.hits

    if events:
        for event in events:
            if event.is_miss:
                tally.actor(event.source).misses += 1
                tally.totals.misses += 1
    else:
        tally.totals.misses += damage.misses

    return tally


class FightAggregator:
    """Accumulates rounds into fights and decides when to flush them."""

    def __init__(self, gap_seconds: float = FIGHT_GAP_SECONDS) -> None:
        self.gap = timedelta(seconds=gap_seconds)
        self.state = FightAccumulator()

    def reset(self) -> None:
        self.state = FightAccumulator()

    def process_round(self, damage: DamageRound, timestamp: datetime) -> FightSummary | None:
        """Add one round.

        Returns the summary of the previous fight when this round starts
        a new one; that summary belongs before the round's own output.
        """
        state = self.state
        flushed = None
        if (
            state.last_round_at is not None
            and timestamp - state.last_round_at >= self.gap
            and not state.is_empty
        ):
            flushed = self.flush_now(reason="gap")

        tally = tally_round(damage)
        for name, stats in tally.per_actor.items():
            self.state.per_actor.setdefault(name, ActorStats()).add(stats)
        self.state.totals.add(tally.totals)

        self.state.last_round_at = timestamp
        self.state.flush_deadline = timestamp + self.gap
        self.state.flushed_by_timer = False
        return flushed

    def check_timeout(self, now: datetime) -> FightSummary | None:
        """Flush once the playback clock passes the current fight's deadline."""
        state = self.state
        if state.flush_deadline is None or state.flushed_by_timer:
            return None
        if now < state.flush_deadline:
            return None
        return self.flush_now(reason="timeout")

    def flush_now(self, reason: str = "forced") -> FightSummary | None:
        """Emit and clear the current fight. No-op when nothing accumulated."""
        state = self.state
        if state.is_empty:
            return None

        # sorted() is stable, so equal damage keeps first-seen order
        actors = sorted(state.per_actor.items(), key=lambda item: -item[1].damage)
        summary = FightSummary(totals=state.totals, actors=actors)
        logger.debug(
            "fight_flushed",
            reason=reason,
            total_damage=summary.totals.damage,
            hits=summary.totals.hits,
            misses=summary.totals.misses,
            actors=len(actors),
        )

        self.state = FightAccumulator(flushed_by_timer=True)
        return summary
