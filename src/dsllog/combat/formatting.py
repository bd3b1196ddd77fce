# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Render rounds and fight summaries as output lines."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dsllog.combat.aggregator import ActorStats, FightSummary, RoundTally
    from dsllog.timeline.models import DamageRound

ROUND_PREFIX = "⮞ Damage Round:"
SUMMARY_PREFIX = "— Fight summary —"
BLOCK_SPACING = ["", ""]
TENTH = Decimal("0.1")


def format_number(value: float) -> str:
    """Round to one decimal and drop a trailing ``.0`` (12.0 -> "12", 12.34 -> "12.3")."""
    if not math.isfinite(value):
        return str(value)
    # Half-up on the shortest repr: 12.25 -> "12.3"
    text = str(Decimal(repr(value)).quantize(TENTH, rounding=ROUND_HALF_UP))
    if text.endswith(".0"):
        text = text[:-2]
    if text == "-0":
        text = "0"
    return text


def format_clock(seconds: float) -> str:
    """Format seconds as ``HH:MM:SS``."""
    total = max(0, int(seconds))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def round_header(damage: DamageRound) -> str:
    return (
        f"{ROUND_PREFIX} total={format_number(damage.total_damage)}, "
        f"hits={damage.hits}, misses={damage.misses}"
    )


def actor_line(name: str, stats: ActorStats) -> str:
    return f"  {name}: {format_number(stats.damage)} dmg, {stats.hits} hits, {stats.misses} misses"


def by_source_lines(tally: RoundTally) -> list[str]:
    if not tally.per_actor:
        return []
    return ["By source:"] + [actor_line(name, stats) for name, stats in tally.per_actor.items()]


def round_lines(damage: DamageRound, tally: RoundTally) -> list[str]:
    """Header, optional by-source block, then two blank lines."""
    return [round_header(damage), *by_source_lines(tally), *BLOCK_SPACING]


def summary_header(summary: FightSummary) -> str:
    totals = summary.totals
    return (
        f"{SUMMARY_PREFIX} totalDamage={format_number(totals.damage)}, "
        f"hits={totals.hits}, misses={totals.misses}"
    )


def summary_lines(summary: FightSummary) -> list[str]:
    lines = [summary_header(summary)]
    lines.extend(actor_line(name, stats) for name, stats in summary.actors)
    lines.extend(BLOCK_SPACING)
    return lines
