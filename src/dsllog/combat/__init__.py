# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Combat statistics."""

from __future__ import annotations

from dsllog.combat.aggregator import (
    ActorStats,
    FightAggregator,
    FightSummary,
    RoundTally,
    normalize_actor_name,
    tally_round,
)
from dsllog.combat.formatting import format_clock, format_number, round_lines, summary_lines

__all__ = [
    "ActorStats",
    "FightAggregator",
    "FightSummary",
    "RoundTally",
    "format_clock",
    "format_number",
    "normalize_actor_name",
    "round_lines",
    "summary_lines",
    "tally_round",
]
