# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Builders for JSON-lines log records used across tests."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from typing import Any

from dsllog.timeline.models import DamageEvent, DamageRound, Entry, EntryKind

BASE_TIME = datetime(2025, 3, 1, 20, 0, 0, tzinfo=timezone.utc)


def at(seconds: float) -> datetime:
    """Timestamp ``seconds`` after the base time."""
    return BASE_TIME + timedelta(seconds=seconds)


def iso(seconds: float) -> str:
    return at(seconds).isoformat().replace("+00:00", "Z")


def message_line(seconds: float, payload: str) -> str:
    return json.dumps({"type": "dsl-message", "timestamp": iso(seconds), "payload": payload})


def damage_line(seconds: float, **payload: Any) -> str:
    return json.dumps({"type": "damage", "timestamp": iso(seconds), "payload": payload})


def swing(source: str, amount: float, target: str = "Orc") -> dict[str, Any]:
    return {"source": source, "target": target, "amount": amount}


def hit_round(*swings: tuple[str, float]) -> DamageRound:
    """A round built only from raw events."""
    events = [DamageEvent(source=source, target="Orc", amount=amount) for source, amount in swings]
    return DamageRound(
        total_damage=sum(amount for _, amount in swings),
        hits=sum(1 for _, amount in swings if amount > 0),
        misses=sum(1 for _, amount in swings if amount == 0),
        events=events,
    )


def damage_entry(seconds: float, damage: DamageRound) -> Entry:
    return Entry(timestamp=at(seconds), kind=EntryKind.DAMAGE, damage=damage)


def narrative_entry(seconds: float, text: str) -> Entry:
    return Entry(timestamp=at(seconds), kind=EntryKind.NARRATIVE, text=text)
