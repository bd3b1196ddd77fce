# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Typed records for the game client's JSON-lines log."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from dsllog.defaults import DAMAGE_TYPE, NARRATIVE_TYPE


class ActorRow(BaseModel):
    """Per-actor totals reported by the client for one round.

    Target-side columns exist in the payload but are ignored.
    """

    actor: str = ""
    total_as_source: float = Field(
        default=0.0,
        validation_alias=AliasChoices("totalAsSource", "damageAsSource", "total_as_source"),
    )
    count_as_source: int = Field(
        default=0,
        validation_alias=AliasChoices("countAsSource", "hitsAsSource", "count_as_source"),
    )

    model_config = ConfigDict(extra="ignore")

    @field_validator("total_as_source", "count_as_source", mode="before")
    @classmethod
    def missing_number_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("actor", mode="before")
    @classmethod
    def missing_actor_is_blank(cls, value: Any) -> Any:
        return "" if value is None else value


class DamageEvent(BaseModel):
    """A single swing. An amount of exactly zero is a miss."""

    source: str = ""
    target: str = ""
    amount: float = 0.0

    model_config = ConfigDict(extra="ignore")

    @field_validator("amount", mode="before")
    @classmethod
    def missing_amount_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("source", "target", mode="before")
    @classmethod
    def missing_name_is_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def is_miss(self) -> bool:
        return self.amount == 0


class DamageRound(BaseModel):
    """Aggregate payload of one ``damage`` record."""

    total_damage: float = Field(
        default=0.0, validation_alias=AliasChoices("totalDamage", "total_damage")
    )
    hits: int = 0
    misses: int = 0
    by_source: list[ActorRow] | None = Field(
        default=None, validation_alias=AliasChoices("bySource", "by_source")
    )
    events: list[DamageEvent] | None = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("total_damage", "hits", "misses", mode="before")
    @classmethod
    def missing_number_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


class EntryKind(str, Enum):
    NARRATIVE = "narrative"
    DAMAGE = "damage"


class Entry(BaseModel):
    """One normalized timeline item."""

    timestamp: datetime
    kind: EntryKind
    text: str = ""
    damage: DamageRound | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("timestamp", mode="after")
    @classmethod
    def naive_is_utc(cls, value: datetime) -> datetime:
        # Mixed naive/aware stamps would make the timeline unsortable
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def is_narrative(self) -> bool:
        return self.kind is EntryKind.NARRATIVE

    @property
    def is_damage(self) -> bool:
        return self.kind is EntryKind.DAMAGE


class NarrativeRecord(BaseModel):
    """A ``dsl-message`` line. A non-string payload fails validation and the line is skipped."""

    type: Literal["dsl-message"] = NARRATIVE_TYPE
    timestamp: datetime
    payload: str = ""

    model_config = ConfigDict(extra="ignore")

    @field_validator("payload", mode="before")
    @classmethod
    def missing_payload_is_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    def to_entry(self) -> Entry:
        return Entry(timestamp=self.timestamp, kind=EntryKind.NARRATIVE, text=self.payload)


class DamageRecord(BaseModel):
    type: Literal["damage"] = DAMAGE_TYPE
    timestamp: datetime
    payload: DamageRound = Field(default_factory=DamageRound)

    model_config = ConfigDict(extra="ignore")

    @field_validator("payload", mode="before")
    @classmethod
    def missing_payload_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    def to_entry(self) -> Entry:
        return Entry(timestamp=self.timestamp, kind=EntryKind.DAMAGE, damage=self.payload)
