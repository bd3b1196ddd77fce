# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Decode single JSON-lines records into timeline entries."""

from __future__ import annotations

import json

from pydantic import BaseModel, ValidationError

from dsllog.defaults import DAMAGE_TYPE, NARRATIVE_TYPE
from dsllog.logging import get_logger
from dsllog.timeline.models import DamageRecord, Entry, NarrativeRecord

logger = get_logger(__name__)

RECORD_TYPES: dict[str, type[BaseModel]] = {
    NARRATIVE_TYPE: NarrativeRecord,
    DAMAGE_TYPE: DamageRecord,
}


def decode_line(line: str) -> Entry | None:
    """Decode one log line.

    Returns None for anything that is not a usable narrative or damage
    record: malformed JSON, a non-object value, an unknown ``type`` or a
    record whose fields fail validation. None of these are errors.
    """
    try:
        record = json.loads(line)
    except json.JSONDecodeError:
        logger.debug("skip_malformed_line", line=line[:80])
        return None
    if not isinstance(record, dict):
        return None

    kind = record.get("type")
    if not isinstance(kind, str):
        return None
    model = RECORD_TYPES.get(kind)
    if model is None:
        return None

    try:
        parsed = model.model_validate(record)
    except ValidationError as e:
        logger.debug("skip_invalid_record", type=record.get("type"), errors=e.error_count())
        return None
    return parsed.to_entry()  # type: ignore[attr-defined]
