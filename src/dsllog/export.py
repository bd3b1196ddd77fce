# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Whole-log exports: plain text and forum color markup."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from dsllog.combat.aggregator import tally_round
from dsllog.combat.formatting import by_source_lines, round_header
from dsllog.terminal.markup import ansi_to_markup
from dsllog.terminal.screen_utils import strip_ansi_codes

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dsllog.timeline.models import Entry

ExportFormat = Literal["plain", "markup"]


def _export_lines(entries: Iterable[Entry], markup: bool) -> list[str]:
    lines: list[str] = []
    for entry in entries:
        if entry.is_damage and entry.damage is not None:
            header = round_header(entry.damage)
            lines.append(f"[B]{header}[/B]" if markup else header)
            lines.extend(by_source_lines(tally_round(entry.damage)))
        elif markup:
            lines.append(ansi_to_markup(entry.text))
        else:
            lines.append(strip_ansi_codes(entry.text))
    return lines


def export_plain(entries: Iterable[Entry]) -> str:
    """Narrative with escapes stripped; rounds as header plus by-source lines."""
    return "\n".join(_export_lines(entries, markup=False))


def export_markup(entries: Iterable[Entry]) -> str:
    """Narrative as color markup; round headers in bold."""
    return "\n".join(_export_lines(entries, markup=True))


def export_log(entries: Iterable[Entry], fmt: ExportFormat = "plain") -> str:
    if fmt == "markup":
        return export_markup(entries)
    return export_plain(entries)
