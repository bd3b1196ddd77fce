# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Terminal text handling: ANSI stripping and markup translation."""

from __future__ import annotations

from dsllog.terminal.markup import AnsiToMarkup, ansi_to_markup
from dsllog.terminal.screen_utils import strip_ansi_codes, visible_line

__all__ = [
    "AnsiToMarkup",
    "ansi_to_markup",
    "strip_ansi_codes",
    "visible_line",
]
