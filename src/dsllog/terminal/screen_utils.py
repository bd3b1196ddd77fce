# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Plain-text helpers for game client output."""

import re

_ANSI_ESCAPE_RE = re.compile(r"\x1b(?:\[[0-?]*[ -/]*[@-~]|[@-_])")


def strip_ansi_codes(text: str) -> str:
    """Remove ANSI escape/control sequences from text.

    Args:
        text: Text potentially containing ANSI codes

    Returns:
        Text with ANSI codes removed
    """
    if not text:
        return ""
    return _ANSI_ESCAPE_RE.sub("", text)


def visible_line(text: str) -> str:
    """Return a line that still occupies a row when rendered.

    Empty narrative text becomes a single space.
    """
    return text if text else " "
