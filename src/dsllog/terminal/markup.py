# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Translate ANSI SGR colors into forum color markup.

The output uses ``[COLOR=NAME]...[/COLOR]`` tags and never nests them:
every color switch closes the open tag before opening the next.
"""

from __future__ import annotations

ESC = "\x1b"
CLOSE_TAG = "[/COLOR]"

RESET = 0
EXTENDED_FG = 38
EXTENDED_BG = 48
EXTENDED_INDEXED = 5
EXTENDED_RGB = 2

ANSI_COLOR_NAMES: dict[int, str] = {
    30: "BLACK",
    31: "RED",
    32: "GREEN",
    33: "YELLOW",
    34: "BLUE",
    35: "MAGENTA",
    36: "CYAN",
    37: "WHITE",
    90: "BROWN",
    91: "ORANGE",
    92: "LIME GREEN",
    93: "YELLOW",
    94: "BLUE",
    95: "MAGENTA",
    96: "CYAN",
    97: "WHITE",
}

# The one 256-color index the forum palette has a name for
INDEXED_COLOR_NAMES: dict[int, str] = {208: "ORANGE"}


def open_tag(name: str) -> str:
    return f"[COLOR={name}]"


def _parse_params(raw: str) -> list[int]:
    # An empty parameter (``ESC[m`` or ``ESC[;31m``) means 0
    codes: list[int] = []
    for part in raw.split(";"):
        if not part:
            codes.append(RESET)
        elif part.isdigit():
            codes.append(int(part))
    return codes


def pick_color(codes: list[int]) -> tuple[bool, str | None]:
    """Resolve one SGR parameter list.

    Returns ``(reset, color_name)``. Bright foregrounds (90-97) win over
    basic ones (30-37), which win over an indexed ``38;5;n`` foreground.
    Extended background and truecolor forms are skipped whole so their
    arguments are never misread as color codes.
    """
    reset = False
    bright: int | None = None
    basic: int | None = None
    indexed: int | None = None

    i = 0
    while i < len(codes):
        code = codes[i]
        if code in (EXTENDED_FG, EXTENDED_BG):
            mode = codes[i + 1] if i + 1 < len(codes) else None
            if mode == EXTENDED_INDEXED:
                if code == EXTENDED_FG and i + 2 < len(codes) and indexed is None:
                    indexed = codes[i + 2]
                i += 3
            elif mode == EXTENDED_RGB:
                i += 5
            else:
                i += 2
            continue
        if code == RESET:
            reset = True
        elif 90 <= code <= 97 and bright is None:
            bright = code
        elif 30 <= code <= 37 and basic is None:
            basic = code
        i += 1

    if bright is not None:
        return reset, ANSI_COLOR_NAMES[bright]
    if basic is not None:
        return reset, ANSI_COLOR_NAMES[basic]
    if indexed is not None:
        return reset, INDEXED_COLOR_NAMES.get(indexed, f"XTERM-{indexed}")
    return reset, None


class AnsiToMarkup:
    """Single-pass scanner over one line with one piece of state: the open color."""

    def __init__(self) -> None:
        self.open_color: str | None = None
        self._out: list[str] = []

    def translate(self, line: str) -> str:
        self.open_color = None
        self._out = []
        pos = 0
        length = len(line)

        while pos < length:
            start = line.find(ESC, pos)
            if start == -1:
                self._out.append(line[pos:])
                break
            self._out.append(line[pos:start])

            end, params, final = self._scan_csi(line, start)
            if end is None:
                # Lone ESC, not a control sequence
                self._out.append(ESC)
                pos = start + 1
                continue

            if final == "m":
                next_char = line[end] if end < length else ""
                self._apply_sgr(_parse_params(params), next_char)
            pos = end

        self._close()
        return "".join(self._out)

    @staticmethod
    def _scan_csi(line: str, start: int) -> tuple[int | None, str, str]:
        """Find the end of ``ESC [ params intermediates final`` at ``start``.

        Returns ``(end, params, final)``; ``end`` is None when no complete
        sequence starts there.
        """
        pos = start + 1
        if pos >= len(line) or line[pos] != "[":
            return None, "", ""
        pos += 1
        params_start = pos
        while pos < len(line) and "0" <= line[pos] <= "?":
            pos += 1
        params = line[params_start:pos]
        while pos < len(line) and " " <= line[pos] <= "/":
            pos += 1
        if pos >= len(line) or not ("@" <= line[pos] <= "~"):
            return None, "", ""
        return pos + 1, params, line[pos]

    def _apply_sgr(self, codes: list[int], next_char: str) -> None:
        reset, color = pick_color(codes)
        if reset:
            self._close()
        if color is None:
            return
        # A tag right before a literal "]" breaks the forum's parser
        if next_char == "]":
            return
        self._close()
        self._out.append(open_tag(color))
        self.open_color = color

    def _close(self) -> None:
        if self.open_color is not None:
            self._out.append(CLOSE_TAG)
            self.open_color = None


def ansi_to_markup(line: str) -> str:
    """Translate one line; see :class:`AnsiToMarkup`."""
    return AnsiToMarkup().translate(line)
