# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import pytest

from dsllog.terminal.markup import AnsiToMarkup, ansi_to_markup, pick_color


def test_color_switches_close_before_reopening() -> None:
    line = "\x1b[31mA \x1b[32mB \x1b[0mC"
    assert ansi_to_markup(line) == "[COLOR=RED]A [/COLOR][COLOR=GREEN]B [/COLOR]C"


def test_color_before_bracket_is_suppressed() -> None:
    assert ansi_to_markup("\x1b[31m]") == "]"


def test_suppressed_switch_keeps_current_tag_open() -> None:
    assert ansi_to_markup("\x1b[31mX\x1b[32m]Y") == "[COLOR=RED]X]Y[/COLOR]"


def test_reset_still_closes_before_bracket() -> None:
    assert ansi_to_markup("\x1b[31mA\x1b[0;32m]") == "[COLOR=RED]A[/COLOR]]"


def test_open_tag_is_closed_at_end_of_line() -> None:
    assert ansi_to_markup("\x1b[36mstill cyan") == "[COLOR=CYAN]still cyan[/COLOR]"


def test_same_color_closes_and_reopens() -> None:
    assert ansi_to_markup("\x1b[31ma\x1b[31mb") == "[COLOR=RED]a[/COLOR][COLOR=RED]b[/COLOR]"


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("\x1b[31;92mZ", "[COLOR=LIME GREEN]Z[/COLOR]"),
        ("\x1b[1;33mgold", "[COLOR=YELLOW]gold[/COLOR]"),
        ("\x1b[90mdim", "[COLOR=BROWN]dim[/COLOR]"),
        ("\x1b[38;5;208mhot", "[COLOR=ORANGE]hot[/COLOR]"),
        ("\x1b[38;5;45mcool", "[COLOR=XTERM-45]cool[/COLOR]"),
        ("\x1b[38;5;31mx", "[COLOR=XTERM-31]x[/COLOR]"),
        ("\x1b[48;5;31mx", "x"),
        ("\x1b[38;2;255;0;0mx", "x"),
    ],
)
def test_color_selection(line: str, expected: str) -> None:
    assert ansi_to_markup(line) == expected


def test_reset_without_open_tag_emits_nothing() -> None:
    assert ansi_to_markup("\x1b[0mplain") == "plain"


def test_empty_parameter_list_is_reset() -> None:
    assert ansi_to_markup("\x1b[31mA\x1b[mB") == "[COLOR=RED]A[/COLOR]B"


def test_non_color_sequences_are_consumed() -> None:
    assert ansi_to_markup("\x1b[2J\x1b[1mBold\x1b[K") == "Bold"


def test_text_without_escapes_is_copied() -> None:
    assert ansi_to_markup("[b]literal[/b] text") == "[b]literal[/b] text"


def test_lone_escape_is_copied() -> None:
    assert ansi_to_markup("a\x1bb") == "a\x1bb"


def test_translator_starts_each_line_fresh() -> None:
    translator = AnsiToMarkup()
    assert translator.translate("\x1b[31mred") == "[COLOR=RED]red[/COLOR]"
    assert translator.open_color is None
    assert translator.translate("plain") == "plain"


def test_pick_color_reports_reset_and_color() -> None:
    assert pick_color([0, 31]) == (True, "RED")
    assert pick_color([1]) == (False, None)
