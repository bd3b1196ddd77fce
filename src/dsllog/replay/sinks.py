# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Line sinks that receive replay output."""

from __future__ import annotations

from typing import IO, Protocol

import click


class LineSink(Protocol):
    def write_line(self, text: str) -> None: ...


class EchoSink:
    """Writes each line to a stream (stdout by default) via click."""

    def __init__(self, file: IO[str] | None = None) -> None:
        self.file = file

    def write_line(self, text: str) -> None:
        click.echo(text, file=self.file)


class MemorySink:
    """Collects lines in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)

    def clear(self) -> None:
        self.lines.clear()

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
