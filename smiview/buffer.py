"""Flicker-free screen rendering that only rewrites lines that changed."""

from __future__ import annotations

import shutil
import sys
from collections.abc import Callable
from typing import TextIO

from smiview.text import move_to

CLEAR_LINE = "\x1b[2K"
CLEAR_SCREEN = "\x1b[2J"

SizeProvider = Callable[[], "tuple[int, int]"]


def _terminal_size() -> tuple[int, int]:
    size = shutil.get_terminal_size(fallback=(80, 24))
    return size.columns, size.lines


def _split_lines(content: str) -> list[str]:
    """Split text into lines, dropping one trailing newline and any ``\\r``."""
    if not content:
        return []
    parts = content.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _fit(lines: list[str], height: int) -> list[str]:
    """Pad with empty lines or cut ``lines`` so it holds exactly ``height`` entries."""
    return lines[:height] + [""] * max(0, height - len(lines))


class DifferentialRenderer:
    """Writes screen content, touching only the lines that differ from last time."""

    def __init__(
        self, out: TextIO | None = None, size_provider: SizeProvider | None = None
    ) -> None:
        self._out = out if out is not None else sys.stdout
        self._size = size_provider if size_provider is not None else _terminal_size
        self.screen_width, self.screen_height = self._size()
        self.previous_lines: list[str] = []

    def render_differential(self, content: str) -> None:
        """Draw ``content`` line by line, skipping lines already on screen."""
        current_lines = _split_lines(content)

        if not self.previous_lines:
            self.previous_lines = [""] * self.screen_height

        width, height = self._size()
        if width != self.screen_width or height != self.screen_height:
            self.screen_width, self.screen_height = width, height
            self.previous_lines = _fit(self.previous_lines, self.screen_height)

        previous = self.previous_lines
        for line_num, line in enumerate(current_lines[: self.screen_height]):
            if line_num >= len(previous) or previous[line_num] != line:
                move_to(self._out, 0, line_num)
                self._out.write(line)

        stale_end = min(len(previous), self.screen_height)
        for line_num in range(len(current_lines), stale_end):
            if previous[line_num]:
                move_to(self._out, 0, line_num)
                self._out.write(CLEAR_LINE)

        self._out.flush()
        self.previous_lines = _fit(current_lines, self.screen_height)

    def force_clear(self) -> None:
        """Clear the whole screen and forget what was drawn."""
        self._out.write(CLEAR_SCREEN)
        self._out.flush()
        self.previous_lines = [""] * self.screen_height