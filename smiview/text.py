"""Text measurement and coloured terminal output helpers."""

from __future__ import annotations

from enum import Enum
from typing import TextIO, Union

_CSI = "\x1b["
_RESET = f"{_CSI}0m"


class Color(Enum):
    """Named terminal colours, valued by their 256-colour palette index."""

    BLACK = 0
    DARK_RED = 1
    DARK_GREEN = 2
    DARK_YELLOW = 3
    DARK_BLUE = 4
    DARK_MAGENTA = 5
    DARK_CYAN = 6
    GREY = 7
    DARK_GREY = 8
    RED = 9
    GREEN = 10
    YELLOW = 11
    BLUE = 12
    MAGENTA = 13
    CYAN = 14
    WHITE = 15


ColorSpec = Union[Color, "tuple[int, int, int]"]


def _color_params(color: ColorSpec) -> str:
    if isinstance(color, Color):
        return f"5;{color.value}"
    red, green, blue = color
    return f"2;{red};{green};{blue}"


def char_display_width(c: str) -> int:
    """Return the number of terminal columns a single character occupies.

    Arrows and every other character are treated as one column wide.
    Raises ValueError when ``c`` is not exactly one character.
    """
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)}")
    return 1


def display_width(s: str) -> int:
    """Return the display width of a string."""
    return sum(char_display_width(c) for c in s)


def truncate_to_width(s: str, max_width: int) -> str:
    """Return the longest prefix of ``s`` that fits in ``max_width`` columns."""
    result = []
    current = 0
    for c in s:
        width = char_display_width(c)
        if current + width > max_width:
            break
        result.append(c)
        current += width
    return "".join(result)


def format_ram_value(gb_value: float) -> str:
    """Format a size in gigabytes, switching to terabytes from 1024 GB."""
    if gb_value >= 1024.0:
        return f"{gb_value / 1024.0:.2f}TB"
    return f"{gb_value:.0f}GB"


def print_colored_text(
    out: TextIO,
    text: str,
    fg_color: ColorSpec,
    bg_color: ColorSpec | None = None,
    width: int | None = None,
) -> None:
    """Write ``text`` in the given colours, optionally fitted to ``width``."""
    if width is not None:
        text = text[:width] if len(text) > width else text.ljust(width)
    parts = [f"{_CSI}38;{_color_params(fg_color)}m"]
    if bg_color is not None:
        parts.append(f"{_CSI}48;{_color_params(bg_color)}m")
    parts.append(text)
    parts.append(_RESET)
    out.write("".join(parts))


def move_to(out: TextIO, x: int, y: int) -> None:
    """Move the cursor to column ``x`` and row ``y`` (both zero based)."""
    out.write(f"{_CSI}{y + 1};{x + 1}H")