"""Screen chrome: loading indicator and the function-key status line."""

from __future__ import annotations

from enum import Enum
from typing import TextIO

from smiview.text import (
    Color,
    display_width,
    move_to,
    print_colored_text,
    truncate_to_width,
)

LOADING_MESSAGE = "Loading..."


class SortCriteria(Enum):
    """Keys by which devices and processes can be sorted."""

    DEFAULT = "default"
    PID = "pid"
    USER = "user"
    PRIORITY = "priority"
    NICE = "nice"
    VIRTUAL_MEMORY = "virtual_memory"
    RESIDENT_MEMORY = "resident_memory"
    STATE = "state"
    CPU_PERCENT = "cpu_percent"
    MEMORY_PERCENT = "memory_percent"
    GPU_PERCENT = "gpu_percent"
    GPU_MEMORY_USAGE = "gpu_memory_usage"
    CPU_TIME = "cpu_time"
    COMMAND = "command"
    UTILIZATION = "utilization"
    GPU_MEMORY = "gpu_memory"
    POWER = "power"
    TEMPERATURE = "temperature"


class SortDirection(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


_SORT_INDICATORS = {
    SortCriteria.DEFAULT: "Sort:Default",
    SortCriteria.PID: "Sort:PID",
    SortCriteria.USER: "Sort:User",
    SortCriteria.PRIORITY: "Sort:Priority",
    SortCriteria.NICE: "Sort:Nice",
    SortCriteria.VIRTUAL_MEMORY: "Sort:VIRT",
    SortCriteria.RESIDENT_MEMORY: "Sort:RES",
    SortCriteria.STATE: "Sort:State",
    SortCriteria.CPU_PERCENT: "Sort:CPU%",
    SortCriteria.MEMORY_PERCENT: "Sort:MEM%",
    SortCriteria.GPU_PERCENT: "Sort:GPU%",
    SortCriteria.GPU_MEMORY_USAGE: "Sort:GPU-Mem",
    SortCriteria.CPU_TIME: "Sort:Time",
    SortCriteria.COMMAND: "Sort:Command",
    SortCriteria.UTILIZATION: "Sort:Util",
    SortCriteria.GPU_MEMORY: "Sort:GPU-Mem",
    SortCriteria.POWER: "Sort:Power",
    SortCriteria.TEMPERATURE: "Sort:Temp",
}


def sort_indicator(criteria: SortCriteria) -> str:
    """Return the short label shown for the active sort key."""
    return _SORT_INDICATORS[criteria]


def function_keys_text(sort_criteria: SortCriteria, is_remote: bool) -> str:
    """Return the key help line for the bottom of the screen."""
    indicator = sort_indicator(sort_criteria)
    if is_remote:
        return (
            "h:Help q:Exit ←→:Tabs ↑↓:Scroll PgUp/PgDn:Page "
            f"d:Default u:Util g:GPU-Mem [{indicator}]"
        )
    return (
        "h:Help q:Exit ←→:Tabs ↑↓:Scroll PgUp/PgDn:Page p:PID m:Memory "
        f"d:Default u:Util g:GPU-Mem [{indicator}]"
    )


def notification_color(message: str) -> Color:
    """Pick a colour for a notification from the words it contains."""
    if "Error" in message or "Failed" in message:
        return Color.RED
    if "Warning" in message:
        return Color.YELLOW
    return Color.CYAN


def print_loading_indicator(out: TextIO, cols: int, rows: int) -> None:
    """Write a centred loading message."""
    x = max(0, cols - len(LOADING_MESSAGE)) // 2
    y = rows // 2
    move_to(out, x, y)
    print_colored_text(out, LOADING_MESSAGE, Color.YELLOW)


def print_function_keys(
    out: TextIO,
    cols: int,
    rows: int,
    sort_criteria: SortCriteria,
    notification_message: str | None,
    is_remote: bool,
) -> None:
    """Write the function-key line, followed by any notification, on the last row."""
    if rows < 1:
        raise ValueError("the screen must have at least one row")
    move_to(out, 0, rows - 1)

    keys = function_keys_text(sort_criteria, is_remote)
    if display_width(keys) > cols:
        keys = truncate_to_width(keys, cols)

    message = notification_message or ""
    message_len = display_width(message)

    available = max(0, cols - (message_len + 1)) if message_len > 0 else cols
    if display_width(keys) > available:
        keys = truncate_to_width(keys, available)

    print_colored_text(out, keys, Color.DARK_GREEN)

    if message_len > 0:
        print_colored_text(out, " ", Color.WHITE)
        print_colored_text(out, message, notification_color(message))

    used = display_width(keys) + (message_len + 1 if message_len > 0 else 0)
    remaining = cols - min(used, cols)
    if remaining > 0:
        print_colored_text(out, " " * remaining, Color.WHITE)