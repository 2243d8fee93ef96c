"""Process table rendering for the local view."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from smiview.chrome import SortCriteria, SortDirection
from smiview.text import Color, ColorSpec, print_colored_text, truncate_to_width

# PID, USER, PRI, NI, VIRT, RES, S, CPU%, MEM%, GPU%, VRAM, TIME+; the command fills the rest.
FIXED_WIDTHS = (7, 12, 3, 3, 6, 6, 1, 5, 5, 5, 7, 8)
_LEFT_ALIGNED = frozenset({1, 6})

_HEADER_COLUMNS = (
    ("PID", SortCriteria.PID),
    ("USER", SortCriteria.USER),
    ("PRI", SortCriteria.PRIORITY),
    ("NI", SortCriteria.NICE),
    ("VIRT", SortCriteria.VIRTUAL_MEMORY),
    ("RES", SortCriteria.RESIDENT_MEMORY),
    ("S", SortCriteria.STATE),
    ("CPU%", SortCriteria.CPU_PERCENT),
    ("MEM%", SortCriteria.MEMORY_PERCENT),
    ("GPU%", SortCriteria.GPU_PERCENT),
    ("VRAM", SortCriteria.GPU_MEMORY_USAGE),
    ("TIME+", SortCriteria.CPU_TIME),
    ("Command", SortCriteria.COMMAND),
)

_ZERO_TIME = "0:00:00"
_MAX_CPU_TIME_SECONDS = 365 * 24 * 3600
_KIB = 1024.0
_MIB = 1024.0 * 1024.0
_GIB = 1024.0 * 1024.0 * 1024.0

_LIGHT_RED = (255, 100, 100)
_AMBER = (255, 200, 0)


@dataclass
class ProcessRow:
    """One process as shown in the table."""

    pid: int
    user: str = ""
    priority: int = 20
    nice_value: int = 0
    memory_vms: int = 0
    memory_rss: int = 0
    state: str = ""
    cpu_percent: float = 0.0
    memory_percent: float = 0.0
    gpu_utilization: float = 0.0
    used_memory: int = 0
    uses_gpu: bool = False
    cpu_time: int = 0
    command: str = ""


def format_memory_size(num_bytes: int) -> str:
    """Format a byte count compactly, e.g. ``187T``, ``123G``, ``500M``, ``16K``."""
    if num_bytes == 0:
        return "0"
    gb = num_bytes / _GIB
    mb = num_bytes / _MIB
    kb = num_bytes / _KIB
    if gb >= 1000.0:
        return f"{gb / 1024.0:.0f}T"
    if gb >= 1.0:
        return f"{gb:.0f}G"
    if mb >= 1.0:
        return f"{mb:.0f}M"
    if kb >= 1.0:
        return f"{kb:.0f}K"
    return str(num_bytes)


def format_cpu_time(seconds: int) -> str:
    """Format CPU seconds as ``h:mm:ss``; implausibly long totals show as zero."""
    if seconds == 0 or seconds > _MAX_CPU_TIME_SECONDS:
        return _ZERO_TIME
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes // 60}:{minutes % 60:02d}:{secs:02d}"


def _sort_arrow(
    column: SortCriteria, active: SortCriteria, direction: SortDirection
) -> str:
    if column != active:
        return ""
    return "↑" if direction is SortDirection.ASCENDING else "↓"


def _align(value: str, idx: int, width: int) -> str:
    return value.ljust(width) if idx in _LEFT_ALIGNED else value.rjust(width)


def build_process_header(
    sort_criteria: SortCriteria, sort_direction: SortDirection
) -> str:
    """Return the table header with an arrow on the active sort column."""
    titles = [
        name + _sort_arrow(criteria, sort_criteria, sort_direction)
        for name, criteria in _HEADER_COLUMNS
    ]
    fixed = [
        _align(title, idx, width)
        for idx, (title, width) in enumerate(zip(titles, FIXED_WIDTHS))
    ]
    return " ".join([*fixed, titles[-1]])


def scroll_line(line: str, offset: int, width: int) -> str:
    """Return the part of ``line`` visible after scrolling, padded to ``width``."""
    if offset < len(line):
        return truncate_to_width(line[offset:], width).ljust(width)
    return " " * width


def process_row_color(
    cpu_percent: float, memory_percent: float, uses_gpu: bool, is_current_user: bool
) -> ColorSpec:
    """Return the base colour of a process row from its load and ownership."""
    if cpu_percent >= 90.0 or memory_percent >= 90.0:
        return Color.RED
    if cpu_percent >= 80.0 or memory_percent >= 80.0:
        return _LIGHT_RED
    if cpu_percent >= 70.0 or memory_percent >= 70.0:
        return Color.YELLOW
    if cpu_percent >= 50.0 or memory_percent >= 50.0:
        return _AMBER
    if uses_gpu and (cpu_percent >= 30.0 or memory_percent >= 30.0):
        return Color.CYAN
    if uses_gpu:
        return Color.GREEN
    if is_current_user:
        return Color.WHITE
    return Color.DARK_GREY


def _format_gpu_percent(process: ProcessRow) -> str:
    if process.uses_gpu and process.gpu_utilization > 0.0:
        return f"{process.gpu_utilization:.1f}"
    return "-" if process.uses_gpu else ""


def _format_gpu_memory(process: ProcessRow) -> str:
    if process.used_memory > 0:
        mb = process.used_memory / _MIB
        return f"{mb / 1024.0:.1f}G" if mb >= 1024.0 else f"{mb:.0f}M"
    return "-" if process.uses_gpu else ""


def _row_values(process: ProcessRow) -> list[str]:
    return [
        str(process.pid),
        truncate_to_width(process.user, FIXED_WIDTHS[1]),
        str(process.priority),
        f"{process.nice_value:+d}",
        format_memory_size(process.memory_vms),
        format_memory_size(process.memory_rss),
        truncate_to_width(process.state, FIXED_WIDTHS[6]),
        f"{process.cpu_percent:.1f}",
        f"{process.memory_percent:.1f}",
        _format_gpu_percent(process),
        _format_gpu_memory(process),
        format_cpu_time(process.cpu_time),
        process.command,
    ]


def _format_column(idx: int, value: str) -> str:
    if idx >= len(FIXED_WIDTHS):
        return value
    width = FIXED_WIDTHS[idx]
    if idx in _LEFT_ALIGNED:
        return truncate_to_width(value, width).ljust(width)
    return value.rjust(width)


def _column_color(
    idx: int, process: ProcessRow, time_plus: str, default: ColorSpec
) -> ColorSpec:
    if idx == 4:
        return Color.WHITE if process.memory_vms == 0 else Color.GREEN
    if idx == 3:
        return Color.WHITE if process.nice_value != 0 else Color.DARK_GREY
    highlighted = {
        0: process.pid > 0,
        2: process.priority != 20,
        5: process.memory_rss > 0,
        7: process.cpu_percent > 0.0,
        8: process.memory_percent > 0.0,
        9: process.gpu_utilization > 0.0,
        10: process.used_memory > 0,
        11: time_plus != _ZERO_TIME,
    }.get(idx, False)
    return Color.WHITE if highlighted else default


def _print_row_colored(
    out: TextIO,
    process: ProcessRow,
    values: list[str],
    current_user: str,
    offset: int,
    width: int,
) -> None:
    default = process_row_color(
        process.cpu_percent,
        process.memory_percent,
        process.uses_gpu,
        process.user == current_user,
    )
    time_plus = values[11]
    current_pos = 0
    output_pos = 0

    for idx, value in enumerate(values):
        is_fixed = idx < len(FIXED_WIDTHS)
        col_start = current_pos
        col_end = (
            current_pos + FIXED_WIDTHS[idx] + 1 if is_fixed else current_pos + len(value)
        )

        if col_end > offset and output_pos < width:
            color = _column_color(idx, process, time_plus, default)
            formatted = _format_column(idx, value)
            skip = max(0, offset - col_start)
            if skip < len(formatted):
                to_print = truncate_to_width(formatted[skip:], max(0, width - output_pos))
                print_colored_text(out, to_print, color)
                output_pos += len(to_print)
            if is_fixed and output_pos < width:
                print_colored_text(out, " ", default)
                output_pos += 1

        current_pos = col_end

    if output_pos < width:
        print_colored_text(out, " " * (width - output_pos), Color.BLACK)


def print_process_info(
    out: TextIO,
    processes: Sequence[ProcessRow],
    selected_index: int,
    start_index: int,
    half_rows: int,
    cols: int,
    horizontal_scroll_offset: int,
    current_user: str,
    sort_criteria: SortCriteria,
    sort_direction: SortDirection,
) -> None:
    """Write the process table with header, visible rows, paging info and totals."""
    out.write("\r\nProcesses:\r\n")
    width = cols

    header = build_process_header(sort_criteria, sort_direction)
    print_colored_text(out, scroll_line(header, horizontal_scroll_offset, width), Color.WHITE)
    out.write("\r\n")

    print_colored_text(out, "─" * min(width, 120), Color.DARK_GREY)
    out.write("\r\n")

    available_rows = max(0, half_rows - 3)
    end_index = min(start_index + available_rows, len(processes))

    for index, process in enumerate(processes[start_index:end_index], start_index):
        values = _row_values(process)
        if index == selected_index:
            row = " ".join(
                [_format_column(i, v) for i, v in enumerate(values[:-1])] + [values[-1]]
            )
            visible = scroll_line(row, horizontal_scroll_offset, width)
            print_colored_text(out, visible, Color.BLACK, Color.WHITE)
        else:
            _print_row_colored(
                out, process, values, current_user, horizontal_scroll_offset, width
            )
        out.write("\r\n")

    if len(processes) > available_rows:
        nav = (
            f"Showing {start_index + 1}-{end_index} of {len(processes)} processes "
            "(Use ↑↓ to navigate, PgUp/PgDn for pages)"
        )
        print_colored_text(out, nav.ljust(width), Color.DARK_GREY)
        out.write("\r\n")

    if processes:
        total_gpu_gb = sum(p.used_memory for p in processes) / _GIB
        active = sum(1 for p in processes if p.cpu_percent > 0.1)
        on_gpu = sum(1 for p in processes if p.used_memory > 0)
        stats = (
            f"Active: {active} | GPU: {on_gpu} | "
            f"Total GPU Memory: {total_gpu_gb:.1f}GB"
        )
        print_colored_text(out, stats.ljust(width), Color.CYAN)
        out.write("\r\n")