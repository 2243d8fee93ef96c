"""Full-screen help overlay."""

from __future__ import annotations

import re
from typing import Iterable, NamedTuple

from smiview.chrome import SortCriteria
from smiview.text import Color

_CSI = "\x1b["
_RESET = f"{_CSI}0m"
_ANSI_RE = re.compile(r"\x1b(?:\[[^A-Za-z]*[A-Za-z]?|.)?", re.DOTALL)

_TITLE_START = 2
_TITLE_END = 12
_SHORTCUTS_START = 14
_TERMINAL_RESERVE = 16


class _Line(NamedTuple):
    key: str
    desc: str
    style: str


_BLANK = _Line("", "", "")

_LOGO = """\
    █████╗ ██╗     ██╗          ███████╗███╗   ███╗██╗
   ██╔══██╗██║     ██║          ██╔════╝████╗ ████║██║
   ███████║██║     ██║    █████╗███████╗██╔████╔██║██║
   ██╔══██║██║     ██║    ╚════╝╚════██║██║╚██╔╝██║██║
   ██║  ██║███████╗███████╗     ███████║██║ ╚═╝ ██║██║
   ╚═╝  ╚═╝╚══════╝╚══════╝     ╚══════╝╚═╝     ╚═╝╚═╝"""

_TITLE_LINES = ("", *_LOGO.splitlines(), "", "GPU Monitoring and Management Tool", "")
_DESCRIPTION_LINES = ("Developed and maintained as part of the Backend.AI project.",)

_NAVIGATION_KEYS = (
    ("← →", "Switch tabs (remote) / Scroll process list (local)"),
    ("↑ ↓", "Scroll up/down in lists"),
    ("PgUp PgDn", "Page up/down navigation"),
    ("Home End", "Jump to top/bottom"),
)
_DISPLAY_KEYS = (
    ("H", "Toggle this help screen"),
    ("Q", "Exit application"),
    ("ESC", "Close help or exit"),
)
_SORTING_KEYS = (
    ("D", "Sort by default (hostname+index)"),
    ("U", "Sort by GPU utilization"),
    ("G", "Sort by GPU memory usage"),
)
_LOCAL_SORTING_KEYS = (
    ("P", "Sort processes by PID"),
    ("M", "Sort processes by memory"),
)
_PROCESS_COLUMNS = (
    ("PID", "Process ID"),
    ("USER", "Process owner"),
    ("PRI", "Priority (0-139, lower is higher)"),
    ("NI", "Nice value (-20 to 19)"),
    ("VIRT", "Virtual memory size"),
    ("RES", "Resident memory size"),
    ("S", "Process state (R/S/D/Z/T)"),
    ("CPU%", "CPU utilization"),
    ("MEM%", "Memory utilization"),
    ("GPU%", "GPU utilization (if available)"),
    ("VRAM", "GPU memory usage"),
    ("TIME+", "Total CPU time used"),
    ("Command", "Command line (← → to scroll)"),
)
_COLOR_LEGEND = (
    ("Your processes", "White text"),
    ("Root/unknown", "Dark grey text"),
    ("High usage", "Red/Yellow based on CPU/Memory %"),
    ("GPU processes", "Green/Cyan based on system load"),
)

_LOCAL_COMMANDS = (
    ("sudo all-smi view", "Monitor local GPUs (requires sudo on macOS)"),
)
_REMOTE_COMMANDS = (
    ("all-smi view --hosts http://node1:9090", "Monitor specific remote hosts"),
    ("all-smi view --hostfile hosts.csv", "Monitor hosts from CSV file"),
)
_API_COMMANDS = (
    ("all-smi api --port 9090", "Run as Prometheus metrics server"),
    ("curl http://localhost:9090/metrics", "Fetch Prometheus metrics via HTTP"),
)

_SORT_STATUS = {
    SortCriteria.DEFAULT: "Default (hostname+index)",
    SortCriteria.PID: "Process PID",
    SortCriteria.USER: "User",
    SortCriteria.PRIORITY: "Priority",
    SortCriteria.NICE: "Nice Value",
    SortCriteria.VIRTUAL_MEMORY: "Virtual Memory",
    SortCriteria.RESIDENT_MEMORY: "Resident Memory",
    SortCriteria.STATE: "Process State",
    SortCriteria.CPU_PERCENT: "CPU Usage %",
    SortCriteria.MEMORY_PERCENT: "Memory Usage %",
    SortCriteria.GPU_PERCENT: "GPU Usage %",
    SortCriteria.GPU_MEMORY_USAGE: "GPU Memory Usage",
    SortCriteria.CPU_TIME: "CPU Time",
    SortCriteria.COMMAND: "Command",
    SortCriteria.UTILIZATION: "GPU Utilization",
    SortCriteria.GPU_MEMORY: "GPU Memory",
    SortCriteria.POWER: "Power Consumption",
    SortCriteria.TEMPERATURE: "Temperature",
}


def _section(header: str, entries: Iterable[tuple[str, str]], style: str) -> list[_Line]:
    """A blank spacer, a header and indented entries of one style."""
    return [
        _BLANK,
        _Line(header, "", "header"),
        *(_Line(f"  {key}", desc, style) for key, desc in entries),
    ]


def _shortcut_lines(sort_criteria: SortCriteria, is_remote: bool) -> list[_Line]:
    sorting = _SORTING_KEYS if is_remote else _SORTING_KEYS + _LOCAL_SORTING_KEYS
    return [
        _Line("", "KEYBOARD SHORTCUTS & NAVIGATION", "title"),
        _Line("", "", "separator"),
        *_section("Navigation Keys:", _NAVIGATION_KEYS, "shortcut"),
        *_section("Display Control:", _DISPLAY_KEYS, "shortcut"),
        *_section("Data Sorting:", sorting, "shortcut"),
        *_section("Process View Columns:", _PROCESS_COLUMNS, "legend"),
        *_section("Process Color Legend:", _COLOR_LEGEND, "legend"),
        _BLANK,
        _Line("Current sort:", sort_status_text(sort_criteria), "status"),
    ]


_TERMINAL_LINES = (
    _Line("", "TERMINAL USAGE OPTIONS", "title"),
    _Line("", "", "separator"),
    *_section("Local Monitoring:", _LOCAL_COMMANDS, "command"),
    *_section("Remote Monitoring:", _REMOTE_COMMANDS, "command"),
    *_section("API Server Mode:", _API_COMMANDS, "command"),
)


def _styled(text: str, color: Color, bold: bool = False) -> str:
    prefix = f"{_CSI}38;5;{color.value}m"
    if bold:
        prefix += f"{_CSI}1m"
    return f"{prefix}{text}{_RESET}"


def strip_ansi_codes(text: str) -> str:
    """Remove escape sequences so the visible text can be measured."""
    return _ANSI_RE.sub("", text)


def calculate_display_width(text: str) -> int:
    """Return the number of visible columns, ignoring escape sequences."""
    return len(strip_ansi_codes(text))


def sort_status_text(criteria: SortCriteria) -> str:
    """Return the descriptive name of a sort key."""
    return _SORT_STATUS[criteria]


def _pad_to_width(content: str, target_width: int) -> str:
    width = calculate_display_width(content)
    if width >= target_width:
        return content
    return content + " " * (target_width - width)


def _center_colored(text: str, width: int, color: Color) -> str:
    text_width = calculate_display_width(text)
    if text_width >= width:
        return text
    total = width - text_width
    left = total // 2
    return " " * left + _styled(text, color) + " " * (total - left)


def _format_shortcut_line(line: _Line, width: int) -> str:
    key, desc, style = line
    if style == "title":
        content = _center_colored(desc, width, Color.YELLOW)
    elif style == "separator":
        content = _styled("═" * width, Color.DARK_GREY)
    elif style == "header":
        content = f"  {_styled(key, Color.GREEN)}"
    elif style == "shortcut" and key:
        content = f"  {_styled(key, Color.WHITE, bold=True):<12} {_styled(desc, Color.WHITE)}"
    elif style == "legend":
        content = f"  {key:<12} {_styled(desc, Color.WHITE)}"
    elif style == "status":
        content = f"  {_styled(key, Color.CYAN):<12} {_styled(desc, Color.YELLOW)}"
    else:
        content = ""
    return _pad_to_width(content, width)


def _format_terminal_line(line: _Line, width: int) -> str:
    cmd, desc, style = line
    if style == "title":
        content = _center_colored(desc, width, Color.MAGENTA)
    elif style == "separator":
        content = _styled("═" * width, Color.DARK_GREY)
    elif style == "header":
        content = f"  {_styled(cmd, Color.GREEN)}"
    elif style == "command" and cmd:
        formatted_cmd = f"  {_styled(cmd, Color.WHITE, bold=True):<35}"
        hash_mark = _styled("#", Color.DARK_GREY)
        content = f"{formatted_cmd} {hash_mark} {_styled(desc, Color.BLUE)}"
    else:
        content = ""
    return _pad_to_width(content, width)


def _render_title(line_idx: int, width: int) -> str:
    if line_idx < len(_TITLE_LINES):
        return _center_colored(_TITLE_LINES[line_idx], width, Color.CYAN)
    desc_idx = line_idx - len(_TITLE_LINES)
    if desc_idx < len(_DESCRIPTION_LINES):
        return _center_colored(_DESCRIPTION_LINES[desc_idx], width, Color.GREEN)
    return " " * width


def _render_shortcuts(
    line_idx: int, width: int, sort_criteria: SortCriteria, is_remote: bool
) -> str:
    lines = _shortcut_lines(sort_criteria, is_remote)
    if line_idx < len(lines):
        return _format_shortcut_line(lines[line_idx], width)
    return " " * width


def _render_terminal(line_idx: int, width: int) -> str:
    if line_idx < len(_TERMINAL_LINES):
        return _format_terminal_line(_TERMINAL_LINES[line_idx], width)
    return " " * width


def _row_content(
    row: int, width: int, height: int, sort_criteria: SortCriteria, is_remote: bool
) -> str:
    content_width = max(0, width - 2)
    shortcuts_end = max(0, height - _TERMINAL_RESERVE)
    terminal_start = shortcuts_end + 1

    if _TITLE_START <= row <= _TITLE_END:
        return _render_title(row - _TITLE_START, content_width)
    if _SHORTCUTS_START <= row < shortcuts_end:
        return _render_shortcuts(
            row - _SHORTCUTS_START, content_width, sort_criteria, is_remote
        )
    if terminal_start <= row < height - 1:
        return _render_terminal(row - terminal_start, content_width)
    return " " * content_width


def generate_help_popup_content(
    cols: int, rows: int, sort_criteria: SortCriteria, is_remote: bool
) -> str:
    """Return the bordered help screen as newline-separated lines."""
    inner = max(0, cols - 2)
    lines = []
    for row in range(rows):
        if row == 0:
            line = f"╔{'═' * inner}╗"
        elif row == rows - 1:
            line = f"╚{'═' * inner}╝"
        else:
            content = _row_content(row, cols, rows, sort_criteria, is_remote)
            line = f"║{_pad_to_width(content, inner)}║"
        lines.append(line)
    return "\n".join(lines)