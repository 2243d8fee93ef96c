"""Screen layout calculations."""

from __future__ import annotations

from dataclasses import dataclass

FUNCTION_KEYS_LINES = 1


@dataclass(frozen=True)
class ContentArea:
    x: int
    y: int
    width: int
    height: int
    available_rows: int


@dataclass(frozen=True)
class ProgressBarLayout:
    bar_width: int
    left_padding: int
    right_padding: int
    separator_width: int
    total_bars: int


@dataclass(frozen=True)
class ColumnSpec:
    name: str
    min_width: int
    weight: float


def calculate_header_lines(has_history: bool) -> int:
    """Return the number of lines taken by the header above the content."""
    lines = 3  # title and cluster overview
    lines += 4  # two-row dashboard
    if has_history:
        lines += 5  # live statistics header, three history lines, separator
    lines += 2  # tabs line and separator
    return lines


def calculate_content_area(has_history: bool, cols: int, rows: int) -> ContentArea:
    """Return the area left for content below the header and above the key bar."""
    header_lines = calculate_header_lines(has_history)
    available = max(0, rows - header_lines - FUNCTION_KEYS_LINES)
    return ContentArea(
        x=0, y=header_lines, width=cols, height=available, available_rows=available
    )


def calculate_progress_bar_layout(
    width: int, num_bars: int, padding: int
) -> ProgressBarLayout:
    """Split ``width`` into ``num_bars`` bars separated by two spaces."""
    separators = (num_bars - 1) * 2 if num_bars > 1 else 0
    available = max(0, width - (padding * 2 + separators))
    bar_width = available // num_bars if num_bars > 0 else available
    return ProgressBarLayout(
        bar_width=bar_width,
        left_padding=padding,
        right_padding=padding,
        separator_width=2 if num_bars > 1 else 0,
        total_bars=num_bars,
    )


def calculate_table_columns(
    available_width: int, column_specs: list[ColumnSpec]
) -> list[int]:
    """Distribute spare width over columns in proportion to their weights."""
    if not column_specs:
        raise ValueError("at least one column is required")
    min_total = sum(spec.min_width for spec in column_specs)
    separator_width = len(column_specs) - 1
    if available_width <= min_total + separator_width:
        return [spec.min_width for spec in column_specs]
    extra_space = available_width - min_total - separator_width
    total_weight = sum(spec.weight for spec in column_specs)
    return [
        spec.min_width + int(extra_space * spec.weight / total_weight)
        for spec in column_specs
    ]


def process_table_columns() -> list[ColumnSpec]:
    return [
        ColumnSpec("PID", 6, 0.5),
        ColumnSpec("User", 12, 1.0),
        ColumnSpec("Name", 8, 2.0),
        ColumnSpec("CPU%", 6, 0.5),
        ColumnSpec("Mem%", 8, 0.5),
        ColumnSpec("GPU Mem", 8, 1.0),
        ColumnSpec("State", 8, 0.5),
        ColumnSpec("Command", 10, 3.0),
    ]


def device_table_columns() -> list[ColumnSpec]:
    return [
        ColumnSpec("Device", 15, 2.0),
        ColumnSpec("Host", 12, 1.0),
        ColumnSpec("Utilization", 12, 1.0),
        ColumnSpec("Memory", 15, 1.5),
        ColumnSpec("Temperature", 12, 1.0),
        ColumnSpec("Power", 10, 1.0),
    ]