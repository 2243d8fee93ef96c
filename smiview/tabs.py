"""Host tab bar rendering."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TextIO

from smiview.text import Color, print_colored_text

ALL_TAB = "All"
# Room kept for the "Tabs: " prefix plus a little padding.
_PREFIX_RESERVE = 8


@dataclass(frozen=True)
class HostStatus:
    """Connection state of a remote host."""

    is_connected: bool = True
    actual_hostname: str | None = None


@dataclass(frozen=True)
class TabVisibility:
    first_visible: int
    last_visible: int
    has_more_left: bool
    has_more_right: bool


def _resolved_name(tab: str, statuses: Mapping[str, HostStatus]) -> str:
    status = statuses.get(tab)
    if status is not None and status.actual_hostname is not None:
        return status.actual_hostname
    return tab


def tab_display_name(tab: str, statuses: Mapping[str, HostStatus]) -> str:
    """Return the name shown for a tab: the host's real name when known."""
    if tab == ALL_TAB:
        return tab
    return _resolved_name(tab, statuses)


def calculate_tab_visibility(
    tabs: Sequence[str],
    tab_scroll_offset: int,
    statuses: Mapping[str, HostStatus],
    cols: int,
) -> TabVisibility:
    """Work out which node tabs fit on a line of ``cols`` columns."""
    if not tabs:
        raise ValueError("at least one tab is required")
    available = max(0, cols - _PREFIX_RESERVE)
    available = max(0, available - (len(tabs[0]) + 2))

    last_visible_node = tab_scroll_offset
    for node_index, tab in enumerate(tabs[1 + tab_scroll_offset :], 1 + tab_scroll_offset):
        tab_width = len(_resolved_name(tab, statuses)) + 2
        if available < tab_width:
            break
        available -= tab_width
        last_visible_node = node_index - 1

    return TabVisibility(
        first_visible=tab_scroll_offset,
        last_visible=last_visible_node + 1,
        has_more_left=tab_scroll_offset > 0,
        has_more_right=last_visible_node + 1 < len(tabs) - 1,
    )


def draw_tabs(
    out: TextIO,
    tabs: Sequence[str],
    current_tab: int,
    tab_scroll_offset: int,
    statuses: Mapping[str, HostStatus],
    cols: int,
) -> None:
    """Write the tab bar followed by a separator line."""
    labels: list[tuple[str, Color, bool]] = []
    available = max(0, cols - _PREFIX_RESERVE)

    if tabs:
        first = tabs[0]
        tab_width = len(first) + 2
        if available >= tab_width:
            labels.append((f" {first} ", Color.WHITE, current_tab == 0))
            available -= tab_width

    for index, tab in enumerate(tabs[1 + tab_scroll_offset :], 1 + tab_scroll_offset):
        name = tab_display_name(tab, statuses)
        tab_width = len(name) + 2
        if available < tab_width:
            break
        if tab == ALL_TAB:
            connected = True
        else:
            status = statuses.get(tab)
            connected = status.is_connected if status is not None else True
        color = Color.WHITE if connected else Color.DARK_GREY
        labels.append((f" {name} ", color, current_tab == index))
        available -= tab_width

    out.write("Tabs: ")
    for text, color, selected in labels:
        if selected:
            print_colored_text(out, text, Color.WHITE, Color.BLUE)
        else:
            print_colored_text(out, text, color)
    out.write("\r\n")

    print_colored_text(out, "─" * cols, Color.DARK_GREY)
    out.write("\r\n")