import io

import pytest

from smiview.tabs import (
    HostStatus,
    TabVisibility,
    calculate_tab_visibility,
    draw_tabs,
    tab_display_name,
)
from smiview.text import Color, print_colored_text

TABS = ["All", "host1", "host2", "host3"]


def _colored(text, fg, bg=None):
    buf = io.StringIO()
    print_colored_text(buf, text, fg, bg)
    return buf.getvalue()


def test_tab_visibility_calculation():
    visibility = calculate_tab_visibility(TABS, 0, {}, 80)
    assert visibility.first_visible == 0
    assert not visibility.has_more_left
    assert not visibility.has_more_right


def test_tab_visibility_with_scroll():
    visibility = calculate_tab_visibility(TABS, 1, {}, 80)
    assert visibility.first_visible == 1
    assert visibility.has_more_left


def test_tab_visibility_narrow_screen_has_more_right():
    visibility = calculate_tab_visibility(TABS, 0, {}, 20)
    assert visibility == TabVisibility(
        first_visible=0, last_visible=1, has_more_left=False, has_more_right=True
    )


def test_tab_visibility_all_fit_reaches_last_tab():
    visibility = calculate_tab_visibility(TABS, 0, {}, 80)
    assert visibility.last_visible == len(TABS) - 1


def test_tab_visibility_requires_tabs():
    with pytest.raises(ValueError):
        calculate_tab_visibility([], 0, {}, 80)


def test_tab_display_name_prefers_actual_hostname():
    statuses = {"10.0.0.1:9090": HostStatus(True, "node-a")}
    assert tab_display_name("10.0.0.1:9090", statuses) == "node-a"
    assert tab_display_name("other", statuses) == "other"
    assert tab_display_name("All", {"All": HostStatus(True, "x")}) == "All"


def test_draw_tabs_highlights_selected_tab():
    out = io.StringIO()
    draw_tabs(out, TABS, 2, 0, {}, 80)
    text = out.getvalue()
    assert text.startswith("Tabs: ")
    assert _colored(" host2 ", Color.WHITE, Color.BLUE) in text
    assert _colored(" All ", Color.WHITE) in text
    assert _colored(" host1 ", Color.WHITE) in text


def test_draw_tabs_dims_disconnected_hosts_and_uses_hostname():
    out = io.StringIO()
    statuses = {
        "host1": HostStatus(is_connected=False),
        "host2": HostStatus(is_connected=True, actual_hostname="gpu-node"),
    }
    draw_tabs(out, TABS, 0, 0, statuses, 80)
    text = out.getvalue()
    assert _colored(" host1 ", Color.DARK_GREY) in text
    assert _colored(" gpu-node ", Color.WHITE) in text
    assert " host2 " not in text
    assert _colored(" All ", Color.WHITE, Color.BLUE) in text


def test_draw_tabs_respects_scroll_offset_and_width():
    out = io.StringIO()
    draw_tabs(out, TABS, 0, 1, {}, 80)
    text = out.getvalue()
    assert " host1 " not in text
    assert " host2 " in text

    out = io.StringIO()
    draw_tabs(out, TABS, 0, 0, {}, 20)
    narrow = out.getvalue()
    assert " host1 " in narrow
    assert " host2 " not in narrow


def test_draw_tabs_ends_with_separator():
    out = io.StringIO()
    draw_tabs(out, TABS, 0, 0, {}, 30)
    assert out.getvalue().endswith(_colored("─" * 30, Color.DARK_GREY) + "\r\n")