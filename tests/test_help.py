import pytest

from smiview.chrome import SortCriteria
from smiview.help import (
    calculate_display_width,
    generate_help_popup_content,
    sort_status_text,
    strip_ansi_codes,
)


def test_strip_ansi_codes_removes_sequences():
    assert strip_ansi_codes("\x1b[31mred\x1b[0m") == "red"
    assert strip_ansi_codes("plain") == "plain"
    assert strip_ansi_codes("\x1b[38;5;11m\x1b[1mab\x1b[0mc") == "abc"


def test_calculate_display_width_ignores_escapes():
    assert calculate_display_width("\x1b[31mred\x1b[0m") == 3
    assert calculate_display_width("← →") == 3


def test_sort_status_text():
    assert sort_status_text(SortCriteria.DEFAULT) == "Default (hostname+index)"
    assert sort_status_text(SortCriteria.POWER) == "Power Consumption"
    for criteria in SortCriteria:
        assert sort_status_text(criteria)


def test_help_has_borders_and_line_count():
    content = generate_help_popup_content(120, 60, SortCriteria.DEFAULT, False)
    lines = content.split("\n")
    assert len(lines) == 60
    assert lines[0] == "╔" + "═" * 118 + "╗"
    assert lines[-1] == "╚" + "═" * 118 + "╝"
    for line in lines[1:-1]:
        assert line.startswith("║")
        assert line.endswith("║")


def test_help_lines_fill_width():
    content = generate_help_popup_content(120, 60, SortCriteria.DEFAULT, False)
    for line in content.split("\n"):
        assert calculate_display_width(line) == 120


def test_help_contains_title():
    content = strip_ansi_codes(
        generate_help_popup_content(120, 60, SortCriteria.DEFAULT, True)
    )
    assert "GPU Monitoring and Management Tool" in content
    assert "TERMINAL USAGE OPTIONS" in content


@pytest.mark.parametrize("is_remote", [True, False])
def test_local_only_shortcuts(is_remote):
    content = strip_ansi_codes(
        generate_help_popup_content(120, 60, SortCriteria.DEFAULT, is_remote)
    )
    assert ("Sort processes by PID" in content) is (not is_remote)


def test_current_sort_shown_when_tall_enough():
    content = strip_ansi_codes(
        generate_help_popup_content(120, 80, SortCriteria.POWER, False)
    )
    assert "Current sort:" in content
    assert "Power Consumption" in content


def test_single_row_is_top_border():
    content = generate_help_popup_content(10, 1, SortCriteria.DEFAULT, False)
    assert content == "╔" + "═" * 8 + "╗"
    assert "\n" not in content


def test_zero_rows_is_empty():
    assert generate_help_popup_content(80, 0, SortCriteria.DEFAULT, False) == ""