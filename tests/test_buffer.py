import io

from smiview.buffer import CLEAR_LINE, CLEAR_SCREEN, DifferentialRenderer
from smiview.text import move_to


def _moved(x, y, text=""):
    buf = io.StringIO()
    move_to(buf, x, y)
    return buf.getvalue() + text


class _Size:
    def __init__(self, width, height):
        self.value = (width, height)

    def __call__(self):
        return self.value


def _renderer(width=80, height=5):
    out = io.StringIO()
    size = _Size(width, height)
    return DifferentialRenderer(out, size), out, size


def _take(out):
    value = out.getvalue()
    out.seek(0)
    out.truncate()
    return value


def test_first_render_writes_every_line():
    renderer, out, _ = _renderer()
    renderer.render_differential("alpha\nbeta")
    assert _take(out) == _moved(0, 0, "alpha") + _moved(0, 1, "beta")


def test_unchanged_content_writes_nothing():
    renderer, out, _ = _renderer()
    renderer.render_differential("alpha\nbeta")
    _take(out)
    renderer.render_differential("alpha\nbeta")
    assert _take(out) == ""


def test_only_changed_line_is_rewritten():
    renderer, out, _ = _renderer()
    renderer.render_differential("alpha\nbeta\ngamma")
    _take(out)
    renderer.render_differential("alpha\nBETA\ngamma")
    assert _take(out) == _moved(0, 1, "BETA")


def test_shorter_content_clears_leftover_lines():
    renderer, out, _ = _renderer()
    renderer.render_differential("alpha\nbeta\ngamma")
    _take(out)
    renderer.render_differential("alpha")
    assert _take(out) == _moved(0, 1, CLEAR_LINE) + _moved(0, 2, CLEAR_LINE)


def test_lines_beyond_screen_height_are_not_drawn():
    renderer, out, _ = _renderer(height=2)
    renderer.render_differential("one\ntwo\nthree")
    written = _take(out)
    assert "three" not in written
    assert renderer.previous_lines == ["one", "two"]


def test_previous_lines_match_screen_height():
    renderer, _, _ = _renderer(height=5)
    renderer.render_differential("one\r\ntwo\n")
    assert renderer.previous_lines == ["one", "two", "", "", ""]


def test_resize_adjusts_tracked_lines():
    renderer, out, size = _renderer(height=3)
    renderer.render_differential("a\nb\nc")
    _take(out)
    size.value = (100, 6)
    renderer.render_differential("a\nb\nc\nd")
    assert renderer.screen_height == 6
    assert renderer.screen_width == 100
    assert _take(out) == _moved(0, 3, "d")
    assert len(renderer.previous_lines) == 6


def test_force_clear_resets_state_so_next_render_redraws():
    renderer, out, _ = _renderer(height=3)
    renderer.render_differential("a\nb")
    _take(out)
    renderer.force_clear()
    assert _take(out) == CLEAR_SCREEN
    assert renderer.previous_lines == ["", "", ""]
    renderer.render_differential("a\nb")
    assert _take(out) == _moved(0, 0, "a") + _moved(0, 1, "b")


def test_empty_lines_are_not_written_on_first_render():
    renderer, out, _ = _renderer(height=3)
    renderer.render_differential("\nx")
    assert _take(out) == _moved(0, 1, "x")