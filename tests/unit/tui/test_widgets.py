"""Tests for the status bar and timeline rendering."""

from undoable.history import StateHistory
from undoable.tui.widgets.status_bar import StatusBarState, shorten
from undoable.tui.widgets.timeline import CURSOR_MARKER, render_timeline


class TestShorten:
    """Tests for shorten()."""

    def test_short_text_unchanged(self) -> None:
        assert shorten("hello") == "hello"

    def test_newlines_collapsed(self) -> None:
        assert shorten("a\nb  c") == "a b c"

    def test_long_text_truncated(self) -> None:
        """Long text is cut to width with an ellipsis."""
        result = shorten("x" * 50, width=10)
        assert len(result) == 10
        assert result.endswith("…")


class TestStatusBarState:
    """Tests for StatusBarState (no Textual dependency)."""

    def test_initial_render(self) -> None:
        """A fresh state shows entry 1 of 1 at both ends."""
        state = StatusBarState(capacity=5)
        line1, line2 = state.render_lines()
        assert line1 == "Value: "
        assert "Entry 1/1" in line2
        assert "capacity 5" in line2
        assert "at oldest" in line2
        assert "at newest" in line2

    def test_apply_snapshot(self) -> None:
        """Position and navigation hints follow the snapshot."""
        h = StateHistory("a", capacity=5)
        h.commit("b")
        h.commit("c")
        h.back()
        state = StatusBarState(capacity=5)
        state.apply(h.snapshot())
        line1, line2 = state.render_lines()
        assert line1 == "Value: b"
        assert "Entry 2/3" in line2
        assert "ctrl+z back" in line2
        assert "ctrl+y forward" in line2


class TestRenderTimeline:
    """Tests for render_timeline()."""

    def test_marks_cursor(self) -> None:
        """Exactly the cursor entry carries the marker."""
        h = StateHistory("first")
        h.commit("second")
        h.commit("third")
        h.go_to(1)
        lines = render_timeline(h.snapshot())
        assert len(lines) == 3
        assert lines[1].startswith(CURSOR_MARKER)
        assert "second" in lines[1]
        assert not lines[0].startswith(CURSOR_MARKER)
        assert not lines[2].startswith(CURSOR_MARKER)

    def test_shows_indexes(self) -> None:
        """Each line shows the entry index."""
        h = StateHistory("a")
        h.commit("b")
        lines = render_timeline(h.snapshot())
        assert "  0  a" in lines[0]
        assert "  1  b" in lines[1]
