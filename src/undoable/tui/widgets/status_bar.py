"""Status bar widget showing where the cursor sits in the history."""

from dataclasses import dataclass, field

from textual.widgets import Static

from undoable.history import HistorySnapshot

_MAX_VALUE_WIDTH = 40


def shorten(text: str, width: int = _MAX_VALUE_WIDTH) -> str:
    """Collapse newlines and truncate text with an ellipsis."""
    flat = " ".join(text.split())
    if len(flat) <= width:
        return flat
    return flat[: width - 1] + "…"


@dataclass
class StatusBarState:
    """Data model for the status bar, independent of Textual.

    Updated from history snapshots; render_lines() produces the two
    display lines.
    """

    capacity: int
    _value: str = field(default="", init=False)
    _cursor: int = field(default=0, init=False)
    _size: int = field(default=1, init=False)
    _can_go_back: bool = field(default=False, init=False)
    _can_go_forward: bool = field(default=False, init=False)

    def apply(self, snap: HistorySnapshot[str]) -> None:
        """Take position and value from a history snapshot."""
        self._value = str(snap.value)
        self._cursor = snap.cursor
        self._size = len(snap.history)
        self._can_go_back = snap.can_go_back
        self._can_go_forward = snap.can_go_forward

    def render_lines(self) -> tuple[str, str]:
        """Render the two status bar lines."""
        line1 = f"Value: {shorten(self._value)}"
        back = "ctrl+z back" if self._can_go_back else "at oldest"
        forward = "ctrl+y forward" if self._can_go_forward else "at newest"
        line2 = (
            f"Entry {self._cursor + 1}/{self._size} (capacity {self.capacity}) "
            f"│ {back} │ {forward}"
        )
        return line1, line2


class StatusBar(Static):
    """Textual widget displaying StatusBarState."""

    DEFAULT_CSS = """
    StatusBar {
        height: auto;
        padding: 0 1;
        border: solid $accent;
    }
    """

    def __init__(self, capacity: int) -> None:
        super().__init__("", markup=False)
        self._state = StatusBarState(capacity=capacity)
        self._refresh_content()

    @property
    def bar_state(self) -> StatusBarState:
        return self._state

    def _refresh_content(self) -> None:
        """Re-render from state."""
        line1, line2 = self._state.render_lines()
        self.update(f"{line1}\n{line2}")

    def show_snapshot(self, snap: HistorySnapshot[str]) -> None:
        """Update the display from a history snapshot."""
        self._state.apply(snap)
        self._refresh_content()
