"""Timeline widget listing every entry in the history log."""

from textual.containers import VerticalScroll
from textual.widgets import Static

from undoable.history import HistorySnapshot
from undoable.tui.widgets.status_bar import shorten

CURSOR_MARKER = "▶"


def render_timeline(snap: HistorySnapshot[str]) -> list[str]:
    """Render one line per log entry, marking the entry at the cursor."""
    lines = []
    for index, entry in enumerate(snap.history):
        marker = CURSOR_MARKER if index == snap.cursor else " "
        lines.append(f"{marker} {index:>3}  {shorten(str(entry), 60)}")
    return lines


class Timeline(VerticalScroll):
    """Scrolling list of log entries.

    Redrawn only from snapshots pushed by the history subscription.
    """

    DEFAULT_CSS = """
    Timeline {
        height: 1fr;
        padding: 0 1;
    }
    Timeline .timeline-entry {
        color: $text-muted;
    }
    Timeline .timeline-current {
        color: $accent;
        text-style: bold;
    }
    Timeline .system-message {
        color: $warning;
    }
    """

    def __init__(self) -> None:
        super().__init__(id="timeline")
        self.lines: list[str] = []

    def show_snapshot(self, snap: HistorySnapshot[str]) -> None:
        """Replace the listing with the entries from snap."""
        self.lines = render_timeline(snap)
        self.remove_children()
        widgets = [
            Static(
                line,
                markup=False,
                classes="timeline-current" if index == snap.cursor else "timeline-entry",
            )
            for index, line in enumerate(self.lines)
        ]
        self.mount_all(widgets)
        self.scroll_end(animate=False)

    def add_system_message(self, text: str) -> None:
        """Append an info or error line below the entries."""
        self.mount(Static(text, markup=False, classes="system-message"))
        self.scroll_end(animate=False)
