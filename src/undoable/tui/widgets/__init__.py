"""Widgets for the history demo."""

from undoable.tui.widgets.status_bar import StatusBar, StatusBarState
from undoable.tui.widgets.timeline import Timeline, render_timeline

__all__ = ["StatusBar", "StatusBarState", "Timeline", "render_timeline"]
