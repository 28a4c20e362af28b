"""Terminal demo for StateHistory."""

from undoable.tui.app import HistoryTUI

__all__ = ["HistoryTUI"]
