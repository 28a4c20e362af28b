"""Textual application for editing a value with undo/redo history."""

from __future__ import annotations

import logging
from collections.abc import Callable

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Input, Static

from undoable.history import HistorySnapshot, StateHistory
from undoable.tui.commands import CommandRegistry
from undoable.tui.widgets.status_bar import StatusBar
from undoable.tui.widgets.timeline import Timeline

logger = logging.getLogger(__name__)

ACCENT = "#00bcd4"


class HistoryTUI(App[None]):
    """Interactive editor for a text value kept in a StateHistory.

    Submitting text commits it; slash commands and key bindings navigate.
    The widgets never read the history directly: they redraw from the
    snapshots delivered by the history subscription.

    Args:
        history: Container to edit. Its current value is shown on start.
    """

    CSS = f"""
    Screen {{
        layout: vertical;
        border: solid {ACCENT};
    }}
    #prompt-input {{
        border: solid {ACCENT};
    }}
    #help-bar {{
        height: 1;
        color: $text-muted;
        padding: 0 1;
    }}
    """

    BINDINGS = [
        Binding("ctrl+z", "back", "Back", priority=True),
        Binding("ctrl+y", "forward", "Forward", priority=True),
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(self, history: StateHistory[str]) -> None:
        super().__init__()
        self._state_history = history
        self._command_registry = CommandRegistry()
        self._unsubscribe: Callable[[], None] | None = None
        self._register_builtin_commands()

    @property
    def state_history(self) -> StateHistory[str]:
        return self._state_history

    def _register_builtin_commands(self) -> None:
        """Register the default slash commands."""
        self._command_registry.register("/help", self._cmd_help, "Show available commands")
        self._command_registry.register("/back", self._cmd_back, "Go to the previous entry")
        self._command_registry.register("/forward", self._cmd_forward, "Go to the next entry")
        self._command_registry.register("/goto", self._cmd_goto, "Jump to entry <index>")
        self._command_registry.register("/history", self._cmd_history, "Summarize the log")
        self._command_registry.register("/quit", self._cmd_quit, "Exit")

    def register_command(
        self, name: str, handler: Callable[[str], object], description: str
    ) -> None:
        """Register a custom slash command."""
        self._command_registry.register(name, handler, description)

    def compose(self) -> ComposeResult:
        """Create the app layout."""
        yield Timeline()
        yield StatusBar(capacity=self._state_history.capacity)
        yield Input(placeholder="Type a value, or /help", id="prompt-input")
        yield Static(
            "Enter to commit • ctrl+z back • ctrl+y forward • /help",
            id="help-bar",
            markup=False,
        )

    def on_mount(self) -> None:
        """Draw the initial state and start listening for changes."""
        self._render_snapshot(self._state_history.snapshot())
        self._unsubscribe = self._state_history.subscribe(self._render_snapshot)
        self.query_one(Input).focus()

    def on_unmount(self) -> None:
        """Stop listening to the history."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _render_snapshot(self, snap: HistorySnapshot[str]) -> None:
        self.query_one(Timeline).show_snapshot(snap)
        self.query_one(StatusBar).show_snapshot(snap)

    def _system_message(self, text: str) -> None:
        self.query_one(Timeline).add_system_message(text)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Commit plain text, or dispatch a slash command."""
        text = event.value
        event.input.value = ""
        if not text.strip():
            return
        if self._command_registry.is_command(text):
            if not self._command_registry.dispatch(text):
                name = text.strip().split()[0]
                logger.debug("Unknown command %r", name)
                self._system_message(f"Unknown command: {name} (try /help)")
            return
        self._state_history.commit(text)

    def action_back(self) -> None:
        """Step back one entry."""
        self._state_history.back()

    def action_forward(self) -> None:
        """Step forward one entry."""
        self._state_history.forward()

    def _cmd_help(self, args: str) -> None:
        lines = ["Commands:"]
        for name, desc in self._command_registry.list_commands():
            lines.append(f"  {name:<10} {desc}")
        self._system_message("\n".join(lines))

    def _cmd_back(self, args: str) -> None:
        if not self._state_history.can_go_back:
            self._system_message("Already at the oldest entry")
            return
        self._state_history.back()

    def _cmd_forward(self, args: str) -> None:
        if not self._state_history.can_go_forward:
            self._system_message("Already at the newest entry")
            return
        self._state_history.forward()

    def _cmd_goto(self, args: str) -> None:
        try:
            index = int(args)
        except ValueError:
            self._system_message("Usage: /goto <index>")
            return
        if not 0 <= index < len(self._state_history):
            last = len(self._state_history) - 1
            self._system_message(f"No entry {index}; valid range is 0-{last}")
            return
        self._state_history.go_to(index)

    def _cmd_history(self, args: str) -> None:
        snap = self._state_history.snapshot()
        self._system_message(
            f"{len(snap.history)} of {self._state_history.capacity} entries, "
            f"cursor at {snap.cursor}"
        )

    def _cmd_quit(self, args: str) -> None:
        self.exit()
