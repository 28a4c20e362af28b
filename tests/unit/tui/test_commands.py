"""Tests for the slash command registry."""

import pytest

from undoable.tui.commands import CommandRegistry


class TestCommandRegistry:
    """Tests for CommandRegistry."""

    def test_register_and_list(self) -> None:
        """Registered commands appear in list, sorted by name."""
        registry = CommandRegistry()
        registry.register("/goto", lambda _: None, "Jump")
        registry.register("/back", lambda _: None, "Back")
        assert registry.list_commands() == [("/back", "Back"), ("/goto", "Jump")]

    def test_register_requires_slash(self) -> None:
        """Names without a leading slash are rejected."""
        registry = CommandRegistry()
        with pytest.raises(ValueError, match="must start with"):
            registry.register("help", lambda _: None, "Help")

    def test_dispatch_passes_args(self) -> None:
        """Dispatch calls the handler with the stripped argument string."""
        called_with: list[str] = []
        registry = CommandRegistry()
        registry.register("/goto", called_with.append, "Jump")
        assert registry.dispatch("  /goto   3  ") is True
        assert called_with == ["3"]

    def test_dispatch_no_args(self) -> None:
        """Dispatch with no args passes an empty string."""
        called_with: list[str] = []
        registry = CommandRegistry()
        registry.register("/back", called_with.append, "Back")
        registry.dispatch("/back")
        assert called_with == [""]

    def test_dispatch_unknown_returns_false(self) -> None:
        """Unknown commands are not dispatched."""
        registry = CommandRegistry()
        assert registry.dispatch("/nope") is False
        assert registry.dispatch("") is False

    def test_resolve_does_not_run_handler(self) -> None:
        """resolve() returns the handler without calling it."""
        called: list[str] = []
        registry = CommandRegistry()
        registry.register("/back", called.append, "Back")
        result = registry.resolve("/back now")
        assert result is not None
        handler, args = result
        assert args == "now"
        assert called == []

    def test_is_command(self) -> None:
        """Only text starting with a slash is a command."""
        registry = CommandRegistry()
        assert registry.is_command(" /back") is True
        assert registry.is_command("hello") is False

