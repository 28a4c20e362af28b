"""Slash command registry for the history demo."""

from collections.abc import Callable

CommandHandler = Callable[[str], object]


class CommandRegistry:
    """Maps slash command names (e.g., "/goto") to handlers.

    A handler receives the argument string: everything after the command
    name, stripped.
    """

    def __init__(self) -> None:
        self._commands: dict[str, tuple[CommandHandler, str]] = {}

    def register(self, name: str, handler: CommandHandler, description: str) -> None:
        """Register a slash command, replacing any existing one of that name."""
        if not name.startswith("/"):
            raise ValueError(f"Command names must start with '/': {name}")
        self._commands[name] = (handler, description)

    def list_commands(self) -> list[tuple[str, str]]:
        """Return (name, description) tuples sorted by name."""
        return sorted((name, desc) for name, (_handler, desc) in self._commands.items())

    def resolve(self, text: str) -> tuple[CommandHandler, str] | None:
        """Resolve a command string to (handler, args) without running it."""
        parts = text.strip().split(maxsplit=1)
        if not parts or parts[0] not in self._commands:
            return None
        handler, _desc = self._commands[parts[0]]
        return handler, parts[1] if len(parts) > 1 else ""

    def dispatch(self, text: str) -> bool:
        """Run the command in text. Returns False if it is not registered."""
        result = self.resolve(text)
        if result is None:
            return False
        handler, args = result
        handler(args)
        return True

    def is_command(self, text: str) -> bool:
        """Check if text looks like a slash command."""
        return text.strip().startswith("/")

