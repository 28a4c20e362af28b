"""Exceptions raised by undoable."""


class UndoableError(Exception):
    """Base class for undoable errors."""

    pass


class InvalidConfiguration(UndoableError, ValueError):
    """A container or config was given settings it cannot honor (e.g., capacity < 1)."""

    pass
