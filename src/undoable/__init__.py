"""Framework-independent UI state helpers built around an undo/redo history."""

from undoable.config import HistoryConfig
from undoable.exceptions import InvalidConfiguration, UndoableError
from undoable.history import (
    HistorySnapshot,
    StateHistory,
    Transform,
    Value,
    create,
    resolve_commit,
)
from undoable.observable import Observable
from undoable.state import ArrayState, PreviousValue, State, ToggleState, ValidatedState
from undoable.sync import SynchronizedStateHistory

__version__ = "0.1.0"

__all__ = [
    "ArrayState",
    "HistoryConfig",
    "HistorySnapshot",
    "InvalidConfiguration",
    "Observable",
    "PreviousValue",
    "State",
    "StateHistory",
    "SynchronizedStateHistory",
    "ToggleState",
    "Transform",
    "UndoableError",
    "ValidatedState",
    "Value",
    "create",
    "resolve_commit",
]
