"""Bounded undo/redo log with a navigable cursor."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from undoable.config import DEFAULT_CAPACITY, HistoryConfig, validate_capacity
from undoable.observable import Observable

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Value(Generic[T]):
    """Commit that replaces the current value outright.

    Use this to commit a callable as a value rather than have it run as
    a transform.
    """

    value: T


@dataclass(frozen=True)
class Transform(Generic[T]):
    """Commit computed from the current value."""

    fn: Callable[[T], T]


def resolve_commit(next_value: Any, current: T) -> T:
    """Resolve a commit request to the concrete value it stands for.

    Plain callables are treated as transforms of the current value.
    """
    if isinstance(next_value, Value):
        return next_value.value
    if isinstance(next_value, Transform):
        return next_value.fn(current)
    if callable(next_value):
        return next_value(current)
    return next_value


@dataclass(frozen=True)
class HistorySnapshot(Generic[T]):
    """Immutable view of a StateHistory handed to subscribers."""

    value: T
    history: tuple[T, ...]
    cursor: int
    can_go_back: bool
    can_go_forward: bool


class StateHistory(Observable[HistorySnapshot[T]]):
    """A value with a bounded, navigable history of committed versions.

    The log always holds at least one entry and never more than
    ``capacity``. Committing after navigating back drops every entry after
    the cursor, so redo is just forward navigation within one log.
    Out-of-range navigation is ignored rather than raised.

    Args:
        initial: First entry of the log.
        capacity: Maximum number of retained entries. Oldest entries are
            evicted first.

    Raises:
        InvalidConfiguration: If capacity is not an integer >= 1.
    """

    def __init__(self, initial: T, capacity: int = DEFAULT_CAPACITY) -> None:
        super().__init__()
        self._capacity = validate_capacity(capacity)
        self._log: list[T] = [initial]
        self._cursor = 0

    @classmethod
    def from_config(cls, initial: T, config: HistoryConfig) -> StateHistory[T]:
        """Create a container using the capacity from a HistoryConfig."""
        return cls(initial, capacity=config.capacity)

    def __len__(self) -> int:
        return len(self._log)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(cursor={self._cursor}, "
            f"size={len(self._log)}, capacity={self._capacity})"
        )

    @property
    def capacity(self) -> int:
        """Maximum number of entries kept."""
        return self._capacity

    @property
    def current(self) -> T:
        """The visible value, always ``history[cursor]``."""
        return self._log[self._cursor]

    def current_value(self) -> T:
        """Return the visible value."""
        return self._log[self._cursor]

    @property
    def history(self) -> tuple[T, ...]:
        """Copy of the log, oldest entry first."""
        return tuple(self._log)

    @property
    def cursor(self) -> int:
        """Index of the visible value within the log."""
        return self._cursor

    @property
    def can_go_back(self) -> bool:
        """Whether back() would move the cursor."""
        return self._cursor > 0

    @property
    def can_go_forward(self) -> bool:
        """Whether forward() would move the cursor."""
        return self._cursor < len(self._log) - 1

    def snapshot(self) -> HistorySnapshot[T]:
        """Return the value, log, cursor and navigation flags as one object."""
        return HistorySnapshot(
            value=self.current,
            history=self.history,
            cursor=self._cursor,
            can_go_back=self.can_go_back,
            can_go_forward=self.can_go_forward,
        )

    def commit(self, next_value: T | Value[T] | Transform[T] | Callable[[T], T]) -> T:
        """Make a new value current and record it in the log.

        A value equal to the entry at the cursor leaves the log and cursor
        alone. Otherwise entries after the cursor are dropped, the value is
        appended, the oldest entries are evicted down to capacity and the
        cursor moves to the new last entry.

        Returns:
            The current value after the commit.
        """
        value = resolve_commit(next_value, self.current)
        at_cursor = self._log[self._cursor]

        if value == at_cursor:
            if value is not at_cursor:
                # Equal but distinct object: it becomes the visible value
                self._log[self._cursor] = value
                self._notify()
            return value

        if self._cursor < len(self._log) - 1:
            dropped = len(self._log) - self._cursor - 1
            del self._log[self._cursor + 1 :]
            logger.debug("Truncated %d forward entries after index %d", dropped, self._cursor)

        self._log.append(value)

        overflow = len(self._log) - self._capacity
        if overflow > 0:
            del self._log[:overflow]
            logger.debug("Evicted %d oldest entries (capacity %d)", overflow, self._capacity)

        self._cursor = len(self._log) - 1
        self._notify()
        return value

    def back(self) -> T:
        """Move the cursor one entry back. No-op at the oldest entry."""
        if self._cursor <= 0:
            return self.current
        self._cursor -= 1
        self._notify()
        return self.current

    def forward(self) -> T:
        """Move the cursor one entry forward. No-op at the newest entry."""
        if self._cursor >= len(self._log) - 1:
            return self.current
        self._cursor += 1
        self._notify()
        return self.current

    def go_to(self, index: int) -> T:
        """Move the cursor to ``index``. Out-of-range indexes are ignored.

        Negative indexes are out of range; they do not count from the end.
        """
        if index < 0 or index > len(self._log) - 1:
            logger.debug("Ignoring go_to(%d) on log of %d entries", index, len(self._log))
            return self.current
        if index == self._cursor:
            return self.current
        self._cursor = index
        self._notify()
        return self.current


def create(initial: T, capacity: int = DEFAULT_CAPACITY) -> StateHistory[T]:
    """Create a StateHistory holding ``initial``."""
    return StateHistory(initial, capacity=capacity)
