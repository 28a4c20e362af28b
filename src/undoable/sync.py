"""Thread-safe StateHistory for multiple writers."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import TypeVar

from undoable.config import DEFAULT_CAPACITY
from undoable.history import HistorySnapshot, StateHistory, Transform, Value

T = TypeVar("T")


class SynchronizedStateHistory(StateHistory[T]):
    """StateHistory whose operations each run under one re-entrant lock.

    The whole commit sequence (equality check, truncate, append, evict,
    advance) happens atomically. Subscribers are called with the lock held,
    so they may read or even commit from the notifying thread.
    """

    def __init__(self, initial: T, capacity: int = DEFAULT_CAPACITY) -> None:
        self._lock = threading.RLock()
        super().__init__(initial, capacity=capacity)

    @property
    def lock(self) -> threading.RLock:
        """The lock guarding the log, for callers that batch operations."""
        return self._lock

    def snapshot(self) -> HistorySnapshot[T]:
        with self._lock:
            return super().snapshot()

    def commit(self, next_value: T | Value[T] | Transform[T] | Callable[[T], T]) -> T:
        with self._lock:
            return super().commit(next_value)

    def back(self) -> T:
        with self._lock:
            return super().back()

    def forward(self) -> T:
        with self._lock:
            return super().forward()

    def go_to(self, index: int) -> T:
        with self._lock:
            return super().go_to(index)
