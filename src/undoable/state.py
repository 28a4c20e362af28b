"""Small observable state holders: plain, toggle, validated, previous, array."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from undoable.observable import Observable

T = TypeVar("T")


class State(Observable[T]):
    """A single observable value.

    ``set()`` accepts a value or an updater called with the current value.
    Subscribers are notified only when the value actually changes.
    """

    def __init__(self, initial: T | Callable[[], T]) -> None:
        super().__init__()
        self._value: T = initial() if callable(initial) else initial

    @property
    def value(self) -> T:
        """The current value."""
        return self._value

    def snapshot(self) -> T:
        return self._value

    def set(self, next_value: T | Callable[[T], T]) -> T:
        """Replace the value, or derive it from the current one."""
        value = next_value(self._value) if callable(next_value) else next_value
        if value != self._value:
            self._value = value
            self._on_change()
            self._notify()
        return self._value

    def _on_change(self) -> None:
        """Hook for subclasses that keep derived state."""


class ToggleState(State[bool]):
    """Boolean state that flips on toggle()."""

    def __init__(self, initial: bool = False) -> None:
        super().__init__(bool(initial))

    def toggle(self, value: bool | None = None) -> bool:
        """Flip the value, or force it when a bool is given."""
        if isinstance(value, bool):
            return self.set(value)
        return self.set(lambda current: not current)


class ValidatedState(State[T]):
    """State that re-runs a validator on every change.

    Args:
        validator: Called with each new value; its truthiness is exposed
            as ``is_valid``.
        initial: Starting value, validated immediately.
    """

    def __init__(self, validator: Callable[[T], Any], initial: T) -> None:
        self._validator = validator
        super().__init__(initial)
        self._is_valid = bool(validator(self._value))

    @property
    def is_valid(self) -> bool:
        """Result of the validator for the current value."""
        return self._is_valid

    def _on_change(self) -> None:
        self._is_valid = bool(self._validator(self._value))


class PreviousValue(Generic[T]):
    """Remembers the value seen before the current one.

    Repeated updates with an equal value keep the earlier previous value.
    """

    def __init__(self, initial: T) -> None:
        self._current = initial
        self._previous: T | None = None

    @property
    def current(self) -> T:
        return self._current

    @property
    def previous(self) -> T | None:
        """The last distinct value before current, or None."""
        return self._previous

    def update(self, value: T) -> T | None:
        """Record a new current value and return the previous one."""
        if value != self._current:
            self._previous = self._current
            self._current = value
        return self._previous


class ArrayState(Observable[tuple[T, ...]]):
    """Observable list whose operations always build a new sequence.

    Out-of-range indexes in update() and remove() leave the items unchanged.
    Negative indexes are out of range, and update(len(items), x) does not append.
    """

    def __init__(self, initial: Iterable[T] = ()) -> None:
        super().__init__()
        self._items: tuple[T, ...] = tuple(initial)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    def snapshot(self) -> tuple[T, ...]:
        return self._items

    def _replace(self, items: tuple[T, ...]) -> None:
        if items != self._items:
            self._items = items
            self._notify()

    def set(self, items: Iterable[T]) -> None:
        """Replace all items."""
        self._replace(tuple(items))

    def push(self, item: T) -> None:
        """Append an item."""
        self._replace((*self._items, item))

    def filter(self, predicate: Callable[[T], Any]) -> None:
        """Keep only items for which predicate is truthy."""
        self._replace(tuple(item for item in self._items if predicate(item)))

    def update(self, index: int, item: T) -> None:
        """Replace the item at index."""
        if not 0 <= index < len(self._items):
            return
        self._replace((*self._items[:index], item, *self._items[index + 1 :]))

    def remove(self, index: int) -> None:
        """Remove the item at index."""
        if not 0 <= index < len(self._items):
            return
        self._replace((*self._items[:index], *self._items[index + 1 :]))

    def clear(self) -> None:
        """Remove all items."""
        self._replace(())
