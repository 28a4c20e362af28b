"""Change notification shared by all state containers."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from typing import Generic, TypeVar

S = TypeVar("S")

Subscriber = Callable[[S], object]


class Observable(Generic[S]):
    """Keeps registered subscribers and calls them with a snapshot on change.

    Subclasses call ``_notify()`` after every state change that is visible to
    consumers, and never for no-op calls. Snapshots come from ``snapshot()``,
    which subclasses implement.

    Each ``subscribe()`` call is its own registration, so the same callable
    subscribed twice is called twice and is removed one handle at a time.
    """

    def __init__(self) -> None:
        self._subscribers: dict[int, Subscriber[S]] = {}
        self._next_token = itertools.count()

    def snapshot(self) -> S:
        """Return an immutable view of the current state."""
        raise NotImplementedError

    def subscribe(self, callback: Subscriber[S]) -> Callable[[], None]:
        """Register a callback for state changes.

        Returns:
            A function that removes this registration. Calling it more than
            once is harmless and never touches other registrations.
        """
        token = next(self._next_token)
        self._subscribers[token] = callback

        def unsubscribe() -> None:
            self._subscribers.pop(token, None)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        """Number of live registrations."""
        return len(self._subscribers)

    def _notify(self) -> None:
        """Call every subscriber with the current snapshot.

        All subscribers are called even if one raises; the first exception
        is re-raised once every subscriber has run.
        """
        if not self._subscribers:
            return
        snap = self.snapshot()
        first_error: Exception | None = None
        # Registrations added during this loop wait for the next change
        for token in list(self._subscribers):
            callback = self._subscribers.get(token)
            if callback is None:
                continue
            try:
                callback(snap)
            except Exception as e:
                if first_error is None:
                    first_error = e
        if first_error is not None:
            raise first_error
