"""
Observable Cell - A stone counter that pushes every change to its subscribers.

Each cell keeps two values:
- value: the live count, mutated while a selection is being sown
- committed: the count at the last commit, restored by undo

Notification is a direct, synchronous call of every subscriber with the
current value. Subscribers see intermediate sowing steps as they happen.
"""

from __future__ import annotations
from typing import Callable

from .errors import InvalidArgumentError

Subscriber = Callable[[int], None]


class ObservableCell:
    """A non-negative stone count with one level of undo."""

    def __init__(self, value: int = 0):
        if value < 0:
            raise InvalidArgumentError("stones cannot be negative")
        self._value = value
        self._committed = value
        self._subscribers: list[Subscriber] = []

    @property
    def value(self) -> int:
        return self._value

    @property
    def committed(self) -> int:
        """The count as of the last commit (or construction)."""
        return self._committed

    @property
    def is_empty(self) -> bool:
        return self._value == 0

    def subscribe(self, callback: Subscriber) -> None:
        """Register a callback invoked with the new value on every change."""
        self._subscribers.append(callback)

    def clear_subscribers(self) -> None:
        self._subscribers.clear()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def add_one(self) -> None:
        self.add(1)

    def add(self, stones: int) -> None:
        """Add a non-negative amount of stones."""
        if stones < 0:
            raise InvalidArgumentError("stones cannot be negative")
        self._value += stones
        self._notify()

    def take_all(self) -> int:
        """Empty the cell and return how many stones it held."""
        stones = self._value
        self._value = 0
        self._notify()
        return stones

    def commit(self) -> None:
        self._committed = self._value
        self._notify()

    def undo(self) -> None:
        self._value = self._committed
        self._notify()

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            callback(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self._value}, committed={self._committed})"
