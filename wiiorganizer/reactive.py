"""Observable values and helpers that forward their changes to a message queue."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, List, Protocol, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Outbox(Protocol):
    """Anything that accepts messages, such as :class:`queue.Queue`."""

    def put(self, item: Any) -> None:  # pragma: no cover - protocol
        ...


class Dynamic(Generic[T]):
    """A thread-safe value that notifies listeners when it changes."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._lock = threading.RLock()
        self._listeners: List[Callable[[T], None]] = []

    def __repr__(self) -> str:
        return f"Dynamic({self.get()!r})"

    def get(self) -> T:
        """Return the current value."""
        with self._lock:
            return self._value

    def set(self, value: T) -> None:
        """Replace the value, notifying listeners only if it differs."""
        with self._lock:
            if value == self._value:
                return
            self._value = value
        self._notify()

    def map_mut(self, func: Callable[[T], Any]) -> Any:
        """Let ``func`` mutate the value in place, then notify listeners."""
        with self._lock:
            result = func(self._value)
        self._notify()
        return result

    def on_change(self, callback: Callable[[], None]) -> None:
        """Call ``callback`` with no arguments after every change."""
        self._listeners.append(lambda _value: callback())

    def for_each(self, callback: Callable[[T], None]) -> None:
        """Call ``callback`` with the current value now and after every change."""
        callback(self.get())
        self._listeners.append(callback)

    def _notify(self) -> None:
        value = self.get()
        for listener in list(self._listeners):
            listener(value)


def connect_const(source: Dynamic[Any], outbox: Outbox, value: Any) -> None:
    """Send ``value`` to ``outbox`` every time ``source`` changes."""
    source.on_change(lambda: outbox.put(value))


def connect(source: Dynamic[T], outbox: Outbox, mapper: Callable[[T], U]) -> None:
    """Send ``mapper(value)`` to ``outbox`` now and every time ``source`` changes."""
    source.for_each(lambda value: outbox.put(mapper(value)))