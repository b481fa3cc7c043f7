"""Reactive cells — minimal observable state for binding form values and errors.

A ``Cell`` holds a value and notifies subscribers with ``(new, previous)``
whenever the value is replaced by a different object. A ``Derived`` cell
recomputes its value from other cells on every read.

Usage:
    values = Cell({"name": "John"})
    stop = subscribe(values, lambda new, old: print(new, old))
    values.update(name="Johnny")   # listener called with both snapshots
    stop()

In-place mutation of a held dict (``values.value["name"] = ...``) is not
observed; replace the value or use ``update()``.
"""

from typing import Any, Callable, Generic, List, Optional, TypeVar

import structlog

logger = structlog.get_logger()

T = TypeVar("T")

# Type alias for change listeners: (new_value, previous_value) -> None
Listener = Callable[[Any, Any], None]


class Cell(Generic[T]):
    """Mutable reactive cell with synchronous change notification."""

    def __init__(self, value: T):
        self._value = value
        self._listeners: List[Listener] = []

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        previous = self._value
        self._value = new_value
        if new_value is not previous:
            self._notify(new_value, previous)

    def update(self, **changes: Any) -> None:
        """Replace a dict value with a copy carrying ``changes``."""
        self.value = {**self._value, **changes}

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        self._listeners.append(listener)
        logger.debug("cell_subscribe", total_listeners=len(self._listeners))

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _notify(self, new_value: T, previous: T) -> None:
        """Call every listener, then re-raise the first listener error."""
        first_error: Optional[Exception] = None
        # Snapshot so listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            try:
                listener(new_value, previous)
            except Exception as e:
                logger.warning("cell_listener_failed", error=str(e), error_type=type(e).__name__)
                if first_error is None:
                    first_error = e
        if first_error is not None:
            raise first_error

    def __repr__(self) -> str:
        return f"Cell({self._value!r})"


class Derived(Generic[T]):
    """Read-only cell whose value is recomputed from ``fn`` on every read."""

    def __init__(self, fn: Callable[[], T]):
        self._fn = fn

    @property
    def value(self) -> T:
        return self._fn()

    def __repr__(self) -> str:
        return f"Derived({self.value!r})"


def derive(fn: Callable[[], T]) -> Derived[T]:
    """Create a derived cell computed from other cells."""
    return Derived(fn)


def subscribe(cell: Cell, listener: Listener) -> Callable[[], None]:
    """Call ``listener(new, previous)`` whenever ``cell`` changes."""
    return cell.subscribe(listener)
