"""Ordered listener lists for collaborator callbacks.

A tile click can have several consumers: the calendar's own drill or commit
action and an optional caller-supplied click handler. They are kept in an
explicit list and invoked synchronously in registration order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Listeners(Generic[T]):
    """Ordered list of single-argument callbacks.

    Example:
        ```python
        on_click = Listeners([calendar.drill_down])
        on_click.add(caller_on_click_year)
        on_click(datetime(2023, 1, 1))  # drill_down runs first
        ```
    """

    def __init__(
        self, listeners: Iterable[Callable[[T], object] | None] = ()
    ) -> None:
        """Initialize the list.

        Args:
            listeners: Initial callbacks; None entries are skipped so optional
                caller handlers can be passed straight through.
        """
        self._listeners: list[Callable[[T], object]] = []
        for listener in listeners:
            self.add(listener)

    def add(self, listener: Callable[[T], object] | None) -> None:
        """Append a listener; None is ignored."""
        if listener is not None:
            self._listeners.append(listener)

    def __call__(self, value: T) -> None:
        """Invoke every listener with value, in registration order."""
        for listener in list(self._listeners):
            listener(value)

    def __len__(self) -> int:
        """Return the number of registered listeners."""
        return len(self._listeners)

    def __iter__(self) -> Iterator[Callable[[T], object]]:
        """Iterate over listeners in invocation order."""
        return iter(self._listeners)
