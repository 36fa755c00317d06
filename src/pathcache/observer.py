"""Change observation over a subscribable store.

An observer watches either the whole state or one sub-value of it, selected
by a path (see :func:`pathcache.addressing.resolve_by_path`), and fires a
callback when the *reference* of that value changes between two store
notifications. Scalars (numbers, strings, booleans) compare by value.

Precondition: the store's reducer never mutates state in place. Every
logical change must produce a new object along the path to the changed
value, otherwise no change is detected. Structural equality of arrays and
objects is never used.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from pathcache._summary import summarize_for_log
from pathcache.addressing import resolve_by_path
from pathcache.values import is_same_value

_logger = logging.getLogger(__name__)

ChangeCallback = Callable[[Any, Any], None]
Selector = str | Sequence[Any]


class Store(Protocol):
    """Structural interface of the state container being observed."""

    def get_state(self) -> Any: ...

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]: ...


@dataclass(frozen=True, slots=True)
class Observation:
    """Handle returned by :meth:`StoreObserver.observe`.

    ``unobserve`` is the store's own unsubscribe callable.
    """

    unobserve: Callable[[], None]


class StoreObserver:
    """Observer bound to a single store.

    Usage::

        observer = wrap(store)
        handle = observer.observe("data.posts", on_change)
        ...
        handle.unobserve()
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    def observe(self, *args: Any) -> Observation:
        """Observe the state, or the value at an optional selector.

        The last positional argument is the callback, called as
        ``callback(new_value, old_value)``. A preceding argument, when
        given, is the selector.
        """
        if not args or not callable(args[-1]):
            raise TypeError("observe() requires a change callback as its last argument")

        on_change: ChangeCallback = args[-1]
        selector: Selector | None = args[0] if len(args) > 1 else None
        store = self._store

        def select() -> Any:
            state = store.get_state()
            return resolve_by_path(selector, state) if selector else state

        last = select()

        def handle_change() -> None:
            nonlocal last
            current = select()
            if is_same_value(last, current):
                return
            previous, last = last, current
            _logger.debug("Observed change selector=%r value=%s", selector, summarize_for_log(current))
            on_change(current, previous)

        return Observation(unobserve=store.subscribe(handle_change))


def wrap(store: Store) -> StoreObserver:
    """Bind an observer to *store*."""
    return StoreObserver(store)


store_to_observer = wrap
