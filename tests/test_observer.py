from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import pytest

from pathcache.observer import Observation, StoreObserver, store_to_observer, wrap


class _FakeStore:
    """Minimal store: replaces state wholesale and notifies every listener."""

    def __init__(self, state: Any) -> None:
        self._state = state
        self._listeners: list[Callable[[], None]] = []

    def get_state(self) -> Any:
        return self._state

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_state(self, state: Any) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener()


def test_wrap_returns_observer() -> None:
    store = _FakeStore({})
    assert isinstance(wrap(store), StoreObserver)
    assert store_to_observer is wrap


def test_fires_on_reference_change_even_with_equal_content() -> None:
    old_value = {"v": 1}
    store = _FakeStore({"x": {"y": old_value}})
    calls: list[tuple[Any, Any]] = []

    wrap(store).observe("x.y", lambda new, old: calls.append((new, old)))

    new_value = {"v": 1}
    store.set_state({"x": {"y": new_value}})

    assert len(calls) == 1
    assert calls[0][0] is new_value
    assert calls[0][1] is old_value


def test_does_not_fire_when_selected_reference_unchanged() -> None:
    selected = {"v": 1}
    store = _FakeStore({"x": {"y": selected}, "other": 1})
    calls: list[tuple[Any, Any]] = []

    wrap(store).observe("x.y", lambda new, old: calls.append((new, old)))

    store.set_state({"x": {"y": selected}, "other": 2})

    assert calls == []


def test_observes_whole_state_without_selector() -> None:
    first = {"a": 1}
    store = _FakeStore(first)
    calls: list[tuple[Any, Any]] = []

    wrap(store).observe(lambda new, old: calls.append((new, old)))

    second = {"a": 1}
    store.set_state(second)
    store.set_state(second)

    assert calls == [(second, first)]


def test_each_notification_compares_against_previous_baseline() -> None:
    store = _FakeStore({"n": [0]})
    seen: list[Any] = []

    wrap(store).observe(["n"], lambda new, old: seen.append((new, old)))

    a, b = [1], [2]
    store.set_state({"n": a})
    store.set_state({"n": b})

    assert seen == [(a, [0]), (b, a)]
    assert seen[1][1] is a


def test_unobserve_is_the_store_unsubscribe() -> None:
    store = _FakeStore({"x": 1})
    calls: list[Any] = []

    handle = wrap(store).observe("x", lambda new, old: calls.append(new))
    assert isinstance(handle, Observation)

    store.set_state({"x": 2})
    handle.unobserve()
    handle.unobserve()
    store.set_state({"x": 3})

    assert calls == [2]


def test_observe_requires_a_callback() -> None:
    observer = wrap(_FakeStore({}))

    with pytest.raises(TypeError):
        observer.observe()
    with pytest.raises(TypeError):
        observer.observe("x.y")


def test_equal_scalars_from_fresh_state_do_not_fire() -> None:
    raw = '{"x": {"count": 100000, "ratio": 0.25, "name": "alpha-beta", "on": true}}'
    store = _FakeStore(json.loads(raw))
    calls: list[tuple[Any, Any]] = []
    observer = wrap(store)

    for selector in ("x.count", "x.ratio", "x.name", "x.on"):
        observer.observe(selector, lambda new, old: calls.append((new, old)))

    store.set_state(json.loads(raw))

    assert calls == []


def test_scalar_value_or_kind_change_fires() -> None:
    store = _FakeStore({"x": {"count": 1}})
    calls: list[tuple[Any, Any]] = []

    wrap(store).observe("x.count", lambda new, old: calls.append((new, old)))

    store.set_state({"x": {"count": 2}})
    store.set_state({"x": {"count": True}})
    store.set_state({"x": {"count": None}})

    assert calls == [(2, 1), (True, 2), (None, True)]
