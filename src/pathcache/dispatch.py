"""Dispatch expectation helpers.

A store's ``dispatch`` resolves to the action that ended the operation,
usually a success action carrying a ``response`` or a failure action. These
helpers turn that into a plain return value or an
:class:`~pathcache.exceptions.ActionMismatchError`.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Protocol

from pathcache._summary import summarize_for_log
from pathcache.exceptions import ActionMismatchError

_logger = logging.getLogger(__name__)

Action = Mapping[str, Any]
Dispatch = Callable[[Action], Awaitable[Action]]


class DispatchingStore(Protocol):
    def dispatch(self, action: Action) -> Awaitable[Action]: ...


def is_response_action(value: Any) -> bool:
    """Return True if *value* looks like an action carrying a ``response``."""
    return isinstance(value, Mapping) and "type" in value and "response" in value


def ensure_action_matches(expected_type: Any) -> Callable[[Action], Action]:
    """Return a check that passes actions of *expected_type* through unchanged."""

    def check(action: Action) -> Action:
        if isinstance(action, Mapping) and action.get("type") == expected_type:
            return action
        raise ActionMismatchError(expected_type, action)

    return check


async def run_dispatch_and_expect(dispatch: Dispatch, action: Action, expected_type: Any) -> Any:
    """Dispatch *action* and return the ``response`` of the resulting action.

    Raises :class:`ActionMismatchError` when the resolved action is not of
    *expected_type*. Its ``payload`` is the mismatched action's ``response``
    if it has one, otherwise the action itself. Errors raised by *dispatch*
    propagate unchanged.
    """
    result = await dispatch(action)

    try:
        matched = ensure_action_matches(expected_type)(result)
    except ActionMismatchError:
        payload = result["response"] if is_response_action(result) else result
        _logger.debug(
            "Dispatch expected %r but resolved to %s",
            expected_type,
            summarize_for_log(result),
        )
        actual_type = result.get("type") if isinstance(result, Mapping) else None
        raise ActionMismatchError(expected_type, payload, actual_type=actual_type) from None

    return matched.get("response")


async def dispatch_thunk_and_expect(store: DispatchingStore, action: Action, expected_type: Any) -> Any:
    """:func:`run_dispatch_and_expect` through ``store.dispatch``."""
    return await run_dispatch_and_expect(store.dispatch, action, expected_type)
