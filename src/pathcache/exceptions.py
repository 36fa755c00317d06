"""Custom exception hierarchy for pathcache."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class PathCacheError(Exception):
    """Base exception for all pathcache errors."""


class PathCacheConfigError(PathCacheError):
    """Invalid state layout configuration."""


class InvalidPathError(PathCacheError, ValueError):
    """A path is not a string starting with a single ``/``."""

    def __init__(self, message: str, *, path: Any = None) -> None:
        self.path = path
        super().__init__(message)


class UnknownFilterError(PathCacheError, ValueError):
    """A query used a filter name that is not one of ``parent``, ``ancestor`` or ``type``."""

    def __init__(self, name: Any) -> None:
        self.name = name
        super().__init__(f"Unknown query filter {name!r}")


class UnsupportedValueError(PathCacheError, TypeError):
    """Value is not JSON-compatible (null, bool, number, string, array, object)."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Unsupported value of type {type(value).__name__}")


class ActionMismatchError(PathCacheError):
    """A dispatched action resolved to an unexpected action type.

    ``payload`` carries the unwrapped ``response`` when the mismatched action
    is itself a response-bearing action, otherwise the raw action.
    """

    def __init__(self, expected_type: Any, payload: Any, *, actual_type: Any = None) -> None:
        self.expected_type = expected_type
        self.payload = payload
        if actual_type is None and isinstance(payload, Mapping):
            actual_type = payload.get("type")
        self.actual_type = actual_type
        super().__init__(f"Expected action {expected_type!r}, got {actual_type!r}")
