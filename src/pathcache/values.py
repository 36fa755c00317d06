"""Structural equality and cloning for JSON-compatible values.

Both operations dispatch on :class:`JsonKind`, a closed classification of
the values a cached document may hold. Anything outside that set raises
:class:`~pathcache.exceptions.UnsupportedValueError`.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pathcache.exceptions import UnsupportedValueError


class JsonKind(StrEnum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


_SCALAR_KINDS: frozenset[JsonKind] = frozenset({JsonKind.NULL, JsonKind.BOOLEAN, JsonKind.NUMBER, JsonKind.STRING})


def kind_of(value: Any) -> JsonKind:
    """Classify *value* into its :class:`JsonKind`."""
    if value is None:
        return JsonKind.NULL
    # bool is a subclass of int, check it first.
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY
    if isinstance(value, Mapping):
        return JsonKind.OBJECT
    raise UnsupportedValueError(value)


def deep_equal(a: Any, b: Any) -> bool:
    """Return True if *a* and *b* are structurally equal.

    Arrays are order-sensitive, object key order is irrelevant.
    """
    kind = kind_of(a)
    if kind != kind_of(b):
        return False

    if kind in _SCALAR_KINDS:
        return bool(a == b)

    if kind == JsonKind.ARRAY:
        return len(a) == len(b) and all(deep_equal(x, y) for x, y in zip(a, b, strict=True))

    if a.keys() != b.keys():
        return False
    return all(deep_equal(a[key], b[key]) for key in a)


def deep_clone(value: Any) -> Any:
    """Deep clone a JSON-compatible value.

    Scalars are returned as-is. Arrays become new lists and objects new plain
    dicts; nothing but data is carried over.
    """
    kind = kind_of(value)

    if kind in _SCALAR_KINDS:
        return value

    if kind == JsonKind.ARRAY:
        return [deep_clone(item) for item in value]

    return {key: deep_clone(item) for key, item in value.items()}


def is_same_value(a: Any, b: Any) -> bool:
    """Return True if *b* counts as unchanged from *a*.

    Arrays and objects are compared by reference. Scalars are compared by
    kind and value, since an equal number or string may be a distinct object.
    Values outside the JSON model only match by reference.
    """
    if a is b:
        return True
    try:
        kind = kind_of(a)
        other = kind_of(b)
    except UnsupportedValueError:
        return False
    return kind in _SCALAR_KINDS and kind == other and bool(a == b)
