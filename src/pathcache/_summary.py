"""Helpers for compact debug logging.

Cached documents and state snapshots can be arbitrarily large. This module
provides a small utility to shrink values before emitting DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


def summarize_for_log(
    value: Any,
    *,
    max_string: int = 120,
    max_items: int = 20,
    max_depth: int = 6,
    _depth: int = 0,
) -> Any:
    """Return a shortened copy of *value* suitable for debug logs."""
    if _depth > max_depth:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, bytes):
        return f"<bytes:{len(value)}b>"

    kwargs = {"max_string": max_string, "max_items": max_items, "max_depth": max_depth, "_depth": _depth + 1}

    if isinstance(value, Mapping):
        summary: dict[str, Any] = {}
        for index, (k, v) in enumerate(value.items()):
            if index >= max_items:
                summary["…"] = f"<{len(value) - max_items} more>"
                break
            summary[str(k)] = summarize_for_log(v, **kwargs)
        return summary

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        items = [summarize_for_log(v, **kwargs) for v in value[:max_items]]
        if len(value) > max_items:
            items.append(f"<{len(value) - max_items} more>")
        return items

    # Fallback: represent unknown objects without dumping internals.
    return repr(value)
