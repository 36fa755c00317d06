"""Canonical query keys.

A query is turned into a URL-style parameter string with its keys sorted,
so the same query always yields the same key regardless of insertion order.
The key is used to remember which queries were already run against the
remote source.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from pathcache._constants import QUERIED_REMOTE_KEY, URI_COMPONENT_SAFE
from pathcache.config import DEFAULT_LAYOUT, StateLayout


def _stringify(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(item) for item in value)
    return str(value)


def to_query_params(query: Mapping[str, Any] | None = None) -> str:
    """Return ``?key=value&...`` with keys sorted, or ``""`` for an empty query."""
    if not query:
        return ""

    pairs = (f"{param}={quote(_stringify(query[param]), safe=URI_COMPONENT_SAFE)}" for param in sorted(query))

    return "?" + "&".join(pairs)


def has_run_query(
    query: Mapping[str, Any] | None,
    state: Mapping[str, Any],
    *,
    layout: StateLayout = DEFAULT_LAYOUT,
) -> bool:
    """Return True if *query* is tracked as already fetched from the remote source."""
    queries = state.get(layout.queries_key)
    if not queries:
        return False

    entry = queries.get(to_query_params(query))
    if not isinstance(entry, Mapping):
        return False
    return bool(entry.get(QUERIED_REMOTE_KEY))
