"""Query execution over the flat cache.

The cache section of a state snapshot maps uids to documents. A query is
evaluated by narrowing the full uid set through each of its filters, then
materializing the surviving uids back into documents.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pathcache.config import DEFAULT_LAYOUT, StateLayout
from pathcache.query.filters import build_filter

_logger = logging.getLogger(__name__)


def _content(state: Mapping[str, Any], layout: StateLayout) -> Mapping[str, Any] | None:
    return state.get(layout.data_key)


def select_data_from_state(
    uid: str,
    state: Mapping[str, Any],
    *,
    layout: StateLayout = DEFAULT_LAYOUT,
) -> Any:
    """Return the document cached under *uid*, or ``None``."""
    content = _content(state, layout)
    if not content:
        return None
    return content.get(uid)


def uids_to_response(
    uids: Iterable[str],
    state: Mapping[str, Any],
    *,
    layout: StateLayout = DEFAULT_LAYOUT,
) -> dict[str, list[Any]]:
    """Map *uids* to their documents, keeping ``None`` for missing ones."""
    content = _content(state, layout) or {}

    return {"items": [content.get(uid) for uid in uids]}


def find_data_in_state(
    query: Mapping[str, Any] | None,
    state: Mapping[str, Any],
    *,
    layout: StateLayout = DEFAULT_LAYOUT,
) -> dict[str, list[Any]]:
    """Return every cached document matching all filters of *query*."""
    content = _content(state, layout)
    if not content:
        return {"items": []}

    uids = list(content)
    for name, argument in (query or {}).items():
        predicate = build_filter(name, argument)
        uids = [uid for uid in uids if predicate(content[uid], uid)]

    _logger.debug("Query %s matched %d of %d cached documents", dict(query or {}), len(uids), len(content))

    return uids_to_response(uids, state, layout=layout)
