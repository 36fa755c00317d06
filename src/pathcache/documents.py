"""Document shape utilities.

A stored document is the minimal ``{"type": ..., "data": ...}`` mapping.
Results prepared for consumers are reshaped here: an ``id`` is attached by
:func:`make_item_with` and swapped for an external ``path`` by
:func:`item_uid_to_path`. Every reshaped document is a fresh clone, never
a reference into the cache.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from pathcache.addressing import identifier_to_path
from pathcache.values import deep_clone


class Document(BaseModel):
    """Typed form of a stored document."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str | None = None
    data: Any = None


def data_is_valid(data: Any) -> bool:
    """Return True if *data* has the document shape and nothing else.

    Empty or missing documents are invalid. This never raises; callers decide
    what to do with an invalid document.
    """
    if not isinstance(data, Mapping) or not data:
        return False

    try:
        Document.model_validate(dict(data))
    except ValidationError:
        return False
    return True


def make_blank_item() -> dict[str, Any]:
    return {"type": None, "data": None}


def make_item_with(uid: str, item: Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Clone *item* and tag it with its cache identifier."""
    if item is None:
        return None

    cloned = deep_clone(item)
    cloned["id"] = uid
    return cloned


def item_uid_to_path(item: Mapping[str, Any] | None) -> Any:
    """Replace an item's ``id`` with its slash ``path``."""
    if not item:
        return item

    transformed = deep_clone(item)
    transformed["path"] = identifier_to_path(transformed.pop("id", None))
    return transformed


def query_results_to_path(results: Mapping[str, Any] | None) -> Any:
    """Apply :func:`item_uid_to_path` to every item of a query result."""
    if not results:
        return results

    items = [item_uid_to_path(item) for item in results["items"]]

    return {**results, "items": items}
