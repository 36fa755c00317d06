"""Structural query filters.

Each filter factory takes the filter argument from a query and returns a
predicate over ``(document, uid)``. A query is the AND of its filters.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import StrEnum
from typing import Any

from pathcache._constants import UID_SEPARATOR
from pathcache.exceptions import UnknownFilterError

Predicate = Callable[[Any, Any], bool]


class FilterKind(StrEnum):
    PARENT = "parent"
    ANCESTOR = "ancestor"
    TYPE = "type"


def type_filter(expected_type: Any) -> Predicate:
    """Match documents whose ``type`` equals *expected_type*."""

    def predicate(document: Any, uid: str | None) -> bool:
        return isinstance(document, Mapping) and document.get("type") == expected_type

    return predicate


def ancestor_filter(ancestor: str) -> Predicate:
    """Match any uid strictly below *ancestor*, at any depth.

    ``a.b.c`` is below ``a.b``; ``a.bc`` and ``a.b`` itself are not.
    """

    def predicate(document: Any, uid: str | None) -> bool:
        if document is None or not isinstance(uid, str):
            return False
        return uid.startswith(ancestor) and uid[len(ancestor) :].startswith(UID_SEPARATOR)

    return predicate


def parent_filter(parent: str) -> Predicate:
    """Match uids exactly one level below *parent*."""
    is_descendant = ancestor_filter(parent)

    def predicate(document: Any, uid: str | None) -> bool:
        return is_descendant(document, uid) and uid[len(parent) :].count(UID_SEPARATOR) == 1

    return predicate


_FACTORIES: dict[FilterKind, Callable[[Any], Predicate]] = {
    FilterKind.PARENT: parent_filter,
    FilterKind.ANCESTOR: ancestor_filter,
    FilterKind.TYPE: type_filter,
}


def build_filter(name: str, argument: Any) -> Predicate:
    """Build the predicate for one query entry."""
    try:
        kind = FilterKind(name)
    except ValueError:
        raise UnknownFilterError(name) from None
    return _FACTORIES[kind](argument)


def compile_query(query: Mapping[str, Any] | None) -> list[Predicate]:
    """Build predicates for every entry of *query*, in key order."""
    if not query:
        return []
    return [build_filter(name, argument) for name, argument in query.items()]


def matches_query(query: Mapping[str, Any] | None, document: Any) -> bool:
    """Return True if a single *document* satisfies every filter of *query*.

    The document's uid is read from its ``id`` field, as attached by
    :func:`pathcache.documents.make_item_with`. A missing document never
    matches; a missing query matches everything else.
    """
    if document is None:
        return False

    uid = document.get("id") if isinstance(document, Mapping) else None

    return all(predicate(document, uid) for predicate in compile_query(query))
