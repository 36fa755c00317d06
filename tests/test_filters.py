from __future__ import annotations

import pytest

from pathcache.exceptions import UnknownFilterError
from pathcache.query.filters import (
    FilterKind,
    ancestor_filter,
    build_filter,
    compile_query,
    matches_query,
    parent_filter,
    type_filter,
)

_DOC = {"type": "post", "data": 1}


def test_ancestor_matches_descendants_at_any_depth() -> None:
    predicate = ancestor_filter("a.b")

    assert predicate(_DOC, "a.b.c")
    assert predicate(_DOC, "a.b.c.d")
    assert not predicate(_DOC, "a.bc")
    assert not predicate(_DOC, "a.b")
    assert not predicate(_DOC, "x.a.b.c")


def test_parent_matches_direct_children_only() -> None:
    predicate = parent_filter("a.b")

    assert predicate(_DOC, "a.b.c")
    assert not predicate(_DOC, "a.b.c.d")
    assert not predicate(_DOC, "a.b")
    assert not predicate(_DOC, "a.bc")


def test_type_filter() -> None:
    assert type_filter("post")(_DOC, "a")
    assert not type_filter("comment")(_DOC, "a")


def test_filters_reject_missing_documents() -> None:
    assert not type_filter(None)(None, "a")
    assert not ancestor_filter("a")(None, "a.b")
    assert not parent_filter("a")(None, "a.b")


def test_build_filter_dispatches_on_kind() -> None:
    assert build_filter(FilterKind.TYPE, "post")(_DOC, "a")
    assert build_filter("parent", "a")(_DOC, "a.b")


def test_unknown_filter_name_raises() -> None:
    with pytest.raises(UnknownFilterError) as excinfo:
        build_filter("sibling", "a")
    assert excinfo.value.name == "sibling"

    with pytest.raises(ValueError):
        compile_query({"type": "post", "bogus": 1})


def test_matches_query_uses_document_id() -> None:
    item = {"type": "comment", "data": 2, "id": "a.b"}

    assert matches_query({"parent": "a", "type": "comment"}, item)
    assert not matches_query({"parent": "a", "type": "post"}, item)
    assert not matches_query({"ancestor": "a.b"}, item)


def test_matches_query_defaults() -> None:
    assert matches_query(None, _DOC)
    assert matches_query({}, _DOC)
    assert not matches_query(None, None)
    assert not matches_query({"type": "post"}, None)
