"""Query layer.

Filters classify single documents; the engine applies them across the flat
cache; params derives the canonical key a query is tracked under.
"""

from pathcache.query.engine import find_data_in_state, select_data_from_state, uids_to_response
from pathcache.query.filters import (
    FilterKind,
    Predicate,
    ancestor_filter,
    build_filter,
    compile_query,
    matches_query,
    parent_filter,
    type_filter,
)
from pathcache.query.params import has_run_query, to_query_params

__all__ = [
    "FilterKind",
    "Predicate",
    "ancestor_filter",
    "build_filter",
    "compile_query",
    "find_data_in_state",
    "has_run_query",
    "matches_query",
    "parent_filter",
    "select_data_from_state",
    "to_query_params",
    "type_filter",
    "uids_to_response",
]
