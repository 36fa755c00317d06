"""pathcache - In-memory query and change observation for a path-addressed document cache."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pathcache")
except PackageNotFoundError:
    __version__ = "0+local"
from pathcache.addressing import identifier_to_path, path_to_identifier, resolve_by_path, validate_path
from pathcache.config import DEFAULT_LAYOUT, StateLayout
from pathcache.dispatch import (
    dispatch_thunk_and_expect,
    ensure_action_matches,
    is_response_action,
    run_dispatch_and_expect,
)
from pathcache.documents import (
    Document,
    data_is_valid,
    item_uid_to_path,
    make_blank_item,
    make_item_with,
    query_results_to_path,
)
from pathcache.exceptions import (
    ActionMismatchError,
    InvalidPathError,
    PathCacheConfigError,
    PathCacheError,
    UnknownFilterError,
    UnsupportedValueError,
)
from pathcache.observer import Observation, Store, StoreObserver, store_to_observer, wrap
from pathcache.query import (
    FilterKind,
    find_data_in_state,
    has_run_query,
    matches_query,
    select_data_from_state,
    to_query_params,
    uids_to_response,
)
from pathcache.values import JsonKind, deep_clone, deep_equal, is_same_value, kind_of

__all__ = [
    "__version__",
    "ActionMismatchError",
    "DEFAULT_LAYOUT",
    "Document",
    "FilterKind",
    "InvalidPathError",
    "JsonKind",
    "Observation",
    "PathCacheConfigError",
    "PathCacheError",
    "StateLayout",
    "Store",
    "StoreObserver",
    "UnknownFilterError",
    "UnsupportedValueError",
    "data_is_valid",
    "deep_clone",
    "deep_equal",
    "dispatch_thunk_and_expect",
    "ensure_action_matches",
    "find_data_in_state",
    "has_run_query",
    "identifier_to_path",
    "is_response_action",
    "is_same_value",
    "item_uid_to_path",
    "kind_of",
    "make_blank_item",
    "make_item_with",
    "matches_query",
    "path_to_identifier",
    "query_results_to_path",
    "resolve_by_path",
    "run_dispatch_and_expect",
    "select_data_from_state",
    "store_to_observer",
    "to_query_params",
    "uids_to_response",
    "validate_path",
    "wrap",
]
