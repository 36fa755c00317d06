"""State layout configuration for pathcache."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pathcache._constants import DEFAULT_DATA_KEY, DEFAULT_QUERIES_KEY
from pathcache.exceptions import PathCacheConfigError


@dataclasses.dataclass(frozen=True)
class StateLayout:
    """Where the cache and query tracking sections live in a state snapshot.

    Parameters
    ----------
    data_key : str
        Key of the flat cache section (identifier -> document).
    queries_key : str
        Key of the query tracking section (canonical query key -> entry).
    """

    data_key: str = DEFAULT_DATA_KEY
    queries_key: str = DEFAULT_QUERIES_KEY

    def __post_init__(self) -> None:
        if not self.data_key or not self.queries_key:
            raise PathCacheConfigError("state layout keys must be non-empty")
        if self.data_key == self.queries_key:
            raise PathCacheConfigError(
                f"data_key and queries_key must differ, both are {self.data_key!r}"
            )

    @classmethod
    def from_env(cls, **overrides: Any) -> StateLayout:
        """Create a layout from environment variables.

        Reads ``PATHCACHE_DATA_KEY`` and ``PATHCACHE_QUERIES_KEY``. Explicit
        keyword arguments override environment values.
        """
        env = os.environ

        _ENV_LAYOUT_MAP = {
            "PATHCACHE_DATA_KEY": "data_key",
            "PATHCACHE_QUERIES_KEY": "queries_key",
        }
        kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_LAYOUT_MAP.items():
            val = env.get(env_key)
            if val is not None:
                kwargs[field_name] = val.strip()

        kwargs.update(overrides)

        return cls(**kwargs)


DEFAULT_LAYOUT = StateLayout()
