from __future__ import annotations

import pytest

from pathcache.config import DEFAULT_LAYOUT, StateLayout
from pathcache.exceptions import PathCacheConfigError


def test_default_layout() -> None:
    assert DEFAULT_LAYOUT.data_key == "data"
    assert DEFAULT_LAYOUT.queries_key == "queries"


def test_layout_from_env(monkeypatch) -> None:
    monkeypatch.setenv("PATHCACHE_DATA_KEY", "content")
    monkeypatch.setenv("PATHCACHE_QUERIES_KEY", "tracked")

    layout = StateLayout.from_env()

    assert layout == StateLayout(data_key="content", queries_key="tracked")


def test_overrides_beat_env(monkeypatch) -> None:
    monkeypatch.setenv("PATHCACHE_DATA_KEY", "content")

    layout = StateLayout.from_env(data_key="cache")

    assert layout.data_key == "cache"
    assert layout.queries_key == "queries"


def test_invalid_layouts_rejected() -> None:
    with pytest.raises(PathCacheConfigError):
        StateLayout(data_key="")
    with pytest.raises(PathCacheConfigError):
        StateLayout(data_key="same", queries_key="same")
