"""Path and identifier addressing.

Documents are addressed externally by slash paths (``/posts/42``) and stored
in the flat cache under dot identifiers (``posts.42``). This module converts
between the two and resolves nested fields inside a value by a dotted or
pre-split accessor path.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from pathcache._constants import PATH_SEPARATOR, UID_SEPARATOR
from pathcache.exceptions import InvalidPathError

_INDEX_RE = re.compile(r"[+-]?\d+")


def path_to_identifier(path: str) -> str:
    """Convert ``/a/b/c`` to ``a.b.c``. Falsy paths are returned unchanged."""
    if not path:
        return path

    path = path.strip(PATH_SEPARATOR)

    return UID_SEPARATOR.join(path.split(PATH_SEPARATOR))


def identifier_to_path(identifier: str) -> str:
    """Convert ``a.b.c`` to ``/a/b/c``. Falsy identifiers are returned unchanged."""
    if not identifier:
        return identifier

    # Normalize so there's always a leading separator
    if not identifier.startswith(UID_SEPARATOR):
        identifier = f"{UID_SEPARATOR}{identifier}"

    return PATH_SEPARATOR.join(identifier.split(UID_SEPARATOR))


def validate_path(path: Any) -> None:
    """Raise :class:`InvalidPathError` unless *path* is a well-formed path.

    A well-formed path is a string starting with ``/`` that never contains
    two ``/`` in a row.
    """
    if not isinstance(path, str) or not path.startswith(PATH_SEPARATOR):
        raise InvalidPathError(
            f"Invalid path {path!r}. Path must be a string starting with '/'",
            path=path,
        )

    if PATH_SEPARATOR * 2 in path:
        raise InvalidPathError(
            f"Invalid path {path!r}. Paths must not have more than one '/' in a row.",
            path=path,
        )


def _segment_selector(segment: Any) -> Any:
    """Integer-looking segments select by index, everything else by key."""
    if isinstance(segment, str) and _INDEX_RE.fullmatch(segment):
        return int(segment)
    return segment


def _select(value: Any, selector: Any) -> Any:
    if isinstance(value, Mapping):
        return value.get(selector)

    # Strings index to single characters.
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        if isinstance(selector, int) and 0 <= selector < len(value):
            return value[selector]

    return None


def resolve_by_path(path: str | Sequence[Any], value: Any) -> Any:
    """Resolve a nested field of *value*.

    *path* is either a dotted string (``"items.0.title"``) or a sequence of
    segments. Segments that parse as integers are always used as indexes,
    including against mappings, so ``{"0": x}`` is not reachable through
    segment ``"0"``. Resolving through ``None`` or a missing key yields
    ``None``.
    """
    if isinstance(path, str):
        path = path.split(UID_SEPARATOR)

    for segment in path:
        if value is None:
            return None
        value = _select(value, _segment_selector(segment))

    return value
