"""Internal constants shared across the library."""

# Separator between identifier segments (``a.b.c``).
UID_SEPARATOR = "."
# Separator between path segments (``/a/b/c``).
PATH_SEPARATOR = "/"

DEFAULT_DATA_KEY = "data"
DEFAULT_QUERIES_KEY = "queries"

# Fields a stored document may carry.
DOCUMENT_FIELDS: frozenset[str] = frozenset({"type", "data"})

# Flag on a query tracking entry marking it as fetched from the remote source.
QUERIED_REMOTE_KEY = "queriedRemote"

# Characters ``encodeURIComponent`` leaves untouched besides alphanumerics.
URI_COMPONENT_SAFE = "-_.!~*'()"
