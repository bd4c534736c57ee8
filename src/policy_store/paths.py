"""Colon-delimited path handling."""

from __future__ import annotations

from policy_store.exceptions import InvalidPathError

DELIMITER = ":"


def split_path(path: str) -> list[str]:
    """Split *path* into its segments.

    The first segment names the top-level key; the rest address nested
    mappings below it.  No escaping is supported, so ``"a::b"`` yields an
    empty middle segment.

    Raises:
        InvalidPathError: If *path* is not a non-empty string.
    """
    if not isinstance(path, str) or not path:
        raise InvalidPathError(path)
    return path.split(DELIMITER)
