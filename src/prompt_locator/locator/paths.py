"""Path helpers for locating prompt source folders."""

from __future__ import annotations

from ..constants import MAX_ANCESTOR_DEPTH
from ..uri import URI, basename, dirname, resolve_path


def root_dirname(uri: URI) -> URI:
    """Return the top-level root directory of ``uri``.

    The root directory is the ancestor whose parent has an empty basename,
    e.g. ``/foo`` for ``/foo/bar/baz``.  A top-level URI is returned as is.

    :raises ValueError: if the ancestor walk exceeds ``MAX_ANCESTOR_DEPTH``
    """
    current = uri
    for _ in range(MAX_ANCESTOR_DEPTH):
        parent = dirname(current)
        # "." is the parent of a relative top-level segment
        if basename(parent) == "" or parent == current or parent.path == ".":
            return current
        current = parent
    raise ValueError(f"Path of '{uri}' exceeds the maximum depth of {MAX_ANCESTOR_DEPTH}")


def resolve_overlapping_path(uri: URI, path: str) -> URI:
    """Resolve ``path`` relative to ``uri``, dropping an overlapping segment.

    Behaves like ``resolve_path`` except when the first segment of ``path``
    repeats the last segment of ``uri``.  In that case resolution starts one
    level above ``uri``: ``/foo/bar`` + ``bar/baz`` gives ``/foo/bar/baz``
    rather than ``/foo/bar/bar/baz``.  Absolute paths are returned as is.

    :raises ValueError: if stripping segments exceeds ``MAX_ANCESTOR_DEPTH``
    """
    path_root_name = basename(root_dirname(URI.parse(path)))

    base = uri
    for _ in range(MAX_ANCESTOR_DEPTH):
        base_name = basename(base)
        if not base_name or base_name != path_root_name:
            return resolve_path(base, path)
        base = resolve_path(base, "..")
    raise ValueError(f"Resolving '{path}' against '{uri}' exceeds the maximum depth of {MAX_ANCESTOR_DEPTH}")
