"""Resource identifiers and path arithmetic.

A ``URI`` names a location on some filesystem.  The helpers in this module
operate on the URI path with POSIX semantics regardless of the host, so that
results are identical across platforms:

- ``basename`` and ``dirname`` ignore trailing slashes; ``/`` is its own parent
  and has an empty basename.
- ``resolve_path`` replaces the base path with an absolute path, or appends a
  relative one and collapses ``.``/``..`` segments.

No case folding or trailing-slash cleanup happens when URIs are compared:
``ResourceSet`` keys members by their string form.
"""

from __future__ import annotations

import posixpath
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, replace
from urllib.parse import quote, unquote, urlsplit

# Schemes whose paths are always rooted
_ROOTED_SCHEMES = {"file", "http", "https"}


@dataclass(frozen=True)
class URI:
    """Immutable resource identifier."""

    scheme: str
    authority: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""

    @classmethod
    def file(cls, path: str) -> URI:
        """Build a ``file`` URI from a filesystem path.

        A leading ``//server`` is read as the authority of a UNC path.
        """
        authority = ""
        if path.startswith("//"):
            idx = path.find("/", 2)
            if idx == -1:
                authority, path = path[2:], "/"
            else:
                authority, path = path[2:idx], path[idx:] or "/"
        if not path.startswith("/"):
            path = "/" + path
        return cls(scheme="file", authority=authority, path=path)

    @classmethod
    def parse(cls, value: str) -> URI:
        """Parse a URI string.

        Strings without a scheme are treated as ``file`` URIs, and rooted
        schemes get a leading ``/``: ``bar/baz`` parses to path ``/bar/baz``.
        """
        parts = urlsplit(value)
        scheme = parts.scheme or "file"
        path = unquote(parts.path)
        if scheme in _ROOTED_SCHEMES and not path.startswith("/"):
            path = "/" + path
        return cls(
            scheme=scheme,
            authority=unquote(parts.netloc),
            path=path,
            query=unquote(parts.query),
            fragment=unquote(parts.fragment),
        )

    @property
    def fs_path(self) -> str:
        """Filesystem path of the URI, as used for prefix comparisons."""
        if self.scheme == "file" and self.authority and len(self.path) > 1:
            return f"//{self.authority}{self.path}"
        return self.path

    def with_path(self, path: str) -> URI:
        return replace(self, path=path)

    def __str__(self) -> str:
        result = ""
        if self.scheme:
            result += f"{self.scheme}:"
        if self.authority or self.scheme == "file":
            result += f"//{quote(self.authority, safe='@:', errors='surrogateescape')}"
        result += quote(self.path, safe="/", errors="surrogateescape")
        if self.query:
            result += f"?{quote(self.query, safe='=&', errors='surrogateescape')}"
        if self.fragment:
            result += f"#{quote(self.fragment, safe='', errors='surrogateescape')}"
        return result


def _posix_basename(path: str) -> str:
    return posixpath.basename(path.rstrip("/"))


def _posix_dirname(path: str) -> str:
    stripped = path.rstrip("/")
    if not stripped:
        return "/" if path.startswith("/") else "."
    return posixpath.dirname(stripped) or "."


def _posix_resolve(base: str, path: str) -> str:
    resolved = posixpath.normpath(posixpath.join(base, path.replace("\\", "/")))
    # normpath keeps a leading "//"; collapse it to a single root
    if resolved.startswith("//"):
        resolved = "/" + resolved.lstrip("/")
    return resolved


def basename(uri: URI) -> str:
    """Return the last path segment of ``uri`` (``''`` for the root)."""
    return _posix_basename(uri.path)


def dirname(uri: URI) -> URI:
    """Return the parent directory of ``uri``.

    A URI with an empty path is returned unchanged.
    """
    if not uri.path:
        return uri
    parent = _posix_dirname(uri.path)
    if uri.authority and not parent.startswith("/"):
        parent = "/"
    return uri.with_path(parent)


def resolve_path(uri: URI, path: str) -> URI:
    """Resolve ``path`` against ``uri``.

    Absolute paths replace the base path, relative paths are appended to it.
    """
    return uri.with_path(_posix_resolve(uri.path or "/", path))


class ResourceSet:
    """Insertion-ordered set of URIs.

    Membership is decided by ``key`` (the URI string form by default), so
    URIs that differ only in casing or a trailing slash are distinct members.
    """

    def __init__(self, resources: Iterable[URI] = (), key: Callable[[URI], str] = str) -> None:
        self._key = key
        self._entries: dict[str, URI] = {}
        for resource in resources:
            self.add(resource)

    def add(self, resource: URI) -> None:
        self._entries.setdefault(self._key(resource), resource)

    def discard(self, resource: URI) -> None:
        self._entries.pop(self._key(resource), None)

    def __contains__(self, resource: object) -> bool:
        if not isinstance(resource, URI):
            return False
        return self._key(resource) in self._entries

    def __iter__(self) -> Iterator[URI]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)
