"""File-access service.

The locator only needs one capability from a filesystem: resolve a batch of
resources and, for directories, list their immediate children.  A failed
resolution is reported per resource through ``ResolveResult.success`` and
never raised.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from ..uri import URI, resolve_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileStat:
    """Metadata for a resolved resource.

    ``children`` is populated for directories only.
    """

    name: str
    resource: URI
    is_directory: bool
    children: list[FileStat] | None = None


@dataclass(frozen=True)
class ResolveResult:
    """Outcome of resolving a single resource."""

    stat: FileStat | None
    success: bool


class FileService(Protocol):
    """Interface for a file-access service.

    ``resolve_all`` returns exactly one result per requested resource, in the
    order the resources were given.
    """

    async def resolve_all(self, resources: Sequence[URI]) -> list[ResolveResult]:
        ...


class LocalFileService:
    """File service backed by the local disk.

    Only ``file`` URIs are supported; other schemes resolve unsuccessfully.
    Each directory is listed in a worker thread and the whole batch is
    awaited together.
    """

    async def resolve_all(self, resources: Sequence[URI]) -> list[ResolveResult]:
        return list(
            await asyncio.gather(*(asyncio.to_thread(self._resolve, resource) for resource in resources))
        )

    def _resolve(self, resource: URI) -> ResolveResult:
        if resource.scheme != "file":
            logger.debug("Unsupported scheme for %s", resource)
            return ResolveResult(stat=None, success=False)

        path = resource.fs_path
        try:
            is_directory = os.path.isdir(path)
            if not is_directory:
                # Raises for missing paths
                os.stat(path)
                return ResolveResult(
                    stat=FileStat(name=os.path.basename(path), resource=resource, is_directory=False),
                    success=True,
                )

            children = []
            with os.scandir(path) as entries:
                for entry in entries:
                    children.append(
                        FileStat(
                            name=entry.name,
                            resource=resolve_path(resource, entry.name),
                            is_directory=entry.is_dir(),
                        )
                    )
        except OSError as exc:
            logger.debug("Could not resolve %s: %s", resource, exc)
            return ResolveResult(stat=None, success=False)

        children.sort(key=lambda child: child.name)
        return ResolveResult(
            stat=FileStat(
                name=os.path.basename(path.rstrip("/")),
                resource=resource,
                is_directory=True,
                children=children,
            ),
            success=True,
        )
