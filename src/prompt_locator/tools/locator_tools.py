"""Locator tool implementations.

This module exposes the prompt file lookup and the workspace view it is
based on.  Results are plain JSON-serializable dictionaries.
"""

from __future__ import annotations

import logging

from .. import state
from ..services.configuration import prompt_source_locations
from ..services.workspace import to_uri
from ..uri import URI, basename

logger = logging.getLogger(__name__)


def _describe(uri: URI) -> dict[str, str]:
    return {"uri": str(uri), "path": uri.fs_path, "name": basename(uri)}


async def list_instruction_files(exclude: list[str] | None = None) -> dict[str, object]:
    """List prompt instruction files found in the workspace source folders.

    ``exclude`` holds file paths or URIs to leave out of the result.  Only
    strings with a scheme are parsed as URIs; anything else is a path.
    """
    excluded = [to_uri(value) for value in exclude or []]
    files = await state.LOCATOR.list_files(excluded)
    logger.info("Listed %d prompt instruction files (%d excluded)", len(files), len(excluded))
    return {
        "files": [_describe(uri) for uri in files],
        "count": len(files),
    }


def list_source_locations() -> dict[str, object]:
    """List the folders searched for prompt instruction files."""
    locations = state.LOCATOR.source_locations()
    return {"locations": [_describe(uri) for uri in locations]}


def workspace_info() -> dict[str, object]:
    """Describe the open workspace and the configured source folders."""
    workspace = state.WORKSPACE.get_workspace()
    return {
        "state": state.WORKSPACE.get_workbench_state().value,
        "folders": [
            {"name": folder.name, "index": folder.index, **_describe(folder.uri)}
            for folder in workspace.folders
        ],
        "configuration": str(workspace.configuration) if workspace.configuration else None,
        "source_locations": prompt_source_locations(state.CONFIGURATION),
    }
