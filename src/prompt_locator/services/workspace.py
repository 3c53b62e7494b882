"""Workspace topology service."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from ..config import Config
from ..uri import URI, basename


class WorkbenchState(Enum):
    """Classification of the currently open workspace."""

    EMPTY = "empty"
    FOLDER = "folder"
    WORKSPACE = "workspace"


@dataclass(frozen=True)
class WorkspaceFolder:
    """A top-level root directory registered in the workspace."""

    uri: URI
    name: str
    index: int


@dataclass(frozen=True)
class Workspace:
    folders: list[WorkspaceFolder] = field(default_factory=list)
    # Workspace configuration file, set for multi-root workspaces
    configuration: URI | None = None


class WorkspaceContextService(Protocol):
    """Interface for a workspace service."""

    def get_workbench_state(self) -> WorkbenchState:
        ...

    def get_workspace(self) -> Workspace:
        ...


def to_uri(value: str) -> URI:
    """Convert a configured folder path or URI string into a ``URI``."""
    if "://" in value:
        return URI.parse(value)
    return URI.file(os.path.abspath(value))


class StaticWorkspaceContextService:
    """Workspace service over a fixed list of folders.

    The state is ``WORKSPACE`` when a workspace file is set or more than one
    folder is open, ``FOLDER`` for exactly one folder and ``EMPTY`` otherwise.
    """

    def __init__(self, folders: Sequence[URI], configuration: URI | None = None) -> None:
        self._workspace = Workspace(
            folders=[
                WorkspaceFolder(uri=uri, name=basename(uri) or uri.fs_path, index=i)
                for i, uri in enumerate(folders)
            ],
            configuration=configuration,
        )

    @classmethod
    def from_config(cls, config: Config) -> StaticWorkspaceContextService:
        configuration = to_uri(config.workspace_file) if config.workspace_file else None
        return cls([to_uri(f) for f in config.workspace_folders], configuration=configuration)

    def get_workbench_state(self) -> WorkbenchState:
        if self._workspace.configuration is not None or len(self._workspace.folders) > 1:
            return WorkbenchState.WORKSPACE
        if len(self._workspace.folders) == 1:
            return WorkbenchState.FOLDER
        return WorkbenchState.EMPTY

    def get_workspace(self) -> Workspace:
        return self._workspace
