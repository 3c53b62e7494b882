"""Collaborator services consumed by the locator."""

from .configuration import ConfigurationService, InMemoryConfigurationService, prompt_source_locations
from .files import FileService, FileStat, LocalFileService, ResolveResult
from .workspace import (
    StaticWorkspaceContextService,
    WorkbenchState,
    Workspace,
    WorkspaceContextService,
    WorkspaceFolder,
)

__all__ = [
    "ConfigurationService",
    "InMemoryConfigurationService",
    "prompt_source_locations",
    "FileService",
    "FileStat",
    "LocalFileService",
    "ResolveResult",
    "StaticWorkspaceContextService",
    "WorkbenchState",
    "Workspace",
    "WorkspaceContextService",
    "WorkspaceFolder",
]
