"""Locate prompt instruction files in the workspace."""

from __future__ import annotations

import logging
from collections.abc import Sequence, Set

from ..constants import PROMPT_SNIPPET_FILE_EXTENSION
from ..services.configuration import ConfigurationService, prompt_source_locations
from ..services.files import FileService
from ..services.workspace import WorkbenchState, WorkspaceContextService
from ..uri import URI, ResourceSet, dirname, resolve_path

logger = logging.getLogger(__name__)


class InstructionsFileLocator:
    """Find ``*.prompt.md`` files in the configured source folders.

    Every call recomputes the candidate folders from the current workspace
    and configuration; nothing is cached between calls.
    """

    def __init__(
        self,
        file_service: FileService,
        workspace_service: WorkspaceContextService,
        config_service: ConfigurationService,
    ) -> None:
        self.file_service = file_service
        self.workspace_service = workspace_service
        self.config_service = config_service

    async def list_files(self, exclude: Sequence[URI]) -> list[URI]:
        """List all prompt instruction files in the workspace.

        :param exclude: URIs to leave out of the result, matched by path
        :return: matching files, in source folder order
        """
        exclude_set = {uri.path for uri in exclude}

        locations = [location for location in self.source_locations() if location.path not in exclude_set]

        return await self.find_instruction_files(locations, exclude_set)

    def source_locations(self) -> list[URI]:
        """Return every folder that may contain prompt instruction files.

        Each configured source folder is resolved against every workspace
        folder.  In a multi-root workspace it is also resolved against the
        parent of the first folder, and kept when the result lies inside the
        workspace folder being processed.
        """
        if self.workspace_service.get_workbench_state() == WorkbenchState.EMPTY:
            return []

        folders = self.workspace_service.get_workspace().folders
        if not folders:
            return []

        source_names = prompt_source_locations(self.config_service)
        paths = ResourceSet()

        workspace_root = dirname(folders[0].uri)
        for folder in folders:
            for source_name in source_names:
                # relative names resolve inside the folder, absolute ones pass through
                source_uri = resolve_path(folder.uri, source_name)
                if source_uri not in paths:
                    paths.add(source_uri)

                if len(folders) <= 1:
                    continue

                workspace_source_uri = resolve_path(workspace_root, source_name)
                if workspace_source_uri in paths:
                    continue

                # raw string prefix; /ws/foobar counts as inside /ws/foo
                if workspace_source_uri.fs_path.startswith(folder.uri.fs_path):
                    paths.add(workspace_source_uri)

        logger.debug("Found %d prompt source locations", len(paths))
        return list(paths)

    async def find_instruction_files(self, locations: Sequence[URI], exclude: Set[str]) -> list[URI]:
        """Return the prompt instruction files directly inside ``locations``.

        Locations that cannot be resolved contribute nothing.
        """
        results = await self.file_service.resolve_all(locations)

        files = []
        for location, result in zip(locations, results):
            if not result.success:
                logger.debug("Skipping unresolved location %s", location)
                continue

            if result.stat is None or not result.stat.children:
                continue

            for child in result.stat.children:
                if child.is_directory:
                    continue

                if not child.name.endswith(PROMPT_SNIPPET_FILE_EXTENSION):
                    continue

                if child.resource.path in exclude:
                    continue

                files.append(child.resource)

        logger.debug("Found %d prompt instruction files", len(files))
        return files
