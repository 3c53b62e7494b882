"""Pytest configuration and fixtures for Prompt Locator tests.

This module provides a FakeFileService that serves directory listings from
memory, so locator tests do not touch the disk.

IMPORTANT: Environment variables must be set BEFORE importing prompt_locator
modules, as the state module loads configuration on first import.
"""

from __future__ import annotations

import os

# Set environment variables BEFORE any prompt_locator imports
os.environ.setdefault("PROMPT_FILES", "true")

from collections.abc import Sequence

import pytest

from prompt_locator.locator import InstructionsFileLocator
from prompt_locator.services import (
    FileStat,
    InMemoryConfigurationService,
    ResolveResult,
    StaticWorkspaceContextService,
)
from prompt_locator.uri import URI, basename, resolve_path


class FakeFileService:
    """A fake file service backed by a dictionary of directory listings.

    ``tree`` maps a directory path to its children as ``(name, is_directory)``
    pairs, in the order they should be returned.  Paths missing from the tree
    fail to resolve.  This is ONLY for testing.
    """

    def __init__(self, tree: dict[str, list[tuple[str, bool]]] | None = None) -> None:
        self.tree = tree or {}
        self.requests: list[list[URI]] = []

    async def resolve_all(self, resources: Sequence[URI]) -> list[ResolveResult]:
        self.requests.append(list(resources))
        results = []
        for resource in resources:
            entries = self.tree.get(resource.path)
            if entries is None:
                results.append(ResolveResult(stat=None, success=False))
                continue
            children = [
                FileStat(name=name, resource=resolve_path(resource, name), is_directory=is_dir)
                for name, is_dir in entries
            ]
            results.append(
                ResolveResult(
                    stat=FileStat(name=basename(resource), resource=resource, is_directory=True, children=children),
                    success=True,
                )
            )
        return results


@pytest.fixture
def fake_files() -> FakeFileService:
    return FakeFileService()


@pytest.fixture
def make_locator(fake_files):
    """Return a factory building a locator over the fake file service."""

    def _make(folders: Sequence[str], prompt_files: object = True, workspace_file: str | None = None):
        workspace = StaticWorkspaceContextService(
            [URI.file(f) for f in folders],
            configuration=URI.file(workspace_file) if workspace_file else None,
        )
        configuration = InMemoryConfigurationService({"chat.promptFiles": prompt_files})
        return InstructionsFileLocator(fake_files, workspace, configuration)

    return _make
