"""Unit tests for InstructionsFileLocator.

These tests use the FakeFileService from conftest.py and never touch the disk.
"""

from __future__ import annotations

import pytest

from prompt_locator.uri import URI


def _paths(uris: list[URI]) -> list[str]:
    return [uri.path for uri in uris]


class TestSourceLocations:
    """Tests for candidate folder enumeration."""

    def test_empty_workspace_has_no_locations(self, make_locator) -> None:
        locator = make_locator([], prompt_files=[".prompts", "/abs/prompts"])
        assert locator.source_locations() == []

    def test_workspace_file_without_folders_has_no_locations(self, make_locator) -> None:
        locator = make_locator([], workspace_file="/ws/team.code-workspace")
        assert locator.source_locations() == []

    def test_disabled_setting_has_no_locations(self, make_locator) -> None:
        locator = make_locator(["/ws/a"], prompt_files=False)
        assert locator.source_locations() == []

    def test_single_folder_uses_default_source_folder(self, make_locator) -> None:
        locator = make_locator(["/ws/a"])
        assert _paths(locator.source_locations()) == ["/ws/a/.github/prompts"]

    def test_single_folder_never_adds_workspace_root(self, make_locator) -> None:
        locator = make_locator(["/ws/a"], prompt_files=["a/.prompts"], workspace_file="/ws/team.code-workspace")
        assert _paths(locator.source_locations()) == ["/ws/a/a/.prompts"]

    def test_multi_root_resolves_per_folder(self, make_locator) -> None:
        locator = make_locator(["/ws/a", "/ws/b"], prompt_files=[".prompts"])
        # /ws/.prompts lies outside both folders
        assert _paths(locator.source_locations()) == ["/ws/a/.prompts", "/ws/b/.prompts"]

    def test_multi_root_adds_workspace_root_candidate_once(self, make_locator) -> None:
        locator = make_locator(["/ws/a", "/ws/b"], prompt_files=["a/.prompts"])
        assert _paths(locator.source_locations()) == [
            "/ws/a/a/.prompts",
            "/ws/a/.prompts",
            "/ws/b/a/.prompts",
        ]

    def test_absolute_name_is_added_once(self, make_locator) -> None:
        locator = make_locator(["/ws/a", "/ws/b"], prompt_files=["/shared/prompts"])
        assert _paths(locator.source_locations()) == ["/shared/prompts"]

    def test_prefix_check_matches_sibling_with_longer_name(self, make_locator) -> None:
        locator = make_locator(["/ws/foo", "/ws/foobar"], prompt_files=["foobar/.prompts"])
        locations = _paths(locator.source_locations())
        # /ws/foobar/.prompts is accepted while processing /ws/foo
        assert locations.index("/ws/foobar/.prompts") == 1
        assert locations.count("/ws/foobar/.prompts") == 1

    def test_paths_differing_in_case_are_kept(self, make_locator) -> None:
        locator = make_locator(["/ws/a"], prompt_files=["prompts", "Prompts"])
        assert _paths(locator.source_locations()) == ["/ws/a/prompts", "/ws/a/Prompts"]


class TestListFiles:
    """Tests for file discovery through list_files."""

    @pytest.mark.asyncio
    async def test_filters_by_extension_and_directories(self, make_locator, fake_files) -> None:
        fake_files.tree["/ws/a/.github/prompts"] = [
            ("x.prompt.md", False),
            ("x.txt", False),
            ("sub.prompt.md", True),
        ]
        locator = make_locator(["/ws/a"])

        files = await locator.list_files([])

        assert _paths(files) == ["/ws/a/.github/prompts/x.prompt.md"]

    @pytest.mark.asyncio
    async def test_excluded_file_is_omitted(self, make_locator, fake_files) -> None:
        fake_files.tree["/ws/a/.github/prompts"] = [("x.prompt.md", False), ("y.prompt.md", False)]
        locator = make_locator(["/ws/a"])

        files = await locator.list_files([URI.file("/ws/a/.github/prompts/x.prompt.md")])

        assert _paths(files) == ["/ws/a/.github/prompts/y.prompt.md"]

    @pytest.mark.asyncio
    async def test_exclusion_matches_by_path_only(self, make_locator, fake_files) -> None:
        fake_files.tree["/ws/a/.github/prompts"] = [("x.prompt.md", False)]
        locator = make_locator(["/ws/a"])

        files = await locator.list_files([URI.parse("vscode-remote://host/ws/a/.github/prompts/x.prompt.md")])

        assert files == []

    @pytest.mark.asyncio
    async def test_failed_location_is_not_fatal(self, make_locator, fake_files) -> None:
        fake_files.tree["/ws/b/.prompts"] = [("ok.prompt.md", False)]
        locator = make_locator(["/ws/a", "/ws/b"], prompt_files=[".prompts"])

        files = await locator.list_files([])

        assert _paths(files) == ["/ws/b/.prompts/ok.prompt.md"]

    @pytest.mark.asyncio
    async def test_empty_location_contributes_nothing(self, make_locator, fake_files) -> None:
        fake_files.tree["/ws/a/.github/prompts"] = []
        locator = make_locator(["/ws/a"])

        assert await locator.list_files([]) == []

    @pytest.mark.asyncio
    async def test_order_follows_locations_then_children(self, make_locator, fake_files) -> None:
        fake_files.tree["/ws/a/.prompts"] = [("b.prompt.md", False), ("a.prompt.md", False)]
        fake_files.tree["/ws/b/.prompts"] = [("c.prompt.md", False)]
        locator = make_locator(["/ws/a", "/ws/b"], prompt_files=[".prompts"])

        files = await locator.list_files([])

        assert _paths(files) == [
            "/ws/a/.prompts/b.prompt.md",
            "/ws/a/.prompts/a.prompt.md",
            "/ws/b/.prompts/c.prompt.md",
        ]

    @pytest.mark.asyncio
    async def test_locations_are_resolved_in_one_batch(self, make_locator, fake_files) -> None:
        locator = make_locator(["/ws/a", "/ws/b"], prompt_files=[".prompts", "docs"])

        await locator.list_files([])

        assert len(fake_files.requests) == 1
        assert _paths(fake_files.requests[0]) == [
            "/ws/a/.prompts",
            "/ws/a/docs",
            "/ws/b/.prompts",
            "/ws/b/docs",
        ]

    @pytest.mark.asyncio
    async def test_excluded_location_is_not_resolved(self, make_locator, fake_files) -> None:
        fake_files.tree["/ws/a/.prompts"] = [("a.prompt.md", False)]
        fake_files.tree["/ws/a/docs"] = [("d.prompt.md", False)]
        locator = make_locator(["/ws/a"], prompt_files=[".prompts", "docs"])

        files = await locator.list_files([URI.file("/ws/a/docs")])

        assert _paths(fake_files.requests[0]) == ["/ws/a/.prompts"]
        assert _paths(files) == ["/ws/a/.prompts/a.prompt.md"]

    @pytest.mark.asyncio
    async def test_empty_workspace_finds_nothing(self, make_locator, fake_files) -> None:
        fake_files.tree["/ws/a/.github/prompts"] = [("x.prompt.md", False)]
        locator = make_locator([])

        assert await locator.list_files([]) == []
