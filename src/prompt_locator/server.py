"""MCP stdio server entrypoint for Prompt Locator.

The server runs over standard input/output using the Model Context Protocol.
It registers tool functions that clients can invoke to find prompt
instruction files in the configured workspace.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from mcp.server.fastmcp import FastMCP

from .constants import DEFAULT_LOG_LEVEL, MCP_TRANSPORT
from .state import CONFIG
from .telemetry import configure_logging, get_logger
from .tools import locator_tools


def build_tools_dispatch() -> dict[str, Callable[..., Any]]:
    """Return a mapping from tool names to callables.

    Each callable accepts keyword arguments and returns (or resolves to) a
    JSON-serializable dictionary.
    """
    return {
        "list_instruction_files": locator_tools.list_instruction_files,
        "list_source_locations": locator_tools.list_source_locations,
        "workspace_info": locator_tools.workspace_info,
    }


def main() -> None:
    """Entrypoint for the Prompt Locator MCP server."""
    configure_logging(CONFIG.log_level or DEFAULT_LOG_LEVEL)
    logger = get_logger(__name__)
    logger.info("Starting Prompt Locator MCP server")

    mcp = FastMCP("prompt-locator-mcp")

    dispatch = build_tools_dispatch()
    for name, func in dispatch.items():
        mcp.add_tool(func, name=name)

    logger.info("Registered %d tools", len(dispatch))

    mcp.run(transport=MCP_TRANSPORT)


if __name__ == "__main__":
    main()
