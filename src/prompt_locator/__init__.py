"""Top‑level package for Prompt Locator.

This package finds reusable prompt instruction files (``*.prompt.md``) in the
source folders configured for the current workspace, and exposes the lookup
as a tools‑only MCP server.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
