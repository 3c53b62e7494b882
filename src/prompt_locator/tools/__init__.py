"""Tool module exports for Prompt Locator.

Usage:

    from prompt_locator.tools import locator_tools
    await locator_tools.list_instruction_files(exclude=[...])

The server imports these modules and dispatches requests accordingly.
"""

from . import locator_tools  # noqa: F401

__all__ = ["locator_tools"]
