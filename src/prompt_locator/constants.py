"""Global constants for Prompt Locator.

Fixed values identify prompt files and the setting that lists their source
folders.  The remaining values serve as defaults and may be overridden with
environment variables.
"""

import os

# Prompt files
PROMPT_SNIPPET_FILE_EXTENSION = ".prompt.md"
PROMPT_FILES_CONFIG_KEY = "chat.promptFiles"
DEFAULT_SOURCE_FOLDER = ".github/prompts"

# Limits
MAX_ANCESTOR_DEPTH = int(os.environ.get("MAX_ANCESTOR_DEPTH", 256))

# Transport
MCP_TRANSPORT = os.environ.get("MCP_TRANSPORT", "stdio")

# Logging
DEFAULT_LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
