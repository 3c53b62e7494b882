"""Configuration loading for Prompt Locator.

This module loads environment variables from a `.env` file using
`python-dotenv` and populates a `Config` object.

Optional variables with defaults:
- WORKSPACE_FOLDERS (default: the current working directory)
- WORKSPACE_FILE (default: none; when set the workspace is multi-root)
- PROMPT_FILES (default: 'true')
- PROMPT_LOCATOR_SETTINGS (default: none; path to a JSON settings file)
- LOG_LEVEL (default: 'INFO')
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .constants import DEFAULT_LOG_LEVEL, PROMPT_FILES_CONFIG_KEY


def parse_prompt_files_value(raw: str) -> bool | list[str]:
    """Convert the ``PROMPT_FILES`` environment value into a setting value.

    ``true``/``false`` (and ``1``/``0``, ``yes``/``no``) map to booleans, any
    other value is read as a comma-separated list of source locations.
    """
    value = raw.strip()
    lowered = value.lower()
    if lowered in {"", "false", "0", "no", "off"}:
        return False
    if lowered in {"true", "1", "yes", "on"}:
        return True
    return [item.strip() for item in value.split(",") if item.strip()]


def _load_settings_file(path: str) -> dict[str, object]:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise RuntimeError(f"Could not read settings file '{path}': {exc}") from exc
    except json.JSONDecodeError as exc:
        raise RuntimeError(f"Settings file '{path}' is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise RuntimeError(f"Settings file '{path}' must contain a JSON object")
    return data


@dataclass
class Config:
    """Configuration values loaded from the environment."""

    workspace_folders: list[str]
    workspace_file: str | None = None
    settings: dict[str, object] = field(default_factory=dict)
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def load_from_env(cls) -> Config:
        """Load configuration from environment variables.

        The `.env` file is loaded if present.  Raises `RuntimeError` if the
        settings file named by ``PROMPT_LOCATOR_SETTINGS`` cannot be used.
        """
        load_dotenv()

        # Optional: WORKSPACE_FOLDERS with default
        folders_str = os.getenv("WORKSPACE_FOLDERS")
        if folders_str:
            workspace_folders = [f.strip() for f in folders_str.split(",") if f.strip()]
        else:
            workspace_folders = [os.getcwd()]

        workspace_file = os.getenv("WORKSPACE_FILE") or None

        # Settings file first, environment values take precedence
        settings: dict[str, object] = {}
        settings_path = os.getenv("PROMPT_LOCATOR_SETTINGS")
        if settings_path:
            settings.update(_load_settings_file(settings_path))

        prompt_files = os.getenv("PROMPT_FILES")
        if prompt_files is not None:
            settings[PROMPT_FILES_CONFIG_KEY] = parse_prompt_files_value(prompt_files)
        elif PROMPT_FILES_CONFIG_KEY not in settings:
            settings[PROMPT_FILES_CONFIG_KEY] = True

        # Optional: LOG_LEVEL with default
        log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)

        return cls(
            workspace_folders=workspace_folders,
            workspace_file=workspace_file,
            settings=settings,
            log_level=log_level,
        )
