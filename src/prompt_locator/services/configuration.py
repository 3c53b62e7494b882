"""Configuration service and the prompt files setting.

The ``chat.promptFiles`` setting accepts several shapes:

- ``True`` enables the default ``.github/prompts`` source folder
- ``False`` or a missing value disables prompt files
- a string names a single source folder
- a list names several source folders
- a mapping enables each source folder whose value is ``True``
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

from ..constants import DEFAULT_SOURCE_FOLDER, PROMPT_FILES_CONFIG_KEY

logger = logging.getLogger(__name__)


class ConfigurationService(Protocol):
    """Interface for a configuration service."""

    def get_value(self, key: str) -> object:
        ...


class InMemoryConfigurationService:
    """Configuration service over a dictionary of setting values."""

    def __init__(self, values: Mapping[str, object] | None = None) -> None:
        self._values: dict[str, object] = dict(values or {})

    def get_value(self, key: str) -> object:
        return self._values.get(key)

    def update_value(self, key: str, value: object) -> None:
        self._values[key] = value


def prompt_source_locations(configuration: ConfigurationService) -> list[str]:
    """Return the configured prompt source folder names.

    Names may be relative (resolved against each workspace folder) or
    absolute.  Values of an unexpected type yield no locations.
    """
    value = configuration.get_value(PROMPT_FILES_CONFIG_KEY)

    if value is None or value is False:
        return []
    if value is True:
        return [DEFAULT_SOURCE_FOLDER]
    if isinstance(value, str):
        clean = value.strip()
        return [clean] if clean else []
    if isinstance(value, Mapping):
        return [str(key).strip() for key, enabled in value.items() if enabled is True and str(key).strip()]
    if isinstance(value, (list, tuple)):
        return [item.strip() for item in value if isinstance(item, str) and item.strip()]

    logger.warning("Ignoring %s setting of unsupported type %s", PROMPT_FILES_CONFIG_KEY, type(value).__name__)
    return []
