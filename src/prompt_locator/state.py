"""Shared state module for Prompt Locator.

This module provides a single shared instance of configuration, the
collaborator services and the locator built on top of them.  Tool modules
should read these values from this module instead of creating their own
instances.
"""

from __future__ import annotations

from .config import Config
from .locator import InstructionsFileLocator
from .services import InMemoryConfigurationService, LocalFileService, StaticWorkspaceContextService

# Single shared configuration loaded once at import time
CONFIG: Config = Config.load_from_env()

# Collaborator services derived from the configuration
CONFIGURATION: InMemoryConfigurationService = InMemoryConfigurationService(CONFIG.settings)
WORKSPACE: StaticWorkspaceContextService = StaticWorkspaceContextService.from_config(CONFIG)
FILES: LocalFileService = LocalFileService()

# Single shared locator - all tool lookups go through this
LOCATOR: InstructionsFileLocator = InstructionsFileLocator(FILES, WORKSPACE, CONFIGURATION)
