"""Prompt instruction file lookup."""

from .instructions_locator import InstructionsFileLocator
from .paths import resolve_overlapping_path, root_dirname

__all__ = ["InstructionsFileLocator", "resolve_overlapping_path", "root_dirname"]
