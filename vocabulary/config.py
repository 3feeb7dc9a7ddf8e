"""
Configuration model for vocabulary.

The CLI constructs an Options instance from the process arguments and
passes it, together with the Settings defaults, down into the app so
behavior can be adjusted without relying on global state.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Options:
    """
    Parsed command-line flags for a vocabulary run.
    """

    colorize: bool = False
    debug: bool = False
    manual_input: bool = False


@dataclass(frozen=True)
class Settings:
    """
    Minimal run-time settings.

    Directories are relative to the current working directory unless
    given as absolute paths.
    """

    os: str = "Unknown"
    platform: str = "Unknown"
    encoding: str = "UTF-8"
    archive_dir: str = "archive"
    config_dir: str = "configurations"
    cache_dir: str = "cache"

    @property
    def card_store_path(self) -> Path:
        return Path(self.archive_dir) / "cards.jsonl"
