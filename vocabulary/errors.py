"""
Custom exception types used across vocabulary.

The CLI reports these as user-facing failures; anything else is treated
as an unexpected bug and allowed to propagate.
"""

from __future__ import annotations


class VocabularyError(Exception):
    """Base class for all vocabulary specific errors."""


class InvalidArgumentError(VocabularyError, ValueError):
    """Raised when a function receives an argument it cannot work with."""


class ConfigError(VocabularyError):
    """Raised when a configuration structure cannot be normalized."""


class ConfigCycleError(ConfigError):
    """Raised when a configuration structure refers back to itself."""


class ConfigDepthError(ConfigError):
    """Raised when a configuration structure is nested too deeply."""


class GitError(VocabularyError):
    """Raised when git operations fail."""


class VersionError(GitError):
    """Raised when the version string cannot be derived from git tags."""


class CardStoreError(VocabularyError):
    """Raised when a card cannot be written to or read from a store."""
