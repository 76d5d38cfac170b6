"""Exceptions raised by the layers around the detector core.

Detectors themselves never raise for unexpected tree shapes; these cover
language resolution, grammar loading, file reading and config edits.
"""

from __future__ import annotations


class UnsnarlError(Exception):
    """Base class for user-facing failures. ``message`` is printed by the CLI."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnsupportedLanguageError(UnsnarlError):
    """Raised for a language name or file extension with no grammar."""


class ParserUnavailableError(UnsnarlError):
    """Raised when the tree-sitter grammar for a language cannot be loaded."""


class SourceReadError(UnsnarlError):
    """Raised when a source file cannot be read."""


class ConfigError(UnsnarlError):
    """Raised by ``unsnarl config`` for an unknown key or a rejected value."""


__all__ = [
    "ConfigError",
    "ParserUnavailableError",
    "SourceReadError",
    "UnsnarlError",
    "UnsupportedLanguageError",
]
