"""Parsing adapter: language resolution and tree-sitter parser access."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from unsnarl.enums import Language
from unsnarl.errors import ParserUnavailableError, UnsupportedLanguageError

from ._specs import GRAMMAR_SPECS, GrammarSpec

logger = logging.getLogger(__name__)

# Common exception tuple for tree-sitter parser initialisation failures.
PARSE_INIT_ERRORS: tuple[type[Exception], ...] = (
    ImportError, OSError, ValueError, RuntimeError, LookupError
)


def resolve_language(language: str | Language) -> Language:
    """Map a language name to the ``Language`` enum or raise."""
    try:
        return Language(str(language).strip().lower())
    except ValueError:
        supported = ", ".join(lang.value for lang in Language)
        raise UnsupportedLanguageError(
            f"Unsupported language: {language} (supported: {supported})"
        ) from None


def spec_for(language: str | Language) -> GrammarSpec:
    return GRAMMAR_SPECS[resolve_language(language)]


def detect_language(filename: str | Path) -> Language | None:
    """Pick a language from the file extension, or None if unsupported."""
    suffix = Path(filename).suffix.lower()
    if not suffix:
        return None
    for language, spec in GRAMMAR_SPECS.items():
        if suffix in spec.extensions:
            return language
    return None


@lru_cache(maxsize=None)
def _get_parser(grammar: str):
    """Get a tree-sitter parser for the given grammar (cached per grammar)."""
    from tree_sitter_language_pack import get_parser

    return get_parser(grammar)


def _init_errors() -> tuple[type[Exception], ...]:
    """PARSE_INIT_ERRORS plus the grammar pack's own error base, when it has one.

    Newer tree-sitter-language-pack releases download grammars on first use
    and report failures through ``tree_sitter_language_pack.Error``.
    """
    import tree_sitter_language_pack

    pack_error = getattr(tree_sitter_language_pack, "Error", None)
    if isinstance(pack_error, type) and issubclass(pack_error, Exception):
        return (*PARSE_INIT_ERRORS, pack_error)
    return PARSE_INIT_ERRORS


def get_parser(language: str | Language):
    """Return the parser for *language*, raising ``ParserUnavailableError`` on failure."""
    spec = spec_for(language)
    try:
        return _get_parser(spec.grammar)
    except _init_errors() as exc:
        logger.debug("tree-sitter init failed for %s: %s", spec.grammar, exc)
        raise ParserUnavailableError(
            f"Could not load tree-sitter grammar '{spec.grammar}': {exc}"
        ) from exc


def parse_source(code: str | bytes, language: str | Language):
    """Parse *code* and return the tree-sitter ``Tree``."""
    parser = get_parser(language)
    source = code.encode("utf-8") if isinstance(code, str) else code
    return parser.parse(source)


__all__ = [
    "PARSE_INIT_ERRORS",
    "detect_language",
    "get_parser",
    "parse_source",
    "resolve_language",
    "spec_for",
]
