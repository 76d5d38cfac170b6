"""Tree-sitter integration: grammars, parsing and traversal helpers.

Install the grammars with: pip install tree-sitter-language-pack
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_AVAILABLE = False
try:
    import tree_sitter_language_pack  # noqa: F401

    _AVAILABLE = True
except ImportError:
    logger.debug("tree-sitter-language-pack not installed; parsing disabled")


def is_available() -> bool:
    """Return True if tree-sitter-language-pack is installed."""
    return _AVAILABLE


from ._dump import tree_to_dict  # noqa: E402
from ._parser import (  # noqa: E402
    PARSE_INIT_ERRORS,
    detect_language,
    get_parser,
    parse_source,
    resolve_language,
    spec_for,
)
from ._specs import (  # noqa: E402
    GRAMMAR_SPECS,
    JS_SPEC,
    TSX_SPEC,
    TYPESCRIPT_SPEC,
    GrammarSpec,
)
from ._traverse import SyntaxNode  # noqa: E402

__all__ = [
    "GRAMMAR_SPECS",
    "GrammarSpec",
    "JS_SPEC",
    "PARSE_INIT_ERRORS",
    "SyntaxNode",
    "TSX_SPEC",
    "TYPESCRIPT_SPEC",
    "detect_language",
    "get_parser",
    "is_available",
    "parse_source",
    "resolve_language",
    "spec_for",
    "tree_to_dict",
]
