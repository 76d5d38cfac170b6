"""langs command: list supported languages."""

from __future__ import annotations

from ..grammar import GRAMMAR_SPECS, is_available
from ..utils import colorize, print_table


def cmd_langs(args) -> None:
    rows = [
        [str(lang), spec.grammar, " ".join(spec.extensions)]
        for lang, spec in GRAMMAR_SPECS.items()
    ]
    print_table(["Language", "Grammar", "Extensions"], rows)
    if not is_available():
        print(colorize("\n  tree-sitter-language-pack is not installed; parsing is disabled.", "yellow"))
