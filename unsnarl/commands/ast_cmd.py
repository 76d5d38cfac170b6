"""ast command: dump a file's syntax tree as JSON."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from ..errors import SourceReadError, UnsupportedLanguageError
from ..grammar import detect_language, parse_source, resolve_language, tree_to_dict


def cmd_ast(args: argparse.Namespace) -> None:
    path = Path(args.path)
    lang = resolve_language(args.lang) if args.lang else detect_language(path)
    if lang is None:
        raise UnsupportedLanguageError(f"Unsupported file type: {path}")
    try:
        code = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(f"Could not read {path}: {exc}") from exc
    tree = parse_source(code, lang)
    print(json.dumps(tree_to_dict(tree.root_node), indent=2))
