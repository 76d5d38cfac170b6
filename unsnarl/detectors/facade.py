"""Analysis facade: run the detector set over one tree."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from unsnarl.grammar._specs import JS_SPEC, GrammarSpec
from unsnarl.grammar._traverse import root_of
from unsnarl.issues import Issue

from .complexity import DEFAULT_NOTE_AT, DEFAULT_WARN_AT
from .dupes import DEFAULT_MIN_CHARS, DEFAULT_MIN_LINES, DEFAULT_MIN_STATEMENTS
from .long_functions import DEFAULT_THRESHOLD as LONG_FUNCTION_THRESHOLD
from .naming import ALLOWED_SINGLE_LETTERS, BAD_NAMES
from .nesting import DEFAULT_THRESHOLD as NESTING_THRESHOLD

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetectorOptions:
    """Thresholds for every detector plus the set of disabled detectors."""
    long_function_threshold: int = LONG_FUNCTION_THRESHOLD
    nesting_threshold: int = NESTING_THRESHOLD
    duplicate_min_lines: int = DEFAULT_MIN_LINES
    duplicate_min_chars: int = DEFAULT_MIN_CHARS
    block_min_statements: int = DEFAULT_MIN_STATEMENTS
    complexity_warn_at: int = DEFAULT_WARN_AT
    complexity_note_at: int = DEFAULT_NOTE_AT
    bad_names: frozenset[str] = BAD_NAMES
    allowed_single_letters: frozenset[str] = ALLOWED_SINGLE_LETTERS
    disabled: frozenset[str] = frozenset()


def analyze_tree(
    tree,
    options: DetectorOptions | None = None,
    *,
    spec: GrammarSpec = JS_SPEC,
    only: Iterable[str] | None = None,
) -> list[Issue]:
    """Run the enabled detectors in registry order and concatenate their issues.

    *tree* may be a parsed tree or a root node. ``only`` restricts the run to
    the named detectors (registry names or issue kinds).
    """
    from unsnarl.registry import DETECTORS, resolve_detector

    root = root_of(tree)
    opts = options or DetectorOptions()

    if only is not None:
        selected = []
        for name in only:
            meta = resolve_detector(name)
            if meta is None:
                raise KeyError(f"Unknown detector: {name}")
            selected.append(meta.name)
        names = [n for n in DETECTORS if n in selected]
    else:
        names = [n for n in DETECTORS if n not in opts.disabled]

    issues: list[Issue] = []
    for name in names:
        found = DETECTORS[name].run(root, opts, spec)
        logger.debug("%s: %d issues", name, len(found))
        issues.extend(found)
    return issues


__all__ = ["DetectorOptions", "analyze_tree"]
