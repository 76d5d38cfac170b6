"""Canonical detector registry: single source of truth.

All detector metadata lives here. The facade, the CLI and the config
validation derive their views (run order, command names, defaults) from this
registry instead of maintaining their own lists.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from unsnarl.detectors.complexity import detect_cyclomatic_complexity
from unsnarl.detectors.dead_code import detect_dead_code
from unsnarl.detectors.dupes import detect_duplicate_blocks, detect_duplicate_code
from unsnarl.detectors.long_functions import detect_long_functions
from unsnarl.detectors.naming import detect_bad_naming
from unsnarl.detectors.nesting import detect_deep_nesting
from unsnarl.enums import IssueKind

if TYPE_CHECKING:
    from unsnarl.detectors.facade import DetectorOptions
    from unsnarl.grammar import GrammarSpec
    from unsnarl.issues import Issue

Runner = Callable[[object, "DetectorOptions", "GrammarSpec"], "list[Issue]"]


@dataclass(frozen=True)
class DetectorMeta:
    name: str
    kind: IssueKind
    display: str  # Human-readable for terminal display
    guidance: str  # Short hint shown next to findings
    run: Runner
    threshold_option: str = ""  # DetectorOptions field set by `detect --threshold`


DETECTORS: dict[str, DetectorMeta] = {
    "long_functions": DetectorMeta(
        "long_functions",
        IssueKind.LONG_FUNCTION,
        "long functions",
        "extract logic into smaller functions",
        lambda root, opts, spec: detect_long_functions(
            root, opts.long_function_threshold, spec=spec
        ),
        threshold_option="long_function_threshold",
    ),
    "nesting": DetectorMeta(
        "nesting",
        IssueKind.DEEP_NESTING,
        "deep nesting",
        "flatten with early returns or extracted helpers",
        lambda root, opts, spec: detect_deep_nesting(
            root, opts.nesting_threshold, spec=spec
        ),
        threshold_option="nesting_threshold",
    ),
    "dupes": DetectorMeta(
        "dupes",
        IssueKind.DUPLICATE_CODE,
        "duplicate functions",
        "merge duplicated functions into one shared helper",
        lambda root, opts, spec: detect_duplicate_code(
            root, opts.duplicate_min_lines, opts.duplicate_min_chars, spec=spec
        ),
        threshold_option="duplicate_min_lines",
    ),
    "dupe_blocks": DetectorMeta(
        "dupe_blocks",
        IssueKind.DUPLICATE_CODE_BLOCK,
        "duplicate blocks",
        "extract repeated blocks into a function",
        lambda root, opts, spec: detect_duplicate_blocks(
            root, opts.block_min_statements, spec=spec
        ),
        threshold_option="block_min_statements",
    ),
    "dead_code": DetectorMeta(
        "dead_code",
        IssueKind.DEAD_CODE,
        "dead code",
        "delete statements that can never run",
        lambda root, opts, spec: detect_dead_code(root, spec=spec),
    ),
    "naming": DetectorMeta(
        "naming",
        IssueKind.BAD_NAMING,
        "bad naming",
        "rename placeholder and single-letter identifiers",
        lambda root, opts, spec: detect_bad_naming(
            root,
            bad_names=opts.bad_names,
            allowed_single=opts.allowed_single_letters,
            spec=spec,
        ),
    ),
    "complexity": DetectorMeta(
        "complexity",
        IssueKind.CYCLOMATIC_COMPLEXITY,
        "cyclomatic complexity",
        "split branching logic into smaller functions",
        lambda root, opts, spec: detect_cyclomatic_complexity(
            root, opts.complexity_warn_at, opts.complexity_note_at, spec=spec
        ),
        threshold_option="complexity_warn_at",
    ),
}

DISPLAY_ORDER: tuple[str, ...] = tuple(DETECTORS)


def detector_names() -> list[str]:
    return list(DISPLAY_ORDER)


def resolve_detector(name: str) -> DetectorMeta | None:
    """Resolve a detector by registry name or issue kind.

    Accepts ``dead_code``, ``dead-code`` and case variants; issue kinds such
    as ``long-function`` resolve to their detector.
    """
    key = name.strip().lower()
    normalized = key.replace("-", "_")
    if normalized in DETECTORS:
        return DETECTORS[normalized]
    for meta in DETECTORS.values():
        if meta.kind == key:
            return meta
    return None


__all__ = [
    "DETECTORS",
    "DISPLAY_ORDER",
    "DetectorMeta",
    "detector_names",
    "resolve_detector",
]
