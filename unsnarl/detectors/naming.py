"""Suspicious identifier names: placeholder words and stray single letters."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from unsnarl.enums import IssueKind
from unsnarl.grammar._specs import JS_SPEC, GrammarSpec
from unsnarl.grammar._traverse import node_text, walk
from unsnarl.issues import Issue, make_issue

logger = logging.getLogger(__name__)

BAD_NAMES = frozenset({"foo", "bar", "baz", "tmp", "data", "test"})
ALLOWED_SINGLE_LETTERS = frozenset({"i", "j", "k"})


def is_suspicious_name(
    name: str,
    bad_names: Iterable[str] = BAD_NAMES,
    allowed_single: Iterable[str] = ALLOWED_SINGLE_LETTERS,
) -> bool:
    """Exact-match check: ``food`` is fine even though ``foo`` is not."""
    if name in bad_names:
        return True
    return len(name) == 1 and name not in allowed_single


def naming_message(name: str) -> str:
    return f'Suspicious variable name: "{name}"'


def detect_bad_naming(
    root,
    *,
    bad_names: Iterable[str] = BAD_NAMES,
    allowed_single: Iterable[str] = ALLOWED_SINGLE_LETTERS,
    spec: GrammarSpec = JS_SPEC,
) -> list[Issue]:
    """Flag every identifier or property name occurrence with a suspicious name."""
    bad = frozenset(bad_names)
    allowed = frozenset(allowed_single)
    issues: list[Issue] = []
    for node in walk(root):
        if node.type not in spec.naming_types:
            continue
        name = node_text(node).strip()
        if is_suspicious_name(name, bad, allowed):
            issues.append(make_issue(IssueKind.BAD_NAMING, node, naming_message(name)))
    logger.debug("bad naming: %d suspicious names", len(issues))
    return issues


__all__ = [
    "ALLOWED_SINGLE_LETTERS",
    "BAD_NAMES",
    "detect_bad_naming",
    "is_suspicious_name",
    "naming_message",
]
