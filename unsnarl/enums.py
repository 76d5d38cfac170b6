"""Canonical enums for issue attributes.

StrEnum values compare equal to their string values (IssueKind.DEAD_CODE == "dead-code"),
so callers can match on plain strings when they read serialized issues back.
"""

from __future__ import annotations

import enum


class IssueKind(enum.StrEnum):
    LONG_FUNCTION = "long-function"
    DEEP_NESTING = "deep-nesting"
    DUPLICATE_CODE = "duplicate-code"
    DUPLICATE_CODE_BLOCK = "duplicate-code-block"
    DEAD_CODE = "dead-code"
    BAD_NAMING = "bad-naming"
    CYCLOMATIC_COMPLEXITY = "cyclomatic-complexity"


class ComplexityLevel(enum.StrEnum):
    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"


class Language(enum.StrEnum):
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    TSX = "tsx"
