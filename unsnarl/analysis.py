"""Analysis service: source text in, located issues and suggestions out."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from unsnarl.detectors.facade import DetectorOptions, analyze_tree
from unsnarl.enums import Language
from unsnarl.errors import SourceReadError, UnsupportedLanguageError
from unsnarl.grammar import detect_language, parse_source, resolve_language, spec_for
from unsnarl.issues import Issue

logger = logging.getLogger(__name__)


@dataclass
class AnalysisReport:
    filename: str
    language: Language
    issues: list[Issue] = field(default_factory=list)

    @property
    def suggestions(self) -> list[str]:
        """Issue messages in detector order, for plain-text display."""
        return [issue.message for issue in self.issues]

    @property
    def counts(self) -> dict[str, int]:
        return dict(Counter(str(issue.kind) for issue in self.issues))

    def to_dict(self) -> dict:
        return {
            "filename": self.filename,
            "language": str(self.language),
            "issues": [issue.to_dict() for issue in self.issues],
            "suggestions": self.suggestions,
            "counts": self.counts,
        }


def _language_for(filename: str, language: str | Language | None) -> Language:
    if language is not None:
        return resolve_language(language)
    detected = detect_language(filename)
    if detected is None:
        raise UnsupportedLanguageError(f"Unsupported file type: {filename}")
    return detected


def analyze_source(
    filename: str,
    code: str,
    language: str | Language | None = None,
    *,
    options: DetectorOptions | None = None,
    only: list[str] | None = None,
) -> AnalysisReport:
    """Parse *code* and run the detectors over it.

    The language comes from *language* when given, else from the file
    extension of *filename*.
    """
    lang = _language_for(filename, language)
    tree = parse_source(code, lang)
    issues = analyze_tree(tree, options, spec=spec_for(lang), only=only)
    logger.debug("%s: %d issues", filename, len(issues))
    return AnalysisReport(filename, lang, issues)


def analyze_file(
    path: str | Path,
    language: str | Language | None = None,
    *,
    options: DetectorOptions | None = None,
    only: list[str] | None = None,
) -> AnalysisReport:
    """Read *path* as UTF-8 and analyze it."""
    p = Path(path)
    lang = _language_for(str(p), language)
    try:
        code = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(f"Could not read {p}: {exc}") from exc
    return analyze_source(str(p), code, lang, options=options, only=only)


__all__ = ["AnalysisReport", "analyze_file", "analyze_source"]
