"""Shared helpers used by multiple command modules."""

from __future__ import annotations

import json
from pathlib import Path

from ..analysis import AnalysisReport
from ..errors import SourceReadError
from ..grammar import GRAMMAR_SPECS, resolve_language
from ..registry import DETECTORS
from ..utils import colorize, find_source_files, log, print_table, rel


def supported_extensions(lang: str | None = None) -> tuple[str, ...]:
    """Extensions for one language, or for every supported language."""
    if lang is not None:
        return GRAMMAR_SPECS[resolve_language(lang)].extensions
    return tuple(ext for spec in GRAMMAR_SPECS.values() for ext in spec.extensions)


def collect_files(paths: list[str], config: dict, lang: str | None = None) -> list[str]:
    """Expand files and directories into the list of files to analyze.

    Explicit file paths are kept as given (so an unsupported extension is
    reported later); directories contribute their supported source files.
    """
    extensions = supported_extensions(lang)
    files: list[str] = []
    for raw in paths:
        p = Path(raw)
        if p.is_dir():
            found = find_source_files(p, extensions, config.get("exclude") or None)
            log(f"  {raw}: {len(found)} source files")
            files.extend(found)
        elif p.exists():
            files.append(str(p))
        else:
            raise SourceReadError(f"No such file or directory: {raw}")
    return files


def _print_guidance(issues) -> None:
    """One hint line per detector that produced issues, in registry order."""
    kinds = {issue.kind for issue in issues}
    hints = [meta for meta in DETECTORS.values() if meta.kind in kinds]
    if hints:
        print()
    for meta in hints:
        print(colorize(f"  {meta.display}: {meta.guidance}", "dim"))


def print_reports(reports: list[AnalysisReport], *, as_json: bool, top: int) -> None:
    """Print reports as JSON (``{"results": [...]}``) or as per-file tables."""
    if as_json:
        print(json.dumps({"results": [r.to_dict() for r in reports]}, indent=2))
        return

    total = 0
    for report in reports:
        issues = report.issues
        total += len(issues)
        header = f"\n{rel(report.filename)} ({report.language}): {len(issues)} issues\n"
        print(colorize(header, "bold"))
        if not issues:
            print(colorize("  No issues found.", "green"))
            continue
        rows = [[str(i.line), str(i.kind), i.message] for i in issues[:top]]
        print_table(["Line", "Kind", "Message"], rows)
        if len(issues) > top:
            print(f"\n  ... and {len(issues) - top} more")
        _print_guidance(issues)
    if len(reports) > 1:
        print(colorize(f"\n{total} issues across {len(reports)} files", "bold"))
