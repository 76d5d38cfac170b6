"""Shared utilities: paths, colors, output formatting, file discovery."""

import os
import sys
import tempfile
from pathlib import Path

PROJECT_ROOT = Path(os.environ.get("UNSNARL_ROOT", Path.cwd())).resolve()

# Directories pruned during every traversal.
DEFAULT_EXCLUSIONS = frozenset({
    "node_modules", ".git", "__pycache__", ".venv", "venv",
    "dist", "build", ".next", ".nuxt", ".output", "coverage",
    ".svn", ".hg",
})


# ── Atomic file writes ─────────────────────────────────────


def safe_write_text(filepath: str | Path, content: str) -> None:
    """Atomically write text to a file using temp+rename."""
    p = Path(filepath)
    p.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=p.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w") as f:
            f.write(content)
        os.replace(tmp, str(p))
    except BaseException:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise


# ── Terminal output ─────────────────────────────────────────

COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "cyan": "\033[36m",
}

NO_COLOR = os.environ.get("NO_COLOR") is not None


def colorize(text: str, color: str) -> str:
    if NO_COLOR or not sys.stdout.isatty():
        return str(text)
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


def log(msg: str):
    """Print a dim status message to stderr."""
    print(colorize(msg, "dim"), file=sys.stderr)


def print_error(message: str) -> None:
    """Print a user-facing error message to stderr in a consistent format."""
    print(colorize(f"  Error: {message}", "red"), file=sys.stderr)


def print_table(headers: list[str], rows: list[list[str]], widths: list[int] | None = None):
    if not rows:
        return
    if not widths:
        widths = [max(len(str(h)), *(len(str(r[i])) for r in rows)) for i, h in enumerate(headers)]
    header_line = "  ".join(h.ljust(w) for h, w in zip(headers, widths))
    print(colorize(header_line, "bold"))
    print(colorize("─" * (sum(widths) + 2 * (len(widths) - 1)), "dim"))
    for row in rows:
        print("  ".join(str(v).ljust(w) for v, w in zip(row, widths)))


def rel(path: str) -> str:
    try:
        return str(Path(path).resolve().relative_to(PROJECT_ROOT)).replace("\\", "/")
    except ValueError:
        # Path outside PROJECT_ROOT: fall back to a relative path
        return os.path.relpath(str(Path(path).resolve()), str(PROJECT_ROOT)).replace("\\", "/")


# ── File discovery ──────────────────────────────────────────


def matches_exclusion(rel_path: str, exclusion: str) -> bool:
    """Check if a relative path matches an exclusion pattern (path-component aware).

    Matches if exclusion is a path component (e.g. "test" matches "test/foo.js"
    or "src/test/bar.js") or a directory prefix (e.g. "src/test" matches
    "src/test/bar.js"). Does NOT do substring matching: "test" will NOT match
    "testimony.js".
    """
    parts = Path(rel_path).parts
    if exclusion in parts:
        return True
    if "/" in exclusion or os.sep in exclusion:
        normalized = exclusion.rstrip("/").rstrip(os.sep)
        return rel_path.startswith(normalized + "/") or rel_path.startswith(normalized + os.sep)
    return False


def find_source_files(
    path: str | Path, extensions: list[str] | tuple[str, ...], exclusions: list[str] | None = None
) -> list[str]:
    """Find all files with given extensions under *path* (or *path* itself if a file)."""
    root = Path(path)
    ext_set = set(extensions)
    if root.is_file():
        return [str(root)] if root.suffix.lower() in ext_set else []

    extra = tuple(exclusions or ())
    files: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = os.path.relpath(dirpath, root).replace("\\", "/")
        prefix = "" if rel_dir == "." else rel_dir + "/"
        # Prune excluded directories in-place (prevents descending into them)
        dirnames[:] = sorted(
            d for d in dirnames
            if d not in DEFAULT_EXCLUSIONS
            and not any(matches_exclusion(prefix + d, ex) for ex in extra)
        )
        for fname in sorted(filenames):
            if Path(fname).suffix.lower() not in ext_set:
                continue
            full = os.path.join(dirpath, fname)
            rel_file = os.path.relpath(full, root).replace("\\", "/")
            if extra and any(matches_exclusion(rel_file, ex) for ex in extra):
                continue
            files.append(full)
    return files
