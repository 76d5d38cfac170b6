"""CLI entry point: argparse, subcommand routing, shared helpers."""

from __future__ import annotations

import argparse
import logging
import sys

from .errors import UnsnarlError
from .registry import detector_names
from .utils import print_error

USAGE_EXAMPLES = """
examples:
  unsnarl analyze src/app.js
  unsnarl analyze src --json
  unsnarl analyze src/widget.tsx --only complexity naming
  unsnarl detect nesting src/app.js --threshold 4
  unsnarl ast src/app.js
  unsnarl config set long_function_threshold 40
  unsnarl config set disabled_detectors complexity
  unsnarl langs
"""


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unsnarl",
        description="unsnarl: structural maintainability checks for JavaScript/TypeScript",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_analyze = sub.add_parser("analyze", help="Run all enabled detectors over files or directories")
    p_analyze.add_argument("paths", nargs="+", metavar="PATH")
    p_analyze.add_argument("--lang", type=str, default=None,
                           help="Force a language (javascript, typescript, tsx)")
    p_analyze.add_argument("--only", nargs="+", metavar="DETECTOR", default=None,
                           help="Run only these detectors")
    p_analyze.add_argument("--json", action="store_true")
    p_analyze.add_argument("--top", type=int, default=50, help="Max issues shown per file (default: 50)")

    p_detect = sub.add_parser("detect", help="Run a single detector directly",
                              epilog=f"detectors: {', '.join(detector_names())}")
    p_detect.add_argument("detector", type=str, help="Detector to run")
    p_detect.add_argument("paths", nargs="+", metavar="PATH")
    p_detect.add_argument("--lang", type=str, default=None)
    p_detect.add_argument("--threshold", type=int, default=None,
                          help="Override the detector's main threshold")
    p_detect.add_argument("--json", action="store_true")
    p_detect.add_argument("--top", type=int, default=50)

    p_ast = sub.add_parser("ast", help="Print the syntax tree of a file as JSON")
    p_ast.add_argument("path")
    p_ast.add_argument("--lang", type=str, default=None)

    p_config = sub.add_parser("config", help="Show or change project configuration")
    config_sub = p_config.add_subparsers(dest="config_action")
    config_sub.add_parser("show", help="Show all config keys")
    p_set = config_sub.add_parser("set", help="Set a config key")
    p_set.add_argument("config_key")
    p_set.add_argument("config_value")
    p_unset = config_sub.add_parser("unset", help="Reset a config key to its default")
    p_unset.add_argument("config_key")

    sub.add_parser("langs", help="List supported languages and file extensions")

    return parser


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def main(argv: list[str] | None = None) -> None:
    parser = create_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    from .config import load_config

    args._config = load_config()

    # Lazy-load command handlers from commands/
    from .commands.analyze import cmd_analyze
    from .commands.ast_cmd import cmd_ast
    from .commands.config_cmd import cmd_config
    from .commands.detect import cmd_detect
    from .commands.langs import cmd_langs

    commands = {
        "analyze": cmd_analyze,
        "detect": cmd_detect,
        "ast": cmd_ast,
        "config": cmd_config,
        "langs": cmd_langs,
    }

    try:
        commands[args.command](args)
    except UnsnarlError as exc:
        print_error(exc.message)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        sys.exit(1)


if __name__ == "__main__":
    main()
