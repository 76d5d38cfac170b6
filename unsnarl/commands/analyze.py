"""analyze command: run every enabled detector over files or directories."""

from __future__ import annotations

import argparse
import sys

from ..analysis import analyze_file
from ..config import options_from_config
from ..registry import detector_names, resolve_detector
from ..utils import colorize
from ._helpers import collect_files, print_reports


def cmd_analyze(args: argparse.Namespace) -> None:
    config = args._config
    if args.only:
        unknown = [name for name in args.only if resolve_detector(name) is None]
        if unknown:
            print(colorize(f"Unknown detector: {', '.join(unknown)}", "red"))
            print(f"  Available: {', '.join(detector_names())}")
            sys.exit(1)

    options = options_from_config(config)
    files = collect_files(args.paths, config, args.lang)
    reports = [
        analyze_file(f, args.lang, options=options, only=args.only)
        for f in files
    ]
    print_reports(reports, as_json=args.json, top=args.top)
