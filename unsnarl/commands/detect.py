"""detect command: run a single detector directly."""

from __future__ import annotations

import argparse
import dataclasses
import sys

from ..analysis import analyze_file
from ..config import options_from_config
from ..registry import detector_names, resolve_detector
from ..utils import colorize
from ._helpers import collect_files, print_reports


def cmd_detect(args: argparse.Namespace) -> None:
    """Run one detector, optionally overriding its main threshold."""
    meta = resolve_detector(args.detector)
    if meta is None:
        print(colorize(f"Unknown detector: {args.detector}", "red"))
        print(f"  Available: {', '.join(detector_names())}")
        sys.exit(1)

    options = options_from_config(args._config)
    if args.threshold is not None:
        if not meta.threshold_option:
            print(colorize(f"  {meta.name} takes no threshold; ignoring --threshold", "yellow"))
        else:
            options = dataclasses.replace(options, **{meta.threshold_option: args.threshold})

    files = collect_files(args.paths, args._config, args.lang)
    reports = [
        analyze_file(f, args.lang, options=options, only=[meta.name])
        for f in files
    ]
    print_reports(reports, as_json=args.json, top=args.top)
