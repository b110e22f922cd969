#!/usr/bin/env python3
"""
build_themes.py
Build the sema palette variants and hand each one to a theme builder.

Usage:
  python build_themes.py [--variants dark|light|all] [--preset NAME ...] [--outdir DIR]
                         [--no-swatch] [--jobs N] [--list] [--debug]

Variants:
  dark  : sema, sema chroma, sema soft, sema soft chroma (default)
  light : sema light, sema light chroma, sema light soft, sema light soft chroma
  all   : dark then light

Output:
  Prints every palette colour as hex + oklch. Unless --no-swatch is given, writes
  <variant>_swatch.png per variant into --outdir (default ./swatches).

Notes:
  Palettes come from sema_theme.presets. Variants are independent, so --jobs > 1
  builds them on a thread pool; output order stays fixed.
"""

from __future__ import annotations

import argparse
import os
import sys
import time
from pathlib import Path
from typing import List, Optional, Sequence

from sema_theme import constants as K
from sema_theme.build import (
    ALL_VARIANTS,
    DARK_VARIANTS,
    LIGHT_VARIANTS,
    ThemeVariant,
    build_themes,
    variant_for_preset,
)
from sema_theme.presets import PRESETS
from sema_theme.swatch import SwatchWriter
from sema_theme.utils import (
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_seconds_compact,
    key_value_pairs_to_string,
    log,
    print_config_line,
)

VARIANT_SETS = {
    "dark": DARK_VARIANTS,
    "light": LIGHT_VARIANTS,
    "all": ALL_VARIANTS,
}


def resolve_jobs(requested: Optional[int], n_variants: int) -> int:
    """--jobs if given, else one job per selected variant capped at the CPU count."""
    if requested is not None:
        return max(1, requested)
    return max(1, min(n_variants, os.cpu_count() or 1))


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        variants: "dark" | "light" | "all"
        preset: optional list of preset names (overrides --variants)
        outdir: Path for swatch sheets
        no_swatch: bool, print the colour table only
        jobs: parallel variant builds
        list: bool, print preset names and exit
        debug: bool for verbose output
    """
    parser = argparse.ArgumentParser(
        prog="build_themes",
        description="Build the sema palette variants and preview them.",
    )
    parser.add_argument(
        "--variants",
        choices=list(VARIANT_SETS),
        default="dark",
        help="Which variant set to build.",
    )
    parser.add_argument(
        "--preset",
        action="append",
        default=None,
        metavar="NAME",
        help="Build only this preset (repeatable). Overrides --variants.",
    )
    parser.add_argument(
        "--outdir",
        type=Path,
        default=Path(K.DEFAULT_OUTDIR),
        help="Directory for swatch sheets.",
    )
    parser.add_argument(
        "--no-swatch", action="store_true", help="Print colours only, write nothing"
    )
    parser.add_argument(
        "--jobs", type=int, default=None, help="Variants built in parallel"
    )
    parser.add_argument("--list", action="store_true", help="List presets and exit")
    parser.add_argument("--debug", action="store_true", help="Verbose output")
    return parser.parse_args(argv)


def select_variants(args: argparse.Namespace) -> List[ThemeVariant]:
    """--preset names if given, else the --variants set. Raises ValueError."""
    if args.preset:
        return [variant_for_preset(name) for name in args.preset]
    return list(VARIANT_SETS[args.variants])


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI entry point. Returns the process exit code.
    """
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)

    if args.list:
        for name in PRESETS:
            log(name)
        return 0

    try:
        variants = select_variants(args)
    except ValueError as e:
        error(str(e))
        return 2

    args.jobs = resolve_jobs(args.jobs, len(variants))
    print_config_line(
        "run",
        [
            ("Variants", len(variants)),
            ("Jobs", args.jobs),
            ("Swatch", not args.no_swatch),
        ],
        debug=False,
    )
    if args.debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Names", ", ".join(v.name for v in variants)),
                    ("Outdir", str(args.outdir)),
                ]
            )
        )

    builder = None
    if not args.no_swatch:
        try:
            args.outdir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            error(f"cannot create {args.outdir}: {e}")
            return 2
        builder = SwatchWriter(args.outdir)

    t_start = time.perf_counter()
    try:
        build_themes(builder, variants, jobs=args.jobs, debug=args.debug)
    except OSError as e:
        error(str(e))
        return 2
    log(f"\nTotal time {format_seconds_compact(time.perf_counter() - t_start)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
