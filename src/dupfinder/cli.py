"""CLI argument parsing and mode dispatch."""

from __future__ import annotations

from dupfinder.config import load_config
from dupfinder.config import merge_config_into_args
from dupfinder.engine import find_duplicates
from dupfinder.engine import ScanStats
from dupfinder.errors import DupfinderError
from dupfinder.keys import Strategy
from dupfinder.logging import configure_logging
from dupfinder.policy import SizePolicy
from dupfinder.report import write_json
from dupfinder.report import write_text
from dupfinder.scanner import iter_entries

import argparse
import logging
import pathlib
import sys


logger = logging.getLogger(__name__)

MODES = {s.value for s in Strategy}
_VALUE_OPTIONS = {"--exclude", "--exclude-dir"}


def _add_directory(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "directory",
        nargs="?",
        type=pathlib.Path,
        default=pathlib.Path("."),
        help="Root directory from which to search the files (default: .)",
    )


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive number of bytes: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="dupfinder",
        description="Find duplicate files by name, name and size, or name, size and content hash.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Enable debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only show warnings and errors")
    parser.add_argument(
        "--keep-going", action="store_true",
        help="Skip files that cannot be read instead of aborting",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print the report as JSON",
    )
    parser.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    parser.add_argument(
        "--exclude", action="append", default=None, metavar="PATTERN",
        help="Glob pattern to exclude files (e.g., '*.tmp'). Repeatable.",
    )
    parser.add_argument(
        "--exclude-dir", action="append", default=None, metavar="PATTERN",
        help="Glob pattern to exclude directories (e.g., '.git'). Repeatable.",
    )

    sub = parser.add_subparsers(dest="command")

    # --- n ---
    p_name = sub.add_parser("n", help="Compare through file names only")
    _add_directory(p_name)

    # --- s ---
    p_size = sub.add_parser("s", help="Compare through file names and sizes")
    _add_directory(p_size)

    # --- h ---
    p_hash = sub.add_parser("h", help="Compare through file hashes (using sha256, pretty slow)")
    p_hash.add_argument(
        "-b", "--big-files", action="store_true",
        help="Skip big files (> 8 GiB unless --big-threshold is given)",
    )
    p_hash.add_argument(
        "-s", "--small-files", action="store_true",
        help="Skip small files (< 8 MiB unless --small-threshold is given)",
    )
    p_hash.add_argument(
        "--big-threshold", type=_positive_int, default=None, metavar="BYTES",
        help="Size above which -b skips a file",
    )
    p_hash.add_argument(
        "--small-threshold", type=_positive_int, default=None, metavar="BYTES",
        help="Size below which -s skips a file",
    )
    _add_directory(p_hash)

    return parser


def _hoist_directory(argv: list[str]) -> list[str]:
    """Move a DIRECTORY given before the mode to just after it.

    DIRECTORY is a global argument: `dupfinder DIR n` means `dupfinder n DIR`.
    """
    positions = []
    skip_value = False
    for i, token in enumerate(argv):
        if skip_value:
            skip_value = False
            continue
        if token == "--":
            break
        if token in _VALUE_OPTIONS:
            skip_value = True
            continue
        if token.startswith("-"):
            continue
        positions.append(i)
        if len(positions) == 2:
            break
    if len(positions) < 2 or argv[positions[0]] in MODES or argv[positions[1]] not in MODES:
        return argv
    first, mode = positions
    return argv[:first] + argv[first + 1:mode + 1] + [argv[first]] + argv[mode + 1:]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the command line, accepting DIRECTORY before or after the mode."""
    if argv is None:
        argv = sys.argv[1:]
    return build_parser().parse_args(_hoist_directory(list(argv)))


def cmd_find(args: argparse.Namespace) -> int:
    """Scan args.directory with the selected mode and print the duplicate groups."""
    strategy = Strategy(args.command)
    policy = None
    if strategy is Strategy.HASH:
        policy = SizePolicy(
            skip_big=args.big_files,
            skip_small=args.small_files,
            big_threshold=args.big_threshold,
            small_threshold=args.small_threshold,
        )

    logger.debug(f"scanning {args.directory} with strategy {strategy.name}")
    stats = ScanStats()
    try:
        groups = find_duplicates(
            iter_entries(args.directory, exclude=args.exclude, exclude_dir=args.exclude_dir),
            strategy,
            policy,
            chunk_size=args.chunk_size,
            keep_going=args.keep_going,
            progress=not (args.quiet or args.no_progress),
            stats=stats,
        )
    except (DupfinderError, OSError) as exc:
        logger.error(f"error: {exc}")
        return 1

    if args.json:
        write_json(groups, sys.stdout)
    else:
        write_text(groups, sys.stdout)

    if stats.errors:
        logger.warning(f"{len(stats.errors)} file(s) could not be read and were left out")
        return 2
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet)

    if args.command is None:
        parser.print_usage(sys.stderr)
        logger.error("error: no mode specified, choose one of n, s, h")
        return 1

    merge_config_into_args(args, load_config())
    return cmd_find(args)


if __name__ == "__main__":
    sys.exit(main())
