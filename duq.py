#!/usr/bin/env python3
"""
duq: disk usage, quick

Lists the direct children of a directory with their total sizes, sorted
by size, followed by a grand total. Directories are sized recursively;
symbolic links are reported but never followed.

Usage:
    duq                      # Current directory, smallest first
    duq ~/Downloads -r -u    # Largest first, with units
    duq /var/log -f -M 10    # Only files of at least 10 MiB
    duq some/file.iso        # Size of a single file
"""

import argparse
import logging
import math
import pathlib
import sys
from typing import Callable, Optional

from console_ui import ConsoleUI
from duq_config import ConfigManager, DuqSettings, ReportConfig
from entry_collector import EntryCollector
from errors import DuqError
from reporter import render

__version__ = "1.0.0"


# ---------------------------------------------------------------------------
# Threshold parsing
# ---------------------------------------------------------------------------


def _parse_bytes(value: str) -> int:
    """Parse a -B value: a non-negative whole number of bytes."""
    try:
        size = int(value, 10)
    except ValueError:
        size = -1
    if size < 0:
        raise argparse.ArgumentTypeError(f"Invalid value for -B option: '{value}'")
    return size


def _scaled_size_parser(flag: str, exponent: int) -> Callable[[str], int]:
    """Build a parser for -K/-M/-G/-T values, converting them to bytes."""

    def parse(value: str) -> int:
        try:
            amount = float(value)
        except ValueError:
            amount = -1.0
        size = amount * 1024.0**exponent
        if amount < 0 or not math.isfinite(size):
            raise argparse.ArgumentTypeError(f"Invalid value for -{flag} option: '{value}'")
        return int(size)

    return parse


# ---------------------------------------------------------------------------
# Duq
# ---------------------------------------------------------------------------


class DuqApp:
    """Main application class for the duq disk usage reporter."""

    def __init__(
        self,
        args: argparse.Namespace,
        ui: Optional[ConsoleUI] = None,
        settings: Optional[DuqSettings] = None,
    ):
        self.args = args
        self.ui = ui or ConsoleUI()
        if settings is None:
            settings = ConfigManager(getattr(args, "config", None)).load()
        self.settings = settings
        self.collector = EntryCollector()

        if getattr(args, "debug", False):
            self._enable_debug_logging()

    def _enable_debug_logging(self):
        root = logging.getLogger()
        root.addHandler(self.ui.create_log_handler(logging.DEBUG))
        root.setLevel(logging.DEBUG)

    def build_config(self) -> ReportConfig:
        return ReportConfig.from_args(self.args, self.settings)

    def run(self) -> int:
        config = self.build_config()

        try:
            result = self.collector.collect(config.target_path, config)
        except DuqError as e:
            self.ui.print_error(str(e))
            return 1

        self.ui.print_lines(render(result, config))
        return 0


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="duq",
        description="Disk usage analyzer with sorted file and directory sizes.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Notes:
  - Specify only one of -B, -K, -M, -G, or -T options.
  - Cannot combine -f and -d options.
  - Defaults for --units and --reverse can be set in ~/.duq/config.json,
    e.g. {"units": true, "reverse": false}
        """,
    )
    parser.add_argument(
        "target", nargs="?", default=".", help="Directory or file to list. Defaults to current directory."
    )
    parser.add_argument("-v", "--version", action="version", version=__version__)
    parser.add_argument(
        "-u", "--units", action="store_true", help="Display sizes with units (B, K, M, G, T) with up to 3 decimal places"
    )
    parser.add_argument(
        "-r", "--reverse", action="store_true", help="Reverse sorting order (display from largest to smallest)"
    )

    type_group = parser.add_mutually_exclusive_group()
    type_group.add_argument(
        "-f", "--files-only", action="store_true", help="Discard directories; consider only files and symlinks"
    )
    type_group.add_argument(
        "-d", "--directories-only", action="store_true", help="Discard files and symlinks; consider only directories"
    )

    size_group = parser.add_mutually_exclusive_group()
    size_group.add_argument(
        "-B",
        "--bytes",
        dest="min_size_threshold",
        type=_parse_bytes,
        metavar="N",
        help="Filter out entries smaller than N Bytes",
    )
    for flag, long_name, unit, exponent in (
        ("K", "kilobytes", "Kilobytes", 1),
        ("M", "megabytes", "Megabytes", 2),
        ("G", "gigabytes", "Gigabytes", 3),
        ("T", "terabytes", "Terabytes", 4),
    ):
        size_group.add_argument(
            f"-{flag}",
            f"--{long_name}",
            dest="min_size_threshold",
            type=_scaled_size_parser(flag, exponent),
            metavar="X",
            help=f"Filter out entries smaller than X {unit}",
        )

    parser.add_argument("--config", type=pathlib.Path, default=None, help="Settings file (default: ~/.duq/config.json)")
    parser.add_argument("--debug", action="store_true", help="Log skipped entries and other details to stderr")
    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    args = build_parser().parse_args(argv)
    if args.min_size_threshold is None:
        args.min_size_threshold = 0
    return args


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    app = DuqApp(args)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
