"""CLI entry point: ``mndlint check`` and ``mndlint checks``."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from mndlint import __version__
from mndlint.config import CHECK_NAMES, Settings
from mndlint.errors import MndlintError
from mndlint.logging_config import set_level, setup_logging

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_USAGE = 2


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"mndlint {__version__}")
        return EXIT_OK

    if args.command == "check":
        return _run_check(args)
    if args.command == "checks":
        for name in CHECK_NAMES:
            print(name)
        return EXIT_OK
    parser.print_help()
    return EXIT_USAGE


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mndlint",
        description="Detect magic numbers in Go source code.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )

    sub = parser.add_subparsers(dest="command")

    check = sub.add_parser(
        "check",
        help="Analyse Go files or directories",
    )
    check.add_argument(
        "paths",
        nargs="+",
        help="Go files or directories to analyse",
    )
    check.add_argument(
        "--checks",
        "-c",
        default=None,
        help=(
            "Comma-separated checks to enable "
            f"(default: {','.join(CHECK_NAMES)})"
        ),
    )
    check.add_argument(
        "--ignored-numbers",
        default=None,
        help="Comma-separated regular expressions of literal values to ignore",
    )
    check.add_argument(
        "--ignored-functions",
        default=None,
        help="Comma-separated regular expressions of pkg.Func calls to ignore",
    )
    check.add_argument(
        "--ignored-files",
        default=None,
        help="Comma-separated regular expressions of file paths to skip",
    )
    check.add_argument(
        "--format",
        "-f",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    check.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging and stream findings to the log",
    )

    sub.add_parser("checks", help="List available checks")

    return parser


def _settings_from_args(args: argparse.Namespace) -> Settings:
    """Environment/.env settings, overridden by any flags given."""
    overrides: dict[str, Any] = {}
    for name in ("checks", "ignored_numbers", "ignored_functions", "ignored_files"):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value
    return Settings(**overrides)


def _run_check(args: argparse.Namespace) -> int:
    """Execute the check command."""
    from mndlint.analysis import run_analysis
    from mndlint.ingestion import discover_sources
    from mndlint.reporting import LoggingReporter, render_json, render_text

    try:
        settings = _settings_from_args(args)
    except ValidationError as exc:
        print(f"Error: invalid configuration\n{exc}", file=sys.stderr)
        return EXIT_USAGE

    setup_logging(settings.log_level)
    if args.verbose:
        set_level("DEBUG")

    paths = [Path(p) for p in args.paths]
    missing = [p for p in paths if not p.exists()]
    if missing:
        for p in missing:
            print(f"Error: {p} does not exist", file=sys.stderr)
        return EXIT_USAGE

    sources = discover_sources(paths, settings)
    reporter = LoggingReporter() if args.verbose else None
    try:
        result = asyncio.run(
            run_analysis(sources, settings, reporter=reporter)
        )
    except MndlintError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    if args.format == "json":
        print(render_json(result))
    elif result.findings:
        print(render_text(result.findings))

    for file_path, error in result.errors.items():
        print(f"Error: {file_path}: {error}", file=sys.stderr)

    return EXIT_FINDINGS if result.findings else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
