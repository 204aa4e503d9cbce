"""pagesift CLI — try patterns and filter decisions outside a build.

Entry point registered as ``pagesift`` in ``pyproject.toml``::

    [project.scripts]
    pagesift = "pagesift.cli:main"
"""

import argparse
import logging
import sys


def _add_filter_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--include",
        action="append",
        default=[],
        metavar="GLOB",
        help="Keep only routes matching GLOB (repeatable; enables allow-list mode)",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="GLOB",
        help="Exclude routes matching GLOB (repeatable)",
    )
    parser.add_argument(
        "--exclude-pattern",
        action="append",
        default=[],
        metavar="REGEX",
        help="Exclude routes where REGEX matches (repeatable)",
    )
    parser.add_argument("--pages-dir", default="pages", help="Flat routing directory name")
    parser.add_argument("--app-dir", default="app", help="Nested routing directory name")
    parser.add_argument(
        "--no-pages-router",
        action="store_true",
        help="Disable the flat (pages/) convention",
    )
    parser.add_argument(
        "--no-app-router",
        action="store_true",
        help="Disable the nested (app/) convention",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show diagnostic logging")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``pagesift`` command."""
    parser = argparse.ArgumentParser(
        prog="pagesift",
        description="pagesift — decide which routes a build keeps.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- pagesift match ---------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Test a glob against route ids")
    match_parser.add_argument("pattern", help="Glob pattern (e.g. 'admin/**')")
    match_parser.add_argument("routes", nargs="+", metavar="route", help="Route ids to test")

    # -- pagesift decide --------------------------------------------------
    decide_parser = subparsers.add_parser("decide", help="Decide file paths")
    decide_parser.add_argument("paths", nargs="+", metavar="path", help="File paths to decide")
    _add_filter_args(decide_parser)

    # -- pagesift scan ----------------------------------------------------
    scan_parser = subparsers.add_parser("scan", help="Decide every route file under a directory")
    scan_parser.add_argument("root", help="Project directory to walk")
    _add_filter_args(scan_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    if args.command == "match":
        from pagesift.cli._match import run_match

        run_match(args)
    elif args.command == "decide":
        from pagesift.cli._decide import run_decide

        run_decide(args)
    elif args.command == "scan":
        from pagesift.cli._scan import run_scan

        run_scan(args)
