"""``pagesift scan`` — decide every route file under a project directory.

Walks the directory for source files (skipping ``node_modules`` and
dot-directories) and prints the decision for each route file.
"""

import argparse
import sys
from pathlib import Path

from pagesift.build.report import FilterReport
from pagesift.cli._config import config_from_args
from pagesift.cli._decide import format_decision
from pagesift.decision import decide
from pagesift.routing.layout import SOURCE_EXTENSIONS

_SKIP_DIRS = frozenset({"node_modules"})


def discover_sources(root: Path) -> list[str]:
    """Source files under *root* as ``<root name>/<relative posix path>``."""
    found: list[str] = []
    for item in sorted(root.rglob("*")):
        if not item.is_file() or item.suffix not in SOURCE_EXTENSIONS:
            continue
        rel = item.relative_to(root)
        if any(part in _SKIP_DIRS or part.startswith(".") for part in rel.parts[:-1]):
            continue
        found.append(f"{root.name}/{rel.as_posix()}")
    return found


def run_scan(args: argparse.Namespace) -> None:
    """Print decisions for route files under ``args.root`` and a summary."""
    root = Path(args.root).resolve()
    if not root.is_dir():
        print(f"Error: Directory not found: {args.root}", file=sys.stderr)
        raise SystemExit(1)

    config = config_from_args(args)
    paths = tuple(discover_sources(root))
    report = FilterReport(paths=paths, decisions=tuple(decide(p, config) for p in paths))

    for path, decision in zip(report.paths, report.decisions, strict=True):
        if decision.route is not None:
            print(format_decision(path, decision))

    print(f"{report.kept_count} kept, {report.excluded_count} excluded")
