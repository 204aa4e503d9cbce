"""``pagesift decide`` — show the filter decision for file paths."""

import argparse

from pagesift.cli._config import config_from_args
from pagesift.decision import Decision, decide


def format_decision(path: str, decision: Decision) -> str:
    verdict = "EXCLUDE" if decision.excluded else "KEEP"
    route = decision.route or "-"
    detail = f"{decision.reason}: {decision.matched}" if decision.matched else decision.reason
    return f"{verdict:<8} {route:<24} {path}  ({detail})"


def run_decide(args: argparse.Namespace) -> None:
    """Print one decision line per path in ``args.paths``."""
    config = config_from_args(args)
    for path in args.paths:
        print(format_decision(path, decide(path, config)))
