"""``pagesift match`` — test one glob against route ids.

Exits 0 when at least one route matched, 1 otherwise.
"""

import argparse

from pagesift.matching.glob import compile_glob


def run_match(args: argparse.Namespace) -> None:
    """Print MATCH / NO MATCH for each route id in ``args.routes``."""
    pattern = compile_glob(args.pattern)

    print(f"Pattern: {args.pattern!r}")
    matched = 0
    for route in args.routes:
        if pattern.matches(route):
            matched += 1
            print(f"MATCH     {route}")
        else:
            print(f"NO MATCH  {route}")

    print(f"{matched} of {len(args.routes)} matched")
    raise SystemExit(0 if matched else 1)
