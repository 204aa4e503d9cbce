"""Filter decisions — the single entry point build pipelines call.

``decide()`` composes normalization, classification, extraction, and
matching.  It is a pure function of (path, config): no state, no I/O,
safe to call from any number of workers.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from pagesift.config import FilterConfig
from pagesift.paths import normalize
from pagesift.routing.classify import is_route_file
from pagesift.routing.extract import extract_route


@dataclass(frozen=True, slots=True)
class Decision:
    """Include/exclude verdict for one path.

    Attributes:
        excluded: True when the build should substitute a stand-in.
        route: Route id, or None when the path is not a route.
        matched: Pattern or regex source responsible for the verdict.
        reason: ``"not-a-route"``, ``"unroutable"``, or a matcher reason.
    """

    excluded: bool
    route: str | None = None
    matched: str | None = None
    reason: str = "no-match"


def decide(raw_path: str, config: FilterConfig) -> Decision:
    """Decide whether *raw_path* is excluded under *config*.

    Paths that are not route files, or whose route id cannot be derived,
    are always kept.
    """
    path = normalize(raw_path)
    if not is_route_file(path, config):
        return Decision(excluded=False, reason="not-a-route")

    route = extract_route(path, config)
    if route is None:
        return Decision(excluded=False, reason="unroutable")

    match = config.compiled.explain(route)
    return Decision(
        excluded=match.excluded,
        route=route,
        matched=match.matched,
        reason=match.reason,
    )


def decide_many(paths: Iterable[str], config: FilterConfig) -> list[Decision]:
    """Decide every path in *paths*, preserving order."""
    return [decide(path, config) for path in paths]
