"""Route-id matching against compiled filter patterns.

Two mutually exclusive modes:

- **allow-list** (any included pattern configured): a route is excluded
  unless an included pattern accepts it;
- **deny-list** (otherwise): a route is excluded when an excluded page
  pattern or an exclude regex accepts it.

Glob patterns keep the older non-glob behaviour as a fallback: an
included pattern also accepts an exact or substring match, an excluded
pattern also accepts an exact match or any route below it
(``admin`` excludes ``admin/users`` but not ``admin-panel``).
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pagesift.errors import PatternError
from pagesift.matching.glob import GlobPattern, compile_glob
from pagesift.paths import normalize

if TYPE_CHECKING:
    from pagesift.config import FilterConfig

logger = logging.getLogger("pagesift.matching")


@dataclass(frozen=True, slots=True)
class RegexPattern:
    """A deny-list regex.  ``regex`` is None when the source failed to compile."""

    source: str
    regex: re.Pattern[str] | None
    error: PatternError | None = None

    def search(self, route: str) -> bool:
        if self.regex is None:
            return False
        return self.regex.search(route) is not None


@dataclass(frozen=True, slots=True)
class Match:
    """Verdict for one route id.

    Attributes:
        excluded: True when the route should be replaced by a stand-in.
        matched: Pattern or regex source responsible for the verdict.
        reason: ``"included"``, ``"not-included"``, ``"excluded-page"``,
            ``"exclude-pattern"``, or ``"no-match"``.
    """

    excluded: bool
    matched: str | None = None
    reason: str = "no-match"


def _included_by(pattern: GlobPattern, route: str) -> bool:
    return pattern.matches(route) or route == pattern.source or pattern.source in route


def _excluded_by(pattern: GlobPattern, route: str) -> bool:
    return (
        pattern.matches(route)
        or route == pattern.source
        or route.startswith(pattern.source + "/")
    )


@dataclass(frozen=True, slots=True)
class CompiledFilter:
    """Pattern sets compiled once per build."""

    included: tuple[GlobPattern, ...] = ()
    excluded: tuple[GlobPattern, ...] = ()
    regexes: tuple[RegexPattern, ...] = ()

    @property
    def allow_list(self) -> bool:
        """True when included patterns are configured."""
        return bool(self.included)

    @property
    def invalid_patterns(self) -> tuple[PatternError, ...]:
        """Regex sources that failed to compile and never match."""
        return tuple(r.error for r in self.regexes if r.error is not None)

    def explain(self, route: str) -> Match:
        if self.included:
            for pattern in self.included:
                if _included_by(pattern, route):
                    return Match(excluded=False, matched=pattern.source, reason="included")
            return Match(excluded=True, reason="not-included")

        for pattern in self.excluded:
            if _excluded_by(pattern, route):
                return Match(excluded=True, matched=pattern.source, reason="excluded-page")

        for regex in self.regexes:
            if regex.search(route):
                return Match(excluded=True, matched=regex.source, reason="exclude-pattern")

        return Match(excluded=False)

    def matches(self, route: str) -> bool:
        return self.explain(route).excluded


def compile_regex(source: str) -> RegexPattern:
    """Compile a deny-list regex, degrading to never-matching on error."""
    try:
        return RegexPattern(source=source, regex=re.compile(source))
    except (re.error, OverflowError, TypeError, ValueError) as exc:
        error = PatternError(pattern=source, reason=str(exc))
        logger.warning("Invalid exclude pattern %r ignored: %s", source, exc)
        return RegexPattern(source=source, regex=None, error=error)


def compile_filter(
    included: Iterable[str] = (),
    excluded: Iterable[str] = (),
    patterns: Iterable[str] = (),
) -> CompiledFilter:
    """Compile included/excluded globs and exclude regexes.

    Globs are normalized (``/`` separators, lowercase) like route ids;
    regex sources are used verbatim.
    """
    return CompiledFilter(
        included=tuple(compile_glob(normalize(p)) for p in included),
        excluded=tuple(compile_glob(normalize(p)) for p in excluded),
        regexes=tuple(compile_regex(p) for p in patterns),
    )


def explain(route_id: str, config: "FilterConfig") -> Match:
    """Return the verdict for *route_id* with the responsible pattern."""
    return config.compiled.explain(route_id)


def matches(route_id: str, config: "FilterConfig") -> bool:
    """True when *route_id* is excluded by *config*."""
    return config.compiled.explain(route_id).excluded
