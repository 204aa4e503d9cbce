"""pagesift exception hierarchy.

Shared across config loading, the matcher, the build plugin, and the
CLI so every module raises and catches the same types.
"""

from dataclasses import dataclass


class PageSiftError(Exception):
    """Base for all pagesift-specific errors."""


class ConfigurationError(PageSiftError):
    """Raised when filter options are invalid.

    Typically raised by ``load_options()`` at build start, never during
    a decision.
    """


@dataclass(frozen=True, slots=True)
class PatternError(PageSiftError):
    """A pattern that could not be compiled.

    Not raised by the matcher: malformed regexes are collected on the
    compiled filter and treated as never-matching.
    """

    pattern: str
    reason: str = ""

    def __str__(self) -> str:
        if self.reason:
            return f"Invalid pattern {self.pattern!r}: {self.reason}"
        return f"Invalid pattern {self.pattern!r}"


@dataclass(frozen=True, slots=True)
class PageNotFound(PageSiftError):  # noqa: N818 — mirrors the framework's notFound() signal
    """404 — raised by the throw-style stand-in when a filtered page is served."""

    route: str | None = None
    status: int = 404
    marker: str = ""

    def __str__(self) -> str:
        if self.route:
            msg = f"{self.status}: page {self.route!r} was filtered out of this build"
        else:
            msg = f"{self.status}: page was filtered out of this build"
        return f"{msg} [{self.marker}]" if self.marker else msg
