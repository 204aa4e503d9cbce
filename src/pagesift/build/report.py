"""Per-pass filter report.

Returned by a single decision pass over a build's discovered files; the
decision engine itself never accumulates anything.
"""

from dataclasses import dataclass

from pagesift.decision import Decision


@dataclass(frozen=True, slots=True)
class FilteredPage:
    """A path the pass excluded."""

    path: str
    route: str
    matched: str | None = None


@dataclass(frozen=True, slots=True)
class FilterReport:
    """Decisions for one pass, in input order."""

    paths: tuple[str, ...] = ()
    decisions: tuple[Decision, ...] = ()

    @property
    def excluded(self) -> list[FilteredPage]:
        return [
            FilteredPage(path=path, route=d.route or "", matched=d.matched)
            for path, d in zip(self.paths, self.decisions, strict=True)
            if d.excluded
        ]

    @property
    def excluded_count(self) -> int:
        return sum(1 for d in self.decisions if d.excluded)

    @property
    def route_count(self) -> int:
        """Number of paths that were route files."""
        return sum(1 for d in self.decisions if d.route is not None)

    @property
    def kept_count(self) -> int:
        """Route files that stay in the build."""
        return self.route_count - self.excluded_count

    def summary(self) -> str:
        lines = [f"Filtered {self.excluded_count} of {self.route_count} pages"]
        lines.extend(f"   - {page.route} ({page.path})" for page in self.excluded)
        return "\n".join(lines)
