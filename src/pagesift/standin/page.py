"""Stand-in artifact served in place of a filtered page.

Every stand-in carries :data:`FILTER_MARKER`, whichever not-found
strategy it uses, so a verifier can grep build output without executing
the route.  Rendered pages carry it twice (a ``data-filter-marker``
attribute and a hidden element); the marker is also in the metadata and
in the :class:`PageNotFound` message.
"""

from dataclasses import dataclass, field

from kida import Environment

from pagesift.errors import PageNotFound
from pagesift.standin.strategy import NotFoundStrategy, RaiseNotFound, RenderStandIn

FILTER_MARKER = "PAGESIFT_EXCLUDED_PAGE"

# Request the build pipeline resolves to instead of an excluded page module
STANDIN_REQUEST = "pagesift:standin"

_TEMPLATE = """\
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="robots" content="noindex">
<title>{{ title }} - 404</title>
</head>
<body>
<main data-filter-marker="{{ marker }}" data-route="{{ route }}">
  <h1>404</h1>
  <p>{{ title }}</p>
  <p>{{ message }}</p>
  <div hidden>{{ marker }}</div>
</main>
</body>
</html>
"""

# Body of a throw-style stand-in: never served, only grepped
_MARKER_TEMPLATE = """\
<div hidden data-filter-marker="{{ marker }}" data-route="{{ route }}">{{ marker }}</div>
"""

_env = Environment(autoescape=True)


@dataclass(frozen=True, slots=True)
class StandIn:
    """What a filtered page compiles to.

    Attributes:
        strategy: How serving signals not-found.
        route: Route id of the filtered page, if known.
        body: Rendered HTML; a bare marker element for :class:`RaiseNotFound`.
        metadata: Page title/description for runtimes that ask for it.
    """

    strategy: NotFoundStrategy
    route: str | None = None
    body: str = ""
    metadata: dict[str, str] = field(default_factory=dict)
    status: int = 404

    def serve(self) -> tuple[int, str]:
        """Return ``(status, body)``, or raise for the throw-style strategy.

        Raises:
            PageNotFound: When the strategy is :class:`RaiseNotFound`.
        """
        if isinstance(self.strategy, RaiseNotFound):
            raise PageNotFound(route=self.route, status=self.status, marker=FILTER_MARKER)
        return self.status, self.body


def render_standin(strategy: RenderStandIn, route: str | None = None) -> str:
    """Render the 404 stand-in page for *route*."""
    template = _env.from_string(_TEMPLATE)
    return template.render(
        {
            "title": strategy.title,
            "message": strategy.message,
            "marker": FILTER_MARKER,
            "route": route or "",
        }
    )


def build_standin(strategy: NotFoundStrategy, route: str | None = None) -> StandIn:
    """Build the stand-in artifact for a filtered page."""
    title = strategy.title if isinstance(strategy, RenderStandIn) else RenderStandIn().title
    metadata = {
        "title": f"{title} - 404",
        "description": "This page has been filtered out during build",
        "filter-marker": FILTER_MARKER,
    }
    if isinstance(strategy, RaiseNotFound):
        template = _env.from_string(_MARKER_TEMPLATE)
        body = template.render({"marker": FILTER_MARKER, "route": route or ""})
        return StandIn(strategy=strategy, route=route, body=body, metadata=metadata)
    return StandIn(
        strategy=strategy,
        route=route,
        body=render_standin(strategy, route),
        metadata=metadata,
    )
