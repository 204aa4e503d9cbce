"""Not-found signalling strategies for filtered pages.

The build pipeline chooses how a stand-in reports "not found" when it is
served; nothing here probes for framework capabilities.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RaiseNotFound:
    """Serving the stand-in raises :class:`~pagesift.errors.PageNotFound`.

    For runtimes that turn a raised not-found signal into their own 404
    page.
    """


@dataclass(frozen=True, slots=True)
class RenderStandIn:
    """Serving the stand-in returns a rendered 404 page."""

    title: str = "Page Not Available"
    message: str = "This page has been filtered out during build."


type NotFoundStrategy = RaiseNotFound | RenderStandIn
