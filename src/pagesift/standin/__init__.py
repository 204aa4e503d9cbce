"""Stand-in artifacts for filtered pages.

A filtered page is not removed from the build; its module is swapped for
a stand-in that signals 404 and embeds :data:`FILTER_MARKER`.
"""

from pagesift.standin.page import (
    FILTER_MARKER,
    STANDIN_REQUEST,
    StandIn,
    build_standin,
    render_standin,
)
from pagesift.standin.strategy import NotFoundStrategy, RaiseNotFound, RenderStandIn

__all__ = [
    "FILTER_MARKER",
    "STANDIN_REQUEST",
    "NotFoundStrategy",
    "RaiseNotFound",
    "RenderStandIn",
    "StandIn",
    "build_standin",
    "render_standin",
]
