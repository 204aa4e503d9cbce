"""File-layout conventions shared by the classifier and extractor.

Two conventions may be active at once:

    pages/                     # flat: the path is the route
      about.tsx                # -> about
      blog/[slug].tsx          # -> blog/[slug]
      api/users.ts             # not a route (API)
      _app.tsx                 # not a route (reserved)

    app/                       # nested: directories are the route
      page.tsx                 # -> index
      layout.tsx               # not a route (sibling)
      (marketing)/about/page.tsx   # -> about
"""

import re

# Source extensions a route file may have
SOURCE_EXTENSIONS: tuple[str, ...] = (".js", ".jsx", ".ts", ".tsx")

# Base name of the route file under the nested convention
PAGE_BASENAME = "page"

# Sibling base names under the nested convention that are never routes
NESTED_SIBLINGS = frozenset({"layout", "loading", "error", "not-found", "template", "default"})

# Base names under the flat convention reserved by the framework
FLAT_RESERVED = frozenset({"_app", "_document", "_error", "404", "500"})

# Flat-convention sub-segment holding API handlers
API_SEGMENT = "api"

# Route group segment: (name)
ROUTE_GROUP_RE = re.compile(r"^\([^/)]+\)$")

_EXTENSION_RE = re.compile(r"\.(?:tsx|ts|jsx|js)$")


def has_source_extension(path: str) -> bool:
    return path.endswith(SOURCE_EXTENSIONS)


def strip_extension(path: str) -> str:
    return _EXTENSION_RE.sub("", path)


def basename(path: str) -> str:
    """File name of *path* without its source extension."""
    return strip_extension(path.rsplit("/", 1)[-1])


def segment_index(path: str, directory: str) -> int | None:
    """Index where the first ``<directory>/`` segment of *path* starts, if any."""
    marker = f"{directory}/"
    if path.startswith(marker):
        return 0
    index = path.find(f"/{marker}")
    return None if index == -1 else index + 1


def remainder_after(path: str, directory: str) -> str | None:
    """Return the part of *path* after the first ``<directory>/`` segment.

    The segment must start the path or follow a ``/``.  Returns None when
    the segment does not occur.

    Examples::

        remainder_after("/src/app/blog/page.tsx", "app")  -> "blog/page.tsx"
        remainder_after("app/page.tsx", "app")            -> "page.tsx"
        remainder_after("/src/webapp/page.tsx", "app")    -> None
    """
    index = segment_index(path, directory)
    if index is None:
        return None
    return path[index + len(directory) + 1 :]


def clean_route(route: str) -> str:
    """Collapse repeated slashes, trim the ends, map empty to ``index``."""
    route = re.sub(r"/+", "/", route).strip("/")
    return route or "index"
