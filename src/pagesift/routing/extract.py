"""Route extraction — canonical route ids from normalized paths.

Both conventions produce the same id for the same URL::

    app/admin/users/page.tsx  -> admin/users
    pages/admin/users.js      -> admin/users

The nested convention is tried first when both are enabled.
"""

import re

from pagesift.config import FilterConfig
from pagesift.routing.classify import flat_remainder, nested_remainder
from pagesift.routing.layout import ROUTE_GROUP_RE, clean_route, strip_extension

_PAGE_FILE_RE = re.compile(r"(?:^|/)page\.(?:tsx|ts|jsx|js)$")


def _strip_route_groups(route: str) -> str:
    return "/".join(seg for seg in route.split("/") if not ROUTE_GROUP_RE.match(seg))


def extract_nested(normalized_path: str, config: FilterConfig) -> str | None:
    """Route id for a ``page.<ext>`` file under the nested directory."""
    remainder = nested_remainder(normalized_path, config)
    if remainder is None or not _PAGE_FILE_RE.search(remainder):
        return None
    route = _PAGE_FILE_RE.sub("", remainder)
    return clean_route(_strip_route_groups(route))


def extract_flat(normalized_path: str, config: FilterConfig) -> str | None:
    """Route id for a file under the flat directory or a flat alias."""
    remainder = flat_remainder(normalized_path, config)
    if remainder is None:
        return None
    return clean_route(strip_extension(remainder))


def extract_route(normalized_path: str, config: FilterConfig) -> str | None:
    """Derive the route id for *normalized_path*.

    Returns None when neither active convention's directory appears in
    the path.  Route group segments (``(name)``) are dropped under the
    nested convention; dynamic segments (``[id]``) are kept verbatim.
    """
    route = extract_nested(normalized_path, config)
    if route is not None:
        return route
    return extract_flat(normalized_path, config)
