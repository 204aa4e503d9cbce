"""Entry-point filtering for flat-routed builds.

Build entry maps key flat-routed pages as ``pages/<route>`` or
``static/chunks/pages/<route>``.  Excluded entries are dropped from a
copy of the map; the input is never mutated.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pagesift.config import FilterConfig
from pagesift.paths import normalize
from pagesift.routing.layout import API_SEGMENT, FLAT_RESERVED, basename, clean_route, strip_extension

ENTRY_PREFIXES: tuple[str, ...] = ("static/chunks/pages/", "pages/")


def entry_route(key: str) -> str | None:
    """Route id for a page entry key, or None if the key is not a filterable page.

    Examples::

        entry_route("pages/about")                -> "about"
        entry_route("static/chunks/pages/blog/x") -> "blog/x"
        entry_route("pages/_app")                 -> None
        entry_route("main")                       -> None
    """
    key = normalize(key)
    for prefix in ENTRY_PREFIXES:
        if key.startswith(prefix):
            remainder = strip_extension(key[len(prefix) :])
            break
    else:
        return None

    if remainder.split("/", 1)[0] == API_SEGMENT or basename(remainder) in FLAT_RESERVED:
        return None
    return clean_route(remainder)


@dataclass(frozen=True, slots=True)
class EntryFilterResult:
    kept: dict[str, Any] = field(default_factory=dict)
    removed: tuple[str, ...] = ()


def filter_entries(entries: Mapping[str, Any], config: FilterConfig) -> EntryFilterResult:
    """Split *entries* into kept entries and removed keys.

    Only page entries are candidates, and only while the flat convention
    is enabled.
    """
    kept: dict[str, Any] = {}
    removed: list[str] = []
    for key, value in entries.items():
        route = entry_route(key) if config.routing_modes.flat_enabled else None
        if route is not None and config.compiled.matches(route):
            removed.append(key)
        else:
            kept[key] = value
    return EntryFilterResult(kept=kept, removed=tuple(removed))
