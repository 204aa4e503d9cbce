"""Build integration — hooks, entry filtering, and per-pass reports.

Everything here sits outside the decision engine: it calls
:func:`pagesift.decision.decide` and owns whatever state a build needs.
"""

from pagesift.build.entries import EntryFilterResult, entry_route, filter_entries
from pagesift.build.hooks import HookRegistry, ResolveRequest
from pagesift.build.plugin import BuildContext, PageFilterPlugin
from pagesift.build.report import FilteredPage, FilterReport

__all__ = [
    "BuildContext",
    "EntryFilterResult",
    "FilterReport",
    "FilteredPage",
    "HookRegistry",
    "PageFilterPlugin",
    "ResolveRequest",
    "entry_route",
    "filter_entries",
]
