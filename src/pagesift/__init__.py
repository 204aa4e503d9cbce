"""pagesift — keep or stand-in each route of a file-system-routed build.

Decides, per discovered route file, whether a build includes the page or
replaces it with a 404 stand-in.  Understands flat (``pages/``) and
nested (``app/``) routing layouts side by side.

Basic usage::

    from pagesift import FilterConfig, decide

    config = FilterConfig(excluded_pages=("admin/**",))
    decide("src/app/admin/users/page.tsx", config).excluded  # True
    decide("src/pages/about.tsx", config).excluded           # False

Build integration::

    from pagesift import PageFilterPlugin, load_options
    from pagesift.build import HookRegistry

    plugin = PageFilterPlugin(load_options({"excludedPages": ["dev/**"]}))
    plugin.install(HookRegistry())
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Decision",
    "DirectoryNames",
    "FILTER_MARKER",
    "FilterConfig",
    "FilterOptions",
    "PageFilterPlugin",
    "PageNotFound",
    "PageSiftError",
    "PatternError",
    "RoutingModes",
    "decide",
    "extract_route",
    "is_route_file",
    "load_options",
    "normalize",
]

# public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "pagesift.errors",
    "Decision": "pagesift.decision",
    "DirectoryNames": "pagesift.config",
    "FILTER_MARKER": "pagesift.standin",
    "FilterConfig": "pagesift.config",
    "FilterOptions": "pagesift.config",
    "PageFilterPlugin": "pagesift.build.plugin",
    "PageNotFound": "pagesift.errors",
    "PageSiftError": "pagesift.errors",
    "PatternError": "pagesift.errors",
    "RoutingModes": "pagesift.config",
    "decide": "pagesift.decision",
    "extract_route": "pagesift.routing.extract",
    "is_route_file": "pagesift.routing.classify",
    "load_options": "pagesift.config",
    "normalize": "pagesift.paths",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pagesift`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
