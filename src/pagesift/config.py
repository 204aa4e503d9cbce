"""Filter configuration.

FilterConfig is a frozen dataclass — immutable after creation, built once
per build, and the only state the decision engine reads.  Patterns are
compiled when the config is created, never per decision.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pagesift.errors import ConfigurationError
from pagesift.matching.engine import CompiledFilter, compile_filter


@dataclass(frozen=True, slots=True)
class RoutingModes:
    """Which file-layout conventions are active."""

    flat_enabled: bool = True
    nested_enabled: bool = True


@dataclass(frozen=True, slots=True)
class DirectoryNames:
    """Directory names that root each routing convention."""

    flat_dir: str = "pages"
    nested_dir: str = "app"


@dataclass(frozen=True, slots=True)
class FilterConfig:
    """Pattern sets and routing layout for one build.

    All fields have sensible defaults. Override what you need::

        config = FilterConfig(excluded_pages=("admin/**",))
    """

    included_pages: tuple[str, ...] = ()
    excluded_pages: tuple[str, ...] = ()
    exclude_patterns: tuple[str, ...] = ()
    routing_modes: RoutingModes = RoutingModes()
    directory_names: DirectoryNames = DirectoryNames()

    # Virtual module prefixes the host framework uses for flat-routed pages
    flat_aliases: tuple[str, ...] = ("private-next-pages",)

    compiled: CompiledFilter = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for name in ("included_pages", "excluded_pages", "exclude_patterns", "flat_aliases"):
            value = getattr(self, name)
            if isinstance(value, str):
                msg = f"{name} must be a sequence of strings, not a single string: {value!r}"
                raise ConfigurationError(msg)
            object.__setattr__(self, name, tuple(value))
        object.__setattr__(
            self,
            "compiled",
            compile_filter(self.included_pages, self.excluded_pages, self.exclude_patterns),
        )


@dataclass(frozen=True, slots=True)
class FilterOptions:
    """Everything a build pipeline needs to drive the filter.

    ``enabled``, ``enable_in_dev``, and ``verbose`` are read by the caller;
    the decision engine only ever sees ``config``.
    """

    config: FilterConfig = FilterConfig()
    enabled: bool = False
    enable_in_dev: bool = False
    verbose: bool = False


# option key -> canonical name; both camelCase and snake_case are accepted
_KEY_ALIASES: dict[str, str] = {
    "includedPages": "included_pages",
    "excludedPages": "excluded_pages",
    "excludePatterns": "exclude_patterns",
    "pagesDir": "flat_dir",
    "appDir": "nested_dir",
    "flatDir": "flat_dir",
    "nestedDir": "nested_dir",
    "pages_dir": "flat_dir",
    "app_dir": "nested_dir",
    "supportPagesRouter": "flat_enabled",
    "supportAppRouter": "nested_enabled",
    "flatEnabled": "flat_enabled",
    "nestedEnabled": "nested_enabled",
    "enableInDev": "enable_in_dev",
    "flatAliases": "flat_aliases",
}

_LIST_KEYS = frozenset({"included_pages", "excluded_pages", "exclude_patterns", "flat_aliases"})
_BOOL_KEYS = frozenset({"enabled", "verbose", "enable_in_dev", "flat_enabled", "nested_enabled"})
_STR_KEYS = frozenset({"flat_dir", "nested_dir"})

# Environment variable that switches filtering on when ``enabled`` is omitted
ENABLE_ENV_VAR = "FILTER_PAGES"


def _canonical(options: Mapping[str, Any]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for key, value in options.items():
        name = _KEY_ALIASES.get(key, key)
        if name in _LIST_KEYS:
            if isinstance(value, str) or not isinstance(value, (list, tuple, set, frozenset)):
                msg = f"Option {key!r} must be a list of strings, got {type(value).__name__}"
                raise ConfigurationError(msg)
            if not all(isinstance(item, str) for item in value):
                msg = f"Option {key!r} must contain only strings"
                raise ConfigurationError(msg)
            values[name] = tuple(sorted(value)) if isinstance(value, (set, frozenset)) else tuple(value)
        elif name in _BOOL_KEYS:
            if not isinstance(value, bool):
                msg = f"Option {key!r} must be a bool, got {type(value).__name__}"
                raise ConfigurationError(msg)
            values[name] = value
        elif name in _STR_KEYS:
            if not isinstance(value, str) or not value.strip("/\\"):
                msg = f"Option {key!r} must be a non-empty directory name"
                raise ConfigurationError(msg)
            values[name] = value.strip("/\\")
        else:
            msg = f"Unknown filter option {key!r}"
            raise ConfigurationError(msg)
    return values


def load_options(
    options: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> FilterOptions:
    """Build FilterOptions from an external settings mapping.

    Called once at build start.  When ``enabled`` is not given, filtering
    is enabled iff ``FILTER_PAGES=true`` is set in *environ* (defaults to
    ``os.environ``).

    Raises:
        ConfigurationError: On unknown keys or values of the wrong type.
    """
    values = _canonical(options or {})
    env = os.environ if environ is None else environ

    enabled = values.pop("enabled", None)
    if enabled is None:
        enabled = env.get(ENABLE_ENV_VAR) == "true"

    config_kwargs: dict[str, Any] = {
        name: values.pop(name) for name in list(values) if name in _LIST_KEYS
    }
    config = FilterConfig(
        routing_modes=RoutingModes(
            flat_enabled=values.pop("flat_enabled", True),
            nested_enabled=values.pop("nested_enabled", True),
        ),
        directory_names=DirectoryNames(
            flat_dir=values.pop("flat_dir", "pages"),
            nested_dir=values.pop("nested_dir", "app"),
        ),
        **config_kwargs,
    )
    return FilterOptions(
        config=config,
        enabled=enabled,
        enable_in_dev=values.pop("enable_in_dev", False),
        verbose=values.pop("verbose", False),
    )
