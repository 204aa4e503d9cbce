"""Build plugin — wires filter decisions into a build pipeline.

The pipeline owns the :class:`HookRegistry`; the plugin only taps into
it while installed.  Filtering is skipped entirely when options disable
it, and in development builds unless ``enable_in_dev`` is set.

Usage::

    options = load_options({"excludedPages": ["admin/**"], "enabled": True})
    plugin = PageFilterPlugin(options)
    plugin.install(hooks, BuildContext(dev=False))
    try:
        ...  # run the build; excluded pages resolve to STANDIN_REQUEST
    finally:
        plugin.uninstall()
"""

import logging
import posixpath
from collections.abc import Iterable
from dataclasses import dataclass

from pagesift.build.hooks import HookRegistry, ResolveRequest
from pagesift.build.report import FilterReport
from pagesift.config import FilterOptions
from pagesift.decision import decide
from pagesift.errors import ConfigurationError
from pagesift.paths import normalize
from pagesift.standin import STANDIN_REQUEST, NotFoundStrategy, RenderStandIn, StandIn, build_standin

logger = logging.getLogger("pagesift.build")


@dataclass(frozen=True, slots=True)
class BuildContext:
    """Facts about the build the plugin is installed into."""

    dev: bool = False


class PageFilterPlugin:
    """Replaces excluded pages with a stand-in during module resolution."""

    __slots__ = ("_hooks", "name", "options", "strategy")

    def __init__(
        self,
        options: FilterOptions,
        strategy: NotFoundStrategy | None = None,
        *,
        name: str = "pagesift",
    ) -> None:
        self.options = options
        self.strategy: NotFoundStrategy = strategy if strategy is not None else RenderStandIn()
        self.name = name
        self._hooks: HookRegistry | None = None

    def _log(self, msg: str, *args: object) -> None:
        logger.log(logging.INFO if self.options.verbose else logging.DEBUG, msg, *args)

    @property
    def installed(self) -> bool:
        return self._hooks is not None

    def should_apply(self, context: BuildContext) -> bool:
        """Whether filtering runs for a build in *context*."""
        if not self.options.enabled:
            return False
        return not (context.dev and not self.options.enable_in_dev)

    def install(self, hooks: HookRegistry, context: BuildContext | None = None) -> bool:
        """Tap into *hooks* if filtering applies to this build.

        Returns True when the tap was registered.

        Raises:
            ConfigurationError: If the plugin is already installed, or a
                tap with the same name exists.
        """
        context = context or BuildContext()
        if not self.should_apply(context):
            self._log("Page filtering disabled for this build")
            return False
        if self._hooks is not None:
            msg = f"Plugin {self.name!r} is already installed."
            raise ConfigurationError(msg)

        for error in self.options.config.compiled.invalid_patterns:
            logger.warning("%s", error)

        hooks.tap(self.name, self.before_resolve)
        self._hooks = hooks
        self._log("Page filtering enabled")
        return True

    def uninstall(self) -> None:
        """Remove the tap.  Safe to call when not installed."""
        if self._hooks is not None:
            self._hooks.untap(self.name)
            self._hooks = None

    def before_resolve(self, request: ResolveRequest) -> str | None:
        """Return :data:`STANDIN_REQUEST` for excluded pages, else None."""
        if not request.request:
            return None
        decision = decide(_full_path(request), self.options.config)
        if not decision.excluded:
            return None
        self._log("Filtering out: %s", decision.route)
        return STANDIN_REQUEST

    def standin(self, route: str | None = None) -> StandIn:
        """The artifact the pipeline emits for :data:`STANDIN_REQUEST`."""
        return build_standin(self.strategy, route)

    def run_pass(self, paths: Iterable[str]) -> FilterReport:
        """Decide every discovered path once and report the exclusions."""
        paths = tuple(paths)
        config = self.options.config
        report = FilterReport(paths=paths, decisions=tuple(decide(p, config) for p in paths))
        if report.excluded_count:
            self._log("%s", report.summary())
        return report


def _full_path(request: ResolveRequest) -> str:
    """Join relative requests onto their importing directory."""
    path = normalize(request.request)
    if request.context and path.startswith(("./", "../")):
        return posixpath.normpath(posixpath.join(normalize(request.context), path))
    return path
