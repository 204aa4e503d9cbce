"""Reversible resolve hooks owned by the build pipeline.

Taps are registered by name and removed by name, so a plugin can be
installed for one build and uninstalled afterwards without touching any
process-wide state.

Usage::

    hooks = HookRegistry()
    hooks.tap("my-plugin", lambda req: None)
    resolved = hooks.resolve(ResolveRequest("./pages/about.js", "/site"))
    hooks.untap("my-plugin")
"""

from collections.abc import Callable
from dataclasses import dataclass, replace

from pagesift.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ResolveRequest:
    """A module request about to be resolved.

    Attributes:
        request: The requested module path.
        context: Directory of the importing module, if known.
        original: The request before any tap replaced it.
    """

    request: str
    context: str | None = None
    original: str | None = None

    @property
    def replaced(self) -> bool:
        return self.original is not None and self.original != self.request


# A tap returns a replacement request, or None to leave it unchanged
type ResolveTap = Callable[[ResolveRequest], str | None]


class HookRegistry:
    """Ordered, named ``before_resolve`` taps."""

    __slots__ = ("_taps",)

    def __init__(self) -> None:
        self._taps: dict[str, ResolveTap] = {}

    def tap(self, name: str, fn: ResolveTap) -> None:
        """Register *fn* under *name*.

        Raises:
            ConfigurationError: If a tap named *name* is already registered.
        """
        if name in self._taps:
            msg = f"A resolve hook named {name!r} is already installed."
            raise ConfigurationError(msg)
        self._taps[name] = fn

    def untap(self, name: str) -> None:
        """Remove the tap named *name*.  Unknown names are ignored."""
        self._taps.pop(name, None)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._taps)

    def __contains__(self, name: object) -> bool:
        return name in self._taps

    def resolve(self, request: ResolveRequest) -> ResolveRequest:
        """Run every tap in registration order and return the final request."""
        current = request
        for fn in list(self._taps.values()):
            replacement = fn(current)
            if replacement is not None and replacement != current.request:
                current = replace(
                    current,
                    request=replacement,
                    original=current.original or current.request,
                )
        return current
