"""Route classification — is a path a filterable route file at all?

Classification is independent of matching: a route file may still be
kept by the matcher.  Anything that is not a route file is always kept.
"""

from pagesift.config import FilterConfig
from pagesift.paths import normalize
from pagesift.routing.layout import (
    API_SEGMENT,
    FLAT_RESERVED,
    NESTED_SIBLINGS,
    PAGE_BASENAME,
    basename,
    has_source_extension,
    remainder_after,
    segment_index,
)


def _flat_dirs(config: FilterConfig) -> list[str]:
    dirs = [normalize(alias).strip("/") for alias in config.flat_aliases]
    dirs.append(normalize(config.directory_names.flat_dir).strip("/"))
    return dirs


def nested_remainder(path: str, config: FilterConfig) -> str | None:
    """Path below the nested routing directory, if that convention applies.

    When a flat directory segment occurs earlier in *path*, the file
    belongs to the flat convention and this returns None.
    """
    if not config.routing_modes.nested_enabled:
        return None
    nested_dir = normalize(config.directory_names.nested_dir).strip("/")
    nested_at = segment_index(path, nested_dir)
    if nested_at is None:
        return None
    if config.routing_modes.flat_enabled:
        for flat_dir in _flat_dirs(config):
            flat_at = segment_index(path, flat_dir)
            if flat_at is not None and flat_at < nested_at:
                return None
    return path[nested_at + len(nested_dir) + 1 :]


def flat_remainder(path: str, config: FilterConfig) -> str | None:
    """Path below a flat alias prefix or the flat routing directory."""
    if not config.routing_modes.flat_enabled:
        return None
    for flat_dir in _flat_dirs(config):
        remainder = remainder_after(path, flat_dir)
        if remainder is not None:
            return remainder
    return None


def is_route_file(normalized_path: str, config: FilterConfig) -> bool:
    """True when *normalized_path* denotes a route under an active convention.

    Nested files count only when named ``page``; layout, loading, error,
    not-found, template, and default siblings never do.  Flat files count
    unless they sit under ``api/`` or carry a reserved name such as
    ``_app`` or ``404``.
    """
    if not has_source_extension(normalized_path):
        return False

    name = basename(normalized_path)

    if nested_remainder(normalized_path, config) is not None:
        if name in NESTED_SIBLINGS:
            return False
        if name == PAGE_BASENAME:
            return True

    remainder = flat_remainder(normalized_path, config)
    if remainder is None:
        return False
    if remainder.split("/", 1)[0] == API_SEGMENT:
        return False
    return name not in FLAT_RESERVED
