"""Build a FilterConfig from CLI filter flags."""

import argparse
import logging
import sys

from pagesift.config import FilterConfig, load_options
from pagesift.errors import ConfigurationError

logger = logging.getLogger("pagesift.cli")


def config_from_args(args: argparse.Namespace) -> FilterConfig:
    """Translate filter flags through ``load_options`` so validation is shared.

    Prints ``Error: ...`` and exits 1 on invalid options.
    """
    try:
        options = load_options(
            {
                "includedPages": args.include,
                "excludedPages": args.exclude,
                "excludePatterns": args.exclude_pattern,
                "pagesDir": args.pages_dir,
                "appDir": args.app_dir,
                "supportPagesRouter": not args.no_pages_router,
                "supportAppRouter": not args.no_app_router,
                "enabled": True,
                "verbose": args.verbose,
            }
        )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    for error in options.config.compiled.invalid_patterns:
        logger.warning("%s", error)
    return options.config
