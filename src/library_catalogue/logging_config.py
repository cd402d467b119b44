"""Logging setup for programs built on the library catalogue.

Library modules only create module-level loggers. Applications (the demo
harness, tests) decide where records go by calling ``configure_logging``.
"""

import logging
import sys

from .config import CatalogueConfig, get_config


def configure_logging(config: CatalogueConfig | None = None) -> None:
    """Send log records to stderr using the configured level and format.

    stdout is left to the caller's own output.
    """
    config = config or get_config()
    logging.basicConfig(
        level=config.effective_log_level,
        format=config.log_format,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
    logging.getLogger(__name__).debug(
        "Logging configured for %s at %s", config.library_name, config.effective_log_level
    )
