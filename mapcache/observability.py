"""Logging setup.

Caches log at DEBUG level under the ``mapcache`` logger hierarchy
(``mapcache.cache.<name>``), with structured fields passed in ``extra``.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config


def setup_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Configure logging for the package.

    Args:
        config: Logging configuration. Defaults to the global config.
    """
    config = config or get_config().observability
    numeric_level = getattr(logging, config.level.upper(), logging.INFO)
    logging.basicConfig(level=numeric_level, format=config.format)
    logging.getLogger("mapcache").setLevel(numeric_level)
