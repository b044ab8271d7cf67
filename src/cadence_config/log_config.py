"""Logging setup shared by every entry point."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure console logging for the cadence packages.

    ``level`` overrides the configured ``log_level``.
    """
    log_level_str = (level or get_settings().log_level).upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("cadence").setLevel(log_level)
    logging.getLogger("cadence_config").setLevel(log_level)
