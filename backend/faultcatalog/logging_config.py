"""Logging setup for the command-line entry point."""
from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to stderr at ``level``.

    Library modules only create loggers; the CLI is the one place that
    decides where records go.
    """
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger().setLevel(level.upper())
