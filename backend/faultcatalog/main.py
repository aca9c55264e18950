# backend/faultcatalog/main.py
from __future__ import annotations

"""
Command-line entry point.

This module depends on:
- faultcatalog.config.get_settings for configuration
- faultcatalog.logging_config for log routing
- faultcatalog.services.runner.run_demonstrations for the catalog itself

The exit status is 0 whenever the catalog ran, however many failures
were handled along the way. Only a configuration error exits non-zero.
"""

import argparse
import sys
from typing import Sequence

from faultcatalog import __version__
from faultcatalog.config import get_settings
from faultcatalog.errors import ConfigurationError
from faultcatalog.logging_config import LOG_LEVELS, configure_logging
from faultcatalog.services.diagnostics.dispatcher import format_json, format_report
from faultcatalog.services.runner import run_demonstrations

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="faultcatalog",
        description="Trigger each catalogued failure and print how it was handled.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=None,
        help="Override FAULTCATALOG_LOG_LEVEL for this run.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per handled failure instead of report lines.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ConfigurationError as exc:
        print(f"faultcatalog: {exc}", file=sys.stderr)
        if exc.hint:
            print(f"hint: {exc.hint}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_logging(args.log_level or settings.log_level)

    run_demonstrations(render=format_json if args.json else format_report)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
