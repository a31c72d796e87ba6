# SPDX-License-Identifier: MIT

import logging

from rich.logging import RichHandler


def configure_logging(level: str) -> None:
    """Route the package loggers through rich at the configured level."""
    handler = RichHandler(show_path=False, rich_tracebacks=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger("tandem")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level.upper())
    package_logger.propagate = False
