"""Logging configuration for staff-directory.

Log records go to stderr through :class:`rich.logging.RichHandler` so
they never interleave with the directory listings printed on stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER: str = "staff_directory"


def configure_logging(*, verbose: bool = False) -> None:
    """Configure handlers and levels for the package logger.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
    """
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(
        logging.DEBUG if verbose else logging.WARNING,
    )
