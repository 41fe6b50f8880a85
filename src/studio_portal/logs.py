# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "studio_portal"


def configure_logging(level: str = "WARNING") -> None:
    """Route the package's log records to stderr through rich."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level.upper())

    if any(isinstance(handler, RichHandler) for handler in logger.handlers):
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
