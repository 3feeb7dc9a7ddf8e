"""
Logging helpers for vocabulary.

Log records go to stderr so that prompts written to stdout stay
readable. With colorized output the records are rendered by rich.
"""

from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(debug: bool = False, colorize: bool = False) -> None:
    """
    Configure the root logger.

    debug == False -> INFO
    debug == True  -> DEBUG
    """

    level = logging.DEBUG if debug else logging.INFO

    handler: logging.Handler
    if colorize:
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=debug,
        )
        fmt = "%(name)s: %(message)s"
    else:
        handler = logging.StreamHandler(sys.stderr)
        fmt = "%(levelname)s %(name)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=fmt,
        handlers=[handler],
        force=True,
    )
