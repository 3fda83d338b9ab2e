"""Logging setup.

Records go to stderr through Rich so they never mix with the demo output,
which is written to stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "creational-demos"


def configure_logging(level: str | int = "WARNING") -> None:
    """Install (once) a `RichHandler` on the package logger and set its level."""

    logger = logging.getLogger("creational_demos")
    logger.setLevel(level)

    if any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
