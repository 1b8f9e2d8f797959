"""Logging setup.

All loggers live under the `catr` namespace and render through Rich on
standard error, so standard output only ever carries emitted lines.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "catr"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Attach a stderr RichHandler to the `catr` logger (once) and set its level."""

    logger = logging.getLogger(ROOT_LOGGER)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
            rich_tracebacks=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
