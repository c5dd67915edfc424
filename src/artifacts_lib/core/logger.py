# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from .config import CFG


def get_logger(name: str, show_time: bool = False) -> logging.Logger:
    """
    Return a logger writing to standard error through rich.

    The level is DEBUG if the debug environment variable is set, INFO otherwise.
    Calling this repeatedly for the same name refreshes the level of the
    existing handler instead of attaching another one.

    Args:
        name (str): Name of the logger, usually `__name__`.
        show_time (bool): Prefix records with a timestamp. Always on in debug mode.

    Returns:
        logging.Logger: The configured logger.
    """
    logger = logging.getLogger(name)

    debug_mode = os.environ.get(CFG.env_vars.debug_mode) is not None
    level = logging.DEBUG if debug_mode else logging.INFO
    logger.setLevel(level)
    logger.propagate = False

    for existing in logger.handlers:
        if isinstance(existing, RichHandler):
            existing.setLevel(level)
            return logger

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        show_level=True,
        show_time=show_time or debug_mode,
        log_time_format=CFG.date_formats.standard,
        tracebacks_width=None,
        tracebacks_code_width=None,
    )
    handler.setLevel(level)
    logger.addHandler(handler)

    return logger
