"""Logging configuration for the up-web-vue CLI."""

from __future__ import annotations

import logging
import os

from up_web_vue.cli.console import get_rich_console
from up_web_vue.exceptions import EnvironmentError

DEBUG_ENV_VAR: str = "UP_WEB_VUE_DEBUG"
LOGGER_NAME: str = "up_web_vue"


def _resolve_level(verbose: bool) -> int:
    if os.environ.get(DEBUG_ENV_VAR):
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the ``up_web_vue`` logger.

    Log levels:
    - Normal: only warnings/errors shown
    - Verbose (--verbose / -v): INFO
    - Debug (UP_WEB_VUE_DEBUG=1): DEBUG, including parsed argv and the
      sequence result, with source paths
    """
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc

    level = _resolve_level(verbose)
    handler = RichHandler(
        console=get_rich_console(),
        show_time=verbose,
        show_path=level == logging.DEBUG,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False
    return logger
