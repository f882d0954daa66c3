"""Logging setup for command line runs.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are installed here, once, by the CLI.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PLAIN_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO", fmt: str = "console", console: Console | None = None) -> None:
    """Install a root handler.

    Args:
        level: Logging level name.
        fmt: ``console`` for Rich output, ``plain`` for timestamped text.
        console: Rich console to log to (default: stderr).
    """
    if fmt == "console":
        handler: logging.Handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)
