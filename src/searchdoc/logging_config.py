"""
Logging configuration for searchdoc.

Build progress is rendered by rich on stderr so it never interleaves with the
summary tables and tree previews the CLI prints on stdout. The level comes
from ``GeneratorConfig.verbosity``, so a TOML file or ``SEARCHDOC_VERBOSITY``
controls it as well as the ``-v``/``-q`` flags.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .exceptions import InvalidConfigError

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Route searchdoc logging through rich at the level ``verbosity`` names.

    Args:
        verbosity: One of ``quiet``, ``normal`` or ``verbose``
        log_file: Optional file that receives the same records in plain text

    Returns:
        The ``searchdoc`` package logger

    Raises:
        InvalidConfigError: If ``verbosity`` is not a known level
    """
    if verbosity not in LEVELS:
        raise InvalidConfigError("verbosity", verbosity, "expected quiet, normal or verbose")
    level = LEVELS[verbosity]
    debugging = level == logging.DEBUG

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            markup=False,
            rich_tracebacks=True,
            tracebacks_show_locals=debugging,
            show_path=debugging,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    # Replaces handlers left by an earlier run in the same process
    logging.basicConfig(format="%(message)s", datefmt="[%X]", handlers=handlers, force=True)

    logger = logging.getLogger("searchdoc")
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the ``searchdoc`` namespace; bare names are prefixed."""
    if name is None:
        return logging.getLogger("searchdoc")
    if not name.startswith("searchdoc"):
        name = f"searchdoc.{name}"
    return logging.getLogger(name)
