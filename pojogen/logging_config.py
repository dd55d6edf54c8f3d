"""
Logging setup for pojogen.

Modules obtain their logger through get_logger(__name__). The library never
installs handlers on import; applications call configure_logging().
"""

import logging
from typing import Optional

from rich.logging import RichHandler

ROOT_LOGGER_NAME = "pojogen"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the pojogen namespace."""
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure package logging with a Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Replace a previously installed Rich handler instead of stacking them
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)


logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())
