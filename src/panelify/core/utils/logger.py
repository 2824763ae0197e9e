"""Namespaced logger factory.

Example:
    >>> from panelify.core.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Opened document")
"""

from __future__ import annotations

import logging


ROOT_LOGGER = "panelify"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
HANDLER_NAME = "panelify-stderr"


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger whose name is under the "panelify." namespace."""
    if not (name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}.")):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str = "WARNING") -> None:
    """Route the panelify logger to the current stderr at the given level, replacing any earlier handler."""
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level.upper())
    for handler in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
