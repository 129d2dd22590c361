"""Logging helpers for stackdown.

Every module logs under the ``stackdown`` namespace. The library itself is
silent: the namespace root carries a NullHandler, and output only appears once
an application (or the CLI, via configure_cli_logging) attaches a handler.

Example:
    >>> from stackdown.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Resolving document")
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "stackdown"

CLI_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Logger for name, placed under the stackdown namespace.

    Example:
        >>> get_logger("mymodule").name
        'stackdown.mymodule'
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


class _StderrHandler(logging.StreamHandler):
    """StreamHandler bound to whatever sys.stderr is at emit time."""

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value: object) -> None:
        pass


def configure_cli_logging(verbose: bool) -> logging.Logger:
    """Send stackdown records to stderr for command-line use.

    Repeated calls adjust the level instead of stacking handlers.

    Args:
        verbose: Emit debug records; otherwise only warnings and errors.

    Returns:
        The namespace root logger.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    handler = next((h for h in root.handlers if isinstance(h, _StderrHandler)), None)
    if handler is None:
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter(CLI_LOG_FORMAT))
        root.addHandler(handler)
    handler.setLevel(level)
    return root
