"""Utility modules for stackdown.

Provides:
- logger: get_logger for namespaced logging, configure_cli_logging for the CLI
"""

from stackdown.utils.logger import configure_cli_logging, get_logger

__all__ = [
    "configure_cli_logging",
    "get_logger",
]
