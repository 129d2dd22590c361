"""Exception classes for stackdown.

The conversion core is total over ``str`` input and never raises: malformed
markup degrades to literal text. These exceptions belong to the outer surface
(the public entry points, configuration and the command line).
"""

from __future__ import annotations


class StackdownError(Exception):
    """Base exception for all stackdown errors.

    Subclass this for specific error categories.
    """

    pass


class InputError(StackdownError):
    """Input that cannot be converted.

    Raised for non-``str`` input and for sources the command line cannot read.
    """

    def __init__(self, message: str, source_file: str | None = None) -> None:
        """Initialize input error with an optional source location.

        Args:
            message: Error description
            source_file: Path of the offending source (optional)
        """
        self.message = message
        self.source_file = source_file

        location = f"{source_file}: " if source_file else ""
        super().__init__(f"{location}{message}")


class ConfigError(StackdownError):
    """Invalid render configuration value."""

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the RenderConfig field
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Config '{field}': {message}")
