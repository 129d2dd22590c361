"""ContextVar-based render configuration for stackdown.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per Markdown instance (or per render() call) and read by
the tokenizer and resolvers when they are constructed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and concurrent conversions never see each other's
    settings.

Usage:
    # In Markdown class
    md = Markdown(soft_break="<br />")
    html = md("a\\nb\\n")  # Sets config internally via ContextVar

    # Direct resolver usage (advanced)
    from stackdown.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(max_heading_level=3)):
        html = resolve_document(tokenize(source))

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from stackdown.errors import ConfigError


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        soft_break: String pushed in place of a single newline inside a paragraph
        max_heading_level: Highest heading level emitted (1-6); longer ``#`` runs
            are capped to it
        trim_link_targets: Strip surrounding whitespace from link and image sources
        terminate_last_line: Append a newline to input that lacks one, so the
            final line is resolved into a block
        text_transformer: Optional callback applied to every literal text run

    """

    soft_break: str = " "
    max_heading_level: int = 6
    trim_link_targets: bool = True
    terminate_last_line: bool = False
    text_transformer: Callable[[str], str] | None = None

    def __post_init__(self) -> None:
        if not 1 <= self.max_heading_level <= 6:
            raise ConfigError(
                "max_heading_level",
                f"must be between 1 and 6, got {self.max_heading_level}",
            )
        if self.text_transformer is not None and not callable(self.text_transformer):
            raise ConfigError("text_transformer", "must be callable or None")

    @classmethod
    def from_dict(cls, config_dict: dict) -> RenderConfig:
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                RenderConfig attribute names.

        Returns:
            New RenderConfig instance with values from dict.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "max_heading_level": 3,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.max_heading_level
            3

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Args:
        config: RenderConfig instance to use for this context.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the module-level default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: RenderConfig to use within the context.

    Yields:
        None

    Example:
        >>> with render_config_context(RenderConfig(soft_break="<br />")):
        ...     html = render("x\\n\\na\\nb\\n")
        >>> # Automatically reset to previous config

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
