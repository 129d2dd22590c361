"""
stackdown: a small markdown dialect rendered by stack reduction.

Converts a restricted markdown dialect into HTML fragments with a three-stage
pipeline: tokenizer, inline resolver, block resolver. No AST is built; the
resolvers rewrite a flat stack of strings in place.

Quick Start:
    >>> from stackdown import render
    >>> render("# Hello **World**\\n")
    '<h1> Hello <b>World</b></h1>\\n'

    >>> # Or keep a configured processor around
    >>> from stackdown import Markdown
    >>> md = Markdown(soft_break="<br />")
    >>> md("x\\n\\na\\nb\\n")
    '<p>x</p>\\n<p>a<br />b</p>\\n'

Dialect:
    *italic*  **bold**  _sub_  __underline__  ~~strike~~  `code`  ^sup^
    # heading (up to ######)
    [text](url "title")   inline link
    ![alt](src "title")   image, on a line of its own
    \\* escapes any character as a numeric character reference
"""

from collections.abc import Iterable
from dataclasses import replace
from time import perf_counter

from stackdown.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from stackdown.errors import ConfigError, InputError, StackdownError
from stackdown.lexer import Tokenizer, split_fixed, tokenize
from stackdown.parsing import BlockResolver, InlineResolver, resolve_document, resolve_inline
from stackdown.profiling import (
    RenderAccumulator,
    ResolveStats,
    get_render_accumulator,
    profiled_render,
)
from stackdown.resource import Resource, parse_resource
from stackdown.stack import ParseStack

__version__ = "0.1.0"


def render(source: str) -> str:
    """Render markdown source to HTML under the active RenderConfig.

    Args:
        source: Markdown source text

    Returns:
        HTML string. Malformed markup is kept as literal text.

    Raises:
        InputError: If source is not a str.

    Example:
        >>> render("[text](http://x \\"T\\")\\n")
        '<p><a href="http://x" title="T">text</a></p>\\n'
    """
    if not isinstance(source, str):
        raise InputError(f"expected str, got {type(source).__name__}")

    config = get_render_config()
    if config.terminate_last_line and not source.endswith("\n"):
        source += "\n"

    acc = get_render_accumulator()
    if acc is None:
        tokens = Tokenizer(source, config.text_transformer).tokenize()
        return BlockResolver(tokens, config).resolve()

    started = perf_counter()
    tokens = Tokenizer(source, config.text_transformer).tokenize()
    tokenized = perf_counter()
    resolver = BlockResolver(tokens, config)
    html = resolver.resolve()
    acc.record_render(
        source_length=len(source),
        token_count=len(tokens),
        tokenize_ms=(tokenized - started) * 1000,
        resolve_ms=(perf_counter() - tokenized) * 1000,
        stats=resolver.stats,
    )
    return html


class Markdown:
    """High-level processor holding one RenderConfig.

    Usage:
        >>> md = Markdown(max_heading_level=3)
        >>> md("##### Deep\\n")
        '<h3> Deep</h3>\\n'

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to share one
        instance across threads.

    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None, **options: object) -> None:
        """Initialize Markdown processor.

        Args:
            config: Base configuration (defaults to RenderConfig())
            **options: RenderConfig fields overriding the base configuration

        Raises:
            ConfigError: If an option value is invalid.
            TypeError: If an option is not a RenderConfig field.
        """
        self._config = replace(config or RenderConfig(), **options)

    @property
    def config(self) -> RenderConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Render source with this processor's configuration.

        The configuration active before the call is restored afterwards.

        Raises:
            InputError: If source is not a str.
        """
        with render_config_context(self._config):
            return render(source)

    def render_many(self, sources: Iterable[str]) -> list[str]:
        """Render several independent sources.

        Sets config once, renders all, then restores the enclosing config.
        No state is carried from one source to the next.

        Example:
            >>> Markdown().render_many(["*a*\\n", "**b**\\n"])
            ['<p><i>a</i></p>\\n', '<p><b>b</b></p>\\n']
        """
        with render_config_context(self._config):
            return [render(source) for source in sources]


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "render",
    "Markdown",
    # Pipeline stages
    "tokenize",
    "split_fixed",
    "parse_resource",
    "resolve_inline",
    "resolve_document",
    "Tokenizer",
    "InlineResolver",
    "BlockResolver",
    "ParseStack",
    "Resource",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Profiling
    "RenderAccumulator",
    "ResolveStats",
    "get_render_accumulator",
    "profiled_render",
    # Errors
    "StackdownError",
    "InputError",
    "ConfigError",
]
