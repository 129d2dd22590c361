"""Single-pass tokenizer for the stackdown dialect.

Scans the source one character at a time with a single pending token under
construction. Every input string produces a token list; there are no error
states.

Thread Safety:
Tokenizer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable

from stackdown.config import get_render_config
from stackdown.lexer.charsets import ESCAPE_CHAR, SPECIAL_CHARS, char_reference


class Tokenizer:
    """Character-level tokenizer producing literal and marker runs.

    Usage:
            >>> Tokenizer("**bold** text\\n").tokenize()
        ['**', 'bold', '**', ' text', '\\n']

    Thread Safety:
        Tokenizer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_tokens",
        "_current",
        "_escape_next",
        "_text_transformer",
    )

    def __init__(
        self,
        source: str,
        text_transformer: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize tokenizer with source text.

        Args:
            source: Markdown source text
            text_transformer: Optional callback applied to each literal run.
                Defaults to the active RenderConfig's transformer.
        """
        self._source = source
        self._tokens: list[str] = []
        self._current = ""
        self._escape_next = False
        if text_transformer is None:
            text_transformer = get_render_config().text_transformer
        self._text_transformer = text_transformer

    def tokenize(self) -> list[str]:
        """Split the source into tokens.

        Returns:
            List of literal runs, marker runs and escape references. Empty
            source yields ``[""]``.

        Complexity: O(n) where n = len(source)
        """
        for ch in self._source:
            if self._escape_next:
                self._flush()
                self._tokens.append(char_reference(ch))
                self._escape_next = False
            elif ch == ESCAPE_CHAR:
                self._escape_next = True
            elif not self._current:
                self._current = ch
            elif ch in SPECIAL_CHARS:
                if self._current[-1] == ch:
                    self._current += ch
                else:
                    self._flush()
                    self._current = ch
            elif self._current[-1] in SPECIAL_CHARS:
                self._flush()
                self._current = ch
            else:
                self._current += ch

        if self._current:
            self._flush()
        elif not self._tokens:
            self._tokens.append("")
        return self._tokens

    def _flush(self) -> None:
        """Emit the pending token, if any."""
        token = self._current
        if not token:
            return
        if self._text_transformer is not None and token[0] not in SPECIAL_CHARS:
            token = self._text_transformer(token)
        self._tokens.append(token)
        self._current = ""


def tokenize(source: str) -> list[str]:
    """Tokenize source under the active RenderConfig.

    Example:
        >>> tokenize("\\\\*not emphasis*")
        ['&#42;', 'not emphasis', '*']
    """
    return Tokenizer(source).tokenize()


def split_fixed(s: str, width: int) -> list[str]:
    """Split s into consecutive chunks of exactly width characters.

    The final chunk holds the remainder (1..width characters). An empty
    string yields a single empty chunk.

    Example:
        >>> split_fixed("*****", 2)
        ['**', '**', '*']
    """
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")
    return [s[i : i + width] for i in range(0, len(s), width)] or [""]
