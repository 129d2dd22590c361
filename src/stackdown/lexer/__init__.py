"""Tokenizer for the stackdown markdown dialect.

Architecture:
lexer/
├── __init__.py          # Re-exports Tokenizer, tokenize, split_fixed
├── core.py              # Tokenizer class, tokenize, split_fixed
└── charsets.py          # Special-character set and token classification

Usage:
    >>> from stackdown.lexer import tokenize
    >>> tokenize("# Hello\\n")
    ['#', ' Hello', '\\n']

"""

from stackdown.lexer.charsets import (
    SPECIAL_CHARS,
    is_blank,
    is_char_reference,
    is_literal_run,
    is_marker_run,
)
from stackdown.lexer.core import Tokenizer, split_fixed, tokenize

__all__ = [
    "SPECIAL_CHARS",
    "Tokenizer",
    "is_blank",
    "is_char_reference",
    "is_literal_run",
    "is_marker_run",
    "split_fixed",
    "tokenize",
]
