"""Character classes shared by the tokenizer and the resolvers.

Tokens are plain strings; their kind is structural. A marker run is one or
more repetitions of a single special character, a literal run never contains
one. Escaped characters become literal numeric character references.

Thread Safety:
All values are immutable module constants.

"""

from __future__ import annotations

SPECIAL_CHARS: frozenset[str] = frozenset('#*_~`^![]()"|:>.\n')

ESCAPE_CHAR = "\\"

NEWLINE = "\n"

BLANK_CHARS: frozenset[str] = frozenset(" \t")


def is_marker_run(token: str) -> bool:
    """Check if token is a run of one repeated special character."""
    return bool(token) and token[0] in SPECIAL_CHARS and token == token[0] * len(token)


def is_char_reference(token: str) -> bool:
    """Check if token is an escape reference such as ``&#42;``."""
    return token.startswith("&#") and token.endswith(";")


def is_literal_run(token: str) -> bool:
    """Check if token is plain text: no special characters, or an escape reference."""
    return is_char_reference(token) or not any(ch in SPECIAL_CHARS for ch in token)


def is_blank(token: str) -> bool:
    """Check if token is composed entirely of spaces and tabs.

    The empty string counts as blank.
    """
    return all(ch in BLANK_CHARS for ch in token)


def char_reference(ch: str) -> str:
    """Decimal numeric character reference for ch (e.g. ``&#42;`` for ``*``)."""
    return f"&#{ord(ch)};"
