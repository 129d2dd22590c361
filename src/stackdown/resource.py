"""Link and image target parsing.

A resource is the ``[alt](src "title")`` tail shared by links and images.
Parsing works on a slice of the parse stack and reports how much of it was
examined so callers can splice the rendered HTML back in.

Thread Safety:
parse_resource is a pure function. Resource is frozen.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

ALT_OPEN = "["
ALT_CLOSE = "]"
TARGET_OPEN = "("
TARGET_CLOSE = ")"
TITLE_QUOTE = '"'


@dataclass(frozen=True, slots=True)
class Resource:
    """Parsed link or image target.

    Attributes:
        src: Target URL, or None if no ``(...)`` part was found
        alt: Bracketed text, or None if the slice did not start with ``[``
        title: Quoted title inside the target, or None
        consumed: Index (relative to the parsed slice) of the last token examined

    """

    src: str | None
    alt: str | None
    title: str | None
    consumed: int


def parse_resource(tokens: Sequence[str], *, trim_src: bool = False) -> Resource | None:
    """Parse ``[alt](src "title")`` from the start of tokens.

    Args:
        tokens: Stack slice, normally starting at ``[``
        trim_src: Strip surrounding whitespace from the parsed src

    Returns:
        Resource, or None if tokens has fewer than 3 elements or the alt
        text is never closed.

    Example:
        >>> parse_resource(["[", "home", "]", "(", "/", ")"])
        Resource(src='/', alt='home', title=None, consumed=5)
    """
    if len(tokens) < 3:
        return None

    src: str | None = None
    alt: str | None = None
    title: str | None = None
    pos = 0

    if tokens[0] == ALT_OPEN:
        pos = 1
        parts: list[str] = []
        while pos < len(tokens):
            if tokens[pos] == ALT_CLOSE:
                alt = "".join(parts)
                break
            parts.append(tokens[pos])
            pos += 1
        if alt is None:
            return None

    pos += 1
    if pos < len(tokens) and tokens[pos] == TARGET_OPEN:
        pos += 1
        in_title = False
        parts = []
        while pos < len(tokens):
            token = tokens[pos]
            if token == TARGET_CLOSE:
                if not in_title:
                    src = "".join(parts)
                break
            if token == TITLE_QUOTE:
                if not in_title:
                    src = "".join(parts)
                    parts = []
                    in_title = True
                    pos += 1
                    continue
                title = "".join(parts)
                pos += 1
                break
            parts.append(token)
            pos += 1

    if trim_src and src is not None:
        src = src.strip()

    return Resource(src=src, alt=alt, title=title, consumed=pos)
