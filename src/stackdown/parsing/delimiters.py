"""Delimiter rules for inline markup.

Each rule maps a marker character to its canonical width and to the tag pair
emitted for each valid run length.

Thread Safety:
All rules are immutable and safe to share across threads.

Usage:
    >>> rule = rule_for("**")
    >>> rule.tags[2]
    ('<b>', '</b>')

"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Literal, NamedTuple, TypeAlias

DelimiterChar: TypeAlias = Literal["*", "_", "~", "`", "^"]


class DelimiterRule(NamedTuple):
    """How one marker character pairs up.

    Attributes:
        char: The marker character.
        width: Canonical (maximum) run length; longer runs are split.
        tags: Run length -> (opening tag, closing tag). Lengths missing here
            are plain text (a single ``~``).
        reorder: Whether an oversized run may be split in reverse order to
            pair with the nearer opener. Strikethrough runs always split
            front to back.

    """

    char: DelimiterChar
    width: int
    tags: Mapping[int, tuple[str, str]]
    reorder: bool = True

    @property
    def min_length(self) -> int:
        """Shortest run that acts as a delimiter."""
        return min(self.tags)


DELIMITER_RULES: Mapping[str, DelimiterRule] = MappingProxyType(
    {
        "*": DelimiterRule("*", 2, MappingProxyType({2: ("<b>", "</b>"), 1: ("<i>", "</i>")})),
        "_": DelimiterRule("_", 2, MappingProxyType({2: ("<u>", "</u>"), 1: ("<sub>", "</sub>")})),
        "~": DelimiterRule("~", 2, MappingProxyType({2: ("<s>", "</s>")}), reorder=False),
        "`": DelimiterRule("`", 1, MappingProxyType({1: ("<code>", "</code>")})),
        "^": DelimiterRule("^", 1, MappingProxyType({1: ("<sup>", "</sup>")})),
    }
)


def rule_for(token: str) -> DelimiterRule | None:
    """Return the rule token is a delimiter for, or None for plain tokens."""
    if not token:
        return None
    rule = DELIMITER_RULES.get(token[0])
    if rule is None or len(token) < rule.min_length:
        return None
    return rule
