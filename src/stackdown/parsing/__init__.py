"""Resolution subsystem for stackdown.

Provides the two resolvers that rewrite the parse stack:
- `InlineResolver`: emphasis, code, superscript and links within a line
- `BlockResolver`: headings, block images, blockquotes and paragraphs

Public API:
resolve_inline: Resolve one line's tokens into HTML fragments
resolve_document: Resolve a whole token list into an HTML string

"""

from stackdown.parsing.blocks import BlockResolver, resolve_document
from stackdown.parsing.delimiters import DELIMITER_RULES, DelimiterRule, rule_for
from stackdown.parsing.inline import InlineResolver, resolve_inline

__all__ = [
    "BlockResolver",
    "DELIMITER_RULES",
    "DelimiterRule",
    "InlineResolver",
    "resolve_document",
    "resolve_inline",
    "rule_for",
]
