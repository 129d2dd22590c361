"""Block resolution: headings, block images, blockquotes and paragraphs.

Tokens are pushed onto the parse stack until a newline marker arrives. The
newline closes the current line: its first non-blank element decides the
block kind, the line is handed to the inline resolver, and the result is
reduced back into the stack.

Thread Safety:
BlockResolver instances are single-use and own their stack.

"""

from __future__ import annotations

from collections.abc import Sequence

from stackdown.config import RenderConfig, get_render_config
from stackdown.lexer.charsets import NEWLINE, is_blank
from stackdown.parsing.inline import IMAGE_MARKER, InlineResolver
from stackdown.profiling import ResolveStats
from stackdown.resource import parse_resource
from stackdown.stack import ParseStack
from stackdown.utils.logger import get_logger

logger = get_logger(__name__)

HEADING_MARKER = "#"
QUOTE_MARKER = ">"

# '!', '[', alt, ']', '(', src, ')' with the line's first slot
MIN_IMAGE_SLOTS = 5


class BlockResolver:
    """Line-oriented stack resolver producing the final HTML.

    Usage:
            >>> BlockResolver(["#", " Title", "\\n"]).resolve()
        '<h1> Title</h1>\\n'

    Thread Safety:
        Single-use. Reads RenderConfig from the ContextVar at construction.
        stats covers this resolver and every inline resolver it ran.

    """

    __slots__ = ("_tokens", "_stack", "_config", "stats")

    def __init__(self, tokens: Sequence[str], config: RenderConfig | None = None) -> None:
        self._tokens = tokens
        self._stack = ParseStack()
        self._config = config or get_render_config()
        self.stats = ResolveStats()

    def resolve(self) -> str:
        """Resolve every line and concatenate the stack."""
        stack = self._stack
        last = len(self._tokens) - 1

        for i, token in enumerate(self._tokens):
            if not token.startswith(NEWLINE):
                stack.push(token)
                continue
            if not stack:
                continue

            line_end = stack.rfind_containing(NEWLINE)
            first = self._first_content_index(line_end)
            if first is None:
                continue

            head = stack[first]
            if head.startswith(HEADING_MARKER):
                self._resolve_heading(line_end, first)
            elif head == IMAGE_MARKER:
                if not self._resolve_image(line_end, first):
                    continue
            elif head == QUOTE_MARKER:
                # Blockquote lines pass through untransformed.
                pass
            elif line_end != -1 and len(token) == 1 and i != last:
                stack.push(self._config.soft_break)
                continue
            else:
                self._resolve_paragraph(first)

            stack.push(NEWLINE)
            self.stats.blocks += 1

        self.stats.absorb_stack(stack.reductions, stack.peak_depth)
        return stack.build()

    def _first_content_index(self, line_end: int) -> int | None:
        """Index of the first non-blank element after line_end, or None."""
        for j in range(line_end + 1, len(self._stack)):
            if not is_blank(self._stack[j]):
                return j
        return None

    def _resolve_inline_from(self, index: int) -> None:
        inline = InlineResolver(self._stack[index:], self._config, self.stats).resolve()
        self._stack.replace_from(index, inline)

    def _resolve_heading(self, line_end: int, first: int) -> None:
        level = min(len(self._stack[first]), self._config.max_heading_level)
        self._stack[first] = f"<h{level}>"
        self._stack.push(f"</h{level}>")
        self._resolve_inline_from(first)
        self._stack.reduce(line_end + 1)

    def _resolve_image(self, line_end: int, first: int) -> bool:
        """Render a block image starting at first.

        Both alt and src are required. Inline content is not resolved.

        Returns:
            False if the line is not a valid image and was left untouched.
        """
        stack = self._stack
        if len(stack) - line_end < MIN_IMAGE_SLOTS:
            logger.debug("Ignoring image line: too few tokens")
            return False

        img = parse_resource(stack[first + 1 :], trim_src=self._config.trim_link_targets)
        if img is None or img.src is None or img.alt is None:
            logger.debug("Ignoring image line: missing alt text or source")
            return False

        title = img.title if img.title is not None else img.alt
        # +2 covers the '!' and the last examined token
        stack.splice(
            first,
            img.consumed + 2,
            [f'<img src="{img.src}" alt="{img.alt}" title="{title}" />'],
        )
        return True

    def _resolve_paragraph(self, first: int) -> None:
        self._stack.insert(first, "<p>")
        self._stack.push("</p>")
        self._resolve_inline_from(first)
        self._stack.reduce(first)


def resolve_document(tokens: Sequence[str]) -> str:
    """Resolve a full token list into HTML under the active RenderConfig.

    Example:
        >>> resolve_document(["Hello ", "*", "World", "*", "\\n"])
        '<p>Hello <i>World</i></p>\\n'
    """
    return BlockResolver(tokens).resolve()
