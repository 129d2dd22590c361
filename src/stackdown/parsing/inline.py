"""Inline resolution: emphasis, code, superscript and links.

A single left-to-right pass over the tokens. Every delimiter either closes
the nearest identical marker already on the stack or is pushed as a
candidate opener. Closing a pair reduces everything above the opener into one
string, so no recursion or tree is needed.

Oversized runs (``*****``) are split into canonical-width chunks. The chunk
order is reversed when the last chunk pairs with a deeper opener than the
first, so the split favours the nearer delimiter and crossed spans stay rare.
Strikethrough runs are always split front to back.

Thread Safety:
InlineResolver instances are single-use and own their stack.

"""

from __future__ import annotations

from collections.abc import Sequence

from stackdown.config import RenderConfig, get_render_config
from stackdown.lexer.core import split_fixed
from stackdown.parsing.delimiters import DelimiterRule, rule_for
from stackdown.profiling import ResolveStats
from stackdown.resource import ALT_CLOSE, ALT_OPEN, TARGET_CLOSE, TARGET_OPEN, parse_resource
from stackdown.stack import ParseStack
from stackdown.utils.logger import get_logger

logger = get_logger(__name__)

IMAGE_MARKER = "!"


class InlineResolver:
    """Stack reduction over one line's tokens.

    Usage:
            >>> InlineResolver(["*", "a", "*"]).resolve()
        ['<i>a</i>']

    Thread Safety:
        Single-use. The token list is copied; the caller's list is untouched.

    """

    __slots__ = ("_pending", "_stack", "_config", "stats")

    def __init__(
        self,
        tokens: Sequence[str],
        config: RenderConfig | None = None,
        stats: ResolveStats | None = None,
    ) -> None:
        self._pending: list[str] = list(tokens)
        self._stack = ParseStack()
        self._config = config or get_render_config()
        self.stats = stats if stats is not None else ResolveStats()

    def resolve(self) -> list[str]:
        """Resolve all tokens.

        Returns:
            The final stack. Matched spans are reduced to single fragments;
            unmatched markers remain as their literal text.
        """
        i = 0
        while i < len(self._pending):
            token = self._pending[i]
            rule = rule_for(token)
            if rule is not None:
                self._resolve_delimiter(rule, i)
            elif token == ALT_CLOSE or token == TARGET_CLOSE:
                self._stack.push(token)
                if not (token == ALT_CLOSE and self._peek(i) == TARGET_OPEN):
                    self._resolve_link()
            else:
                self._stack.push(token)
            i += 1
        self.stats.absorb_stack(self._stack.reductions, self._stack.peak_depth)
        return self._stack.to_list()

    def _peek(self, i: int) -> str | None:
        """Token after index i, or None at the end."""
        if i + 1 < len(self._pending):
            return self._pending[i + 1]
        return None

    def _resolve_delimiter(self, rule: DelimiterRule, i: int) -> None:
        """Match or push the delimiter at pending index i."""
        stack = self._stack
        token = self._pending[i]

        if len(token) > rule.width:
            chunks = split_fixed(token, rule.width)
            self.stats.splits += 1
            if rule.reorder and stack.rfind(chunks[-1]) > stack.rfind(chunks[0]):
                logger.debug("Reversing split of %r to pair with the nearer opener", token)
                chunks.reverse()
            self._pending[i : i + 1] = chunks
            token = chunks[0]
            if rule_for(token) is None:
                stack.push(token)
                return

        match = stack.rfind(token)
        if match == -1:
            stack.push(token)
            return

        opening, closing = rule.tags[len(token)]
        stack[match] = opening
        stack.push(closing)
        stack.reduce(match)

    def _resolve_link(self) -> None:
        """Render the link ending at the top of the stack, if there is one."""
        stack = self._stack
        match = stack.rfind(ALT_OPEN)
        if match == -1:
            return
        if match != 0 and stack[match - 1] == IMAGE_MARKER:
            # Images are finished at block level.
            return

        link = parse_resource(stack[match:], trim_src=self._config.trim_link_targets)
        if link is None or (link.src is None and link.alt is None):
            return

        href = link.src if link.src else link.alt
        if link.title is not None:
            title = link.title
        else:
            title = link.src if link.src is not None else link.alt
        stack.splice(match, link.consumed + 1, [f'<a href="{href}" title="{title}">{link.alt}</a>'])
        self.stats.links += 1


def resolve_inline(tokens: Sequence[str]) -> list[str]:
    """Resolve inline markup in tokens under the active RenderConfig.

    Example:
        >>> "".join(resolve_inline(["**", "a", "**"]))
        '<b>a</b>'
    """
    return InlineResolver(tokens).resolve()
