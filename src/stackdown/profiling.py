"""Opt-in profiling of the render pipeline.

Every resolver keeps a ResolveStats describing the work its stack did:
blocks closed, reductions, the deepest the stack grew, oversized delimiter
runs split and links rendered. render() times the tokenize and resolve
stages separately and, when a RenderAccumulator is active, folds both the
timings and the stats into it.

Nothing is recorded when profiling is off (get_render_accumulator() returns
None).

Example:
    from stackdown import render
    from stackdown.profiling import profiled_render

    with profiled_render() as metrics:
        html = render("# Hello **World**\\n")

    print(metrics.summary())
    # {"render_calls": 1, "tokenize_ms": 0.01, "resolve_ms": 0.02,
    #  "reductions": 2, "peak_stack_depth": 6, ...}

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass(slots=True)
class ResolveStats:
    """Work done by one resolver (or a whole document).

    Attributes:
        blocks: Lines closed into a block (heading, image, quote, paragraph).
        reductions: ParseStack.reduce() calls.
        peak_stack_depth: Largest stack size seen by any resolver involved.
        splits: Oversized delimiter runs split into canonical chunks.
        links: Inline links rendered.

    """

    blocks: int = 0
    reductions: int = 0
    peak_stack_depth: int = 0
    splits: int = 0
    links: int = 0

    def absorb_stack(self, reductions: int, peak_depth: int) -> None:
        """Fold one finished stack's counters into these stats."""
        self.reductions += reductions
        self.peak_stack_depth = max(self.peak_stack_depth, peak_depth)


@dataclass
class RenderAccumulator:
    """Metrics accumulated across render() calls.

    Attributes:
        start_time: Profiling start timestamp.
        render_calls: Number of render() calls recorded.
        source_length: Total length of sources rendered.
        token_count: Total tokens produced.
        tokenize_ms: Time spent in the tokenizer.
        resolve_ms: Time spent in the block and inline resolvers.
        stats: Summed resolver work; peak_stack_depth is the maximum.
        slowest_render_ms: Longest single render (tokenize plus resolve).

    """

    start_time: float = field(default_factory=perf_counter)
    render_calls: int = 0
    source_length: int = 0
    token_count: int = 0
    tokenize_ms: float = 0.0
    resolve_ms: float = 0.0
    stats: ResolveStats = field(default_factory=ResolveStats)
    slowest_render_ms: float = 0.0

    def record_render(
        self,
        *,
        source_length: int,
        token_count: int,
        tokenize_ms: float,
        resolve_ms: float,
        stats: ResolveStats,
    ) -> None:
        """Record one render call.

        Args:
            source_length: Length of the source string rendered.
            token_count: Number of tokens the source produced.
            tokenize_ms: Duration of the tokenize stage.
            resolve_ms: Duration of the resolve stages.
            stats: The document resolver's stats.

        """
        self.render_calls += 1
        self.source_length += source_length
        self.token_count += token_count
        self.tokenize_ms += tokenize_ms
        self.resolve_ms += resolve_ms
        self.slowest_render_ms = max(self.slowest_render_ms, tokenize_ms + resolve_ms)

        total = self.stats
        total.blocks += stats.blocks
        total.splits += stats.splits
        total.links += stats.links
        total.absorb_stack(stats.reductions, stats.peak_stack_depth)

    @property
    def total_duration_ms(self) -> float:
        """Wall time since profiling started, in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    @property
    def tokens_per_ms(self) -> float:
        """Tokenizer throughput, or 0.0 before anything was timed."""
        if self.tokenize_ms <= 0:
            return 0.0
        return self.token_count / self.tokenize_ms

    def summary(self) -> dict[str, Any]:
        """Get summary of render metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "render_calls": self.render_calls,
            "source_length": self.source_length,
            "token_count": self.token_count,
            "tokenize_ms": round(self.tokenize_ms, 3),
            "resolve_ms": round(self.resolve_ms, 3),
            "slowest_render_ms": round(self.slowest_render_ms, 3),
            "blocks": self.stats.blocks,
            "reductions": self.stats.reductions,
            "peak_stack_depth": self.stats.peak_stack_depth,
            "delimiter_splits": self.stats.splits,
            "links": self.stats.links,
        }


_accumulator: ContextVar[RenderAccumulator | None] = ContextVar(
    "render_accumulator",
    default=None,
)


def get_render_accumulator() -> RenderAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_render() -> Iterator[RenderAccumulator]:
    """Context manager for profiled rendering.

    Yields:
        RenderAccumulator populated by render() calls made inside the block.

    """
    acc = RenderAccumulator()
    token: Token[RenderAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
