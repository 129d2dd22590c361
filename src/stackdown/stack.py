"""ParseStack: the mutable string buffer shared by the resolvers.

The stack starts as pushed tokens and is rewritten in place: unmatched
markers stay as literal placeholders, matched delimiters are replaced by tags,
and finished spans are reduced into single strings.

Thread Safety:
ParseStack instances are local to each resolver. No shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import overload


class ParseStack:
    """Ordered, mutable sequence of string segments.

    Usage:
            >>> stack = ParseStack(["<p>", "a", "b"])
            >>> stack.push("</p>").reduce(0)
            >>> stack.build()
            '<p>ab</p>'

    Invariant:
        After reduce(index), everything from index to the end is one element.

    Counters:
        reductions counts reduce() calls and peak_depth is the largest size
        the stack has reached. Both are read by the resolvers for profiling.

    """

    __slots__ = ("_items", "_peak", "reductions")

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._items: list[str] = list(items)
        self._peak = len(self._items)
        self.reductions = 0

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> list[str]: ...

    def __getitem__(self, index: int | slice) -> str | list[str]:
        return self._items[index]

    def __setitem__(self, index: int, value: str) -> None:
        self._items[index] = value

    def __repr__(self) -> str:
        return f"ParseStack({self._items!r})"

    @property
    def peak_depth(self) -> int:
        """Largest number of elements held at any point."""
        return self._peak

    def _grew(self) -> None:
        if len(self._items) > self._peak:
            self._peak = len(self._items)

    def push(self, s: str) -> ParseStack:
        """Append s to the top of the stack.

        Returns:
            self for method chaining
        """
        self._items.append(s)
        self._grew()
        return self

    def insert(self, index: int, s: str) -> None:
        """Insert s before index."""
        self._items.insert(index, s)
        self._grew()

    def rfind(self, value: str) -> int:
        """Index of the last element equal to value, or -1."""
        items = self._items
        for j in range(len(items) - 1, -1, -1):
            if items[j] == value:
                return j
        return -1

    def rfind_containing(self, char: str) -> int:
        """Index of the last element containing char, or -1."""
        items = self._items
        for j in range(len(items) - 1, -1, -1):
            if char in items[j]:
                return j
        return -1

    def splice(self, start: int, count: int, replacement: Iterable[str]) -> None:
        """Replace count elements from start with replacement.

        count may run past the end; the range is clipped.
        """
        self._items[start : start + count] = replacement
        self._grew()

    def replace_from(self, index: int, items: Iterable[str]) -> None:
        """Replace everything from index to the end with items."""
        self._items[index:] = items
        self._grew()

    def reduce(self, index: int) -> None:
        """Collapse the range [index, end) into one concatenated element."""
        self._items[index:] = ["".join(self._items[index:])]
        self.reductions += 1

    def build(self) -> str:
        """Concatenate the whole stack."""
        return "".join(self._items)

    def to_list(self) -> list[str]:
        """Copy of the stack's elements."""
        return list(self._items)
