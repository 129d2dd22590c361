"""Tests for the ParseStack primitives."""

from stackdown.stack import ParseStack


class TestSearch:
    def test_rfind_returns_last_match(self) -> None:
        stack = ParseStack(["*", "a", "*", "b"])
        assert stack.rfind("*") == 2

    def test_rfind_missing(self) -> None:
        assert ParseStack(["a"]).rfind("*") == -1

    def test_rfind_is_exact(self) -> None:
        assert ParseStack(["**"]).rfind("*") == -1

    def test_rfind_containing(self) -> None:
        stack = ParseStack(["<p>a</p>", "\n", "b", "x\ny"])
        assert stack.rfind_containing("\n") == 3
        assert ParseStack(["a"]).rfind_containing("\n") == -1


class TestRewriting:
    def test_reduce_collapses_tail(self) -> None:
        stack = ParseStack(["keep", "<i>", "a", "</i>"])
        stack.reduce(1)
        assert stack.to_list() == ["keep", "<i>a</i>"]

    def test_reduce_whole_stack(self) -> None:
        stack = ParseStack(["a", "b"])
        stack.reduce(0)
        assert len(stack) == 1
        assert stack[0] == "ab"

    def test_splice_clips_past_end(self) -> None:
        stack = ParseStack(["x", "[", "a", "]"])
        stack.splice(1, 10, ["<a>"])
        assert stack.to_list() == ["x", "<a>"]

    def test_replace_from(self) -> None:
        stack = ParseStack(["a", "b", "c"])
        stack.replace_from(1, ["B"])
        assert stack.to_list() == ["a", "B"]

    def test_push_chains_and_build(self) -> None:
        stack = ParseStack()
        stack.push("<p>").push("hi").push("</p>")
        stack.insert(0, "\n")
        assert stack.build() == "\n<p>hi</p>"

    def test_slice_returns_copy(self) -> None:
        stack = ParseStack(["a", "b"])
        tail = stack[1:]
        tail.append("c")
        assert len(stack) == 2

    def test_empty_stack_is_falsy(self) -> None:
        assert not ParseStack()
        assert ParseStack([""])


class TestCounters:
    def test_reductions_counted(self) -> None:
        stack = ParseStack(["<i>", "a", "</i>"])
        assert stack.reductions == 0
        stack.reduce(0)
        stack.push("b").reduce(0)
        assert stack.reductions == 2

    def test_peak_depth_survives_reduce(self) -> None:
        stack = ParseStack(["<p>"])
        stack.push("a").push("b").push("</p>")
        stack.reduce(0)
        assert len(stack) == 1
        assert stack.peak_depth == 4

    def test_peak_depth_tracks_splice_growth(self) -> None:
        stack = ParseStack(["a"])
        stack.splice(0, 1, ["x", "y", "z"])
        assert stack.peak_depth == 3
