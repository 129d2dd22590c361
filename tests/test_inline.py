"""Tests for inline resolution: emphasis family, oversized runs and links."""

import pytest

from stackdown import RenderConfig, render_config_context, resolve_inline, tokenize
from stackdown.parsing import InlineResolver


def inline(source: str) -> str:
    return "".join(resolve_inline(tokenize(source)))


class TestDelimiterPairs:
    """Each delimiter family with a balanced pair."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("*a*", "<i>a</i>"),
            ("**a**", "<b>a</b>"),
            ("_a_", "<sub>a</sub>"),
            ("__a__", "<u>a</u>"),
            ("~~a~~", "<s>a</s>"),
            ("`a`", "<code>a</code>"),
            ("^a^", "<sup>a</sup>"),
        ],
    )
    def test_balanced(self, source: str, expected: str) -> None:
        assert inline(source) == expected

    def test_nested(self) -> None:
        assert inline("**a *b* c**") == "<b>a <i>b</i> c</b>"

    def test_surrounding_text(self) -> None:
        assert inline("x *a* y") == "x <i>a</i> y"


class TestUnmatched:
    """Unmatched delimiters stay literal."""

    def test_unclosed_opener(self) -> None:
        assert inline("*a") == "*a"

    def test_trailing_marker(self) -> None:
        assert inline("a**") == "a**"

    def test_single_tilde_is_text(self) -> None:
        assert inline("~a~") == "~a~"

    def test_crossed_spans_close_first_opener(self) -> None:
        # The reduced italic span hides the bold opener from the closing run
        assert inline("*a **b* c**") == "<i>a **b</i> c**"

    def test_escaped_marker(self) -> None:
        assert inline("\\*a*") == "&#42;a*"

    def test_resolver_does_not_mutate_input(self) -> None:
        tokens = ["***", "a", "***"]
        InlineResolver(tokens).resolve()
        assert tokens == ["***", "a", "***"]


class TestOversizedRuns:
    """Runs longer than the canonical width are split, nearer opener first."""

    def test_triple_star(self) -> None:
        assert inline("***a***") == "<b><i>a</i></b>"

    def test_five_then_three(self) -> None:
        # "*****" opens and closes an empty bold, then "*" opens; the closing
        # "***" is reversed so "*" pairs with it and "**" is left over
        assert inline("*****a***") == "<b></b><i>a</i>**"

    def test_three_then_five(self) -> None:
        assert inline("***a*****") == "<b><i>a</i></b>**"

    def test_triple_tilde_splits_front_to_back(self) -> None:
        # The closing "~~~" is never reversed: "~~" closes, the lone "~" is text
        assert inline("~~~a~~~") == "<s>~a</s>~"

    def test_tilde_run_ignores_nearer_single_tilde(self) -> None:
        assert inline("~~a~b~~~") == "<s>a~b</s>~"

    def test_double_backtick_makes_empty_code_spans(self) -> None:
        assert inline("``a``") == "<code></code>a<code></code>"


class TestLinks:
    """Inline links."""

    def test_link(self) -> None:
        assert inline("[a](b)") == '<a href="b" title="b">a</a>'

    def test_link_with_title(self) -> None:
        assert inline('[a](b "T")') == '<a href="b" title="T">a</a>'

    def test_link_in_text(self) -> None:
        assert inline("see [a](b) now") == 'see <a href="b" title="b">a</a> now'

    def test_alt_only_link(self) -> None:
        assert inline("[text]") == '<a href="text" title="text">text</a>'

    def test_alt_only_link_before_text(self) -> None:
        assert inline("[text] more") == '<a href="text" title="text">text</a> more'

    def test_emphasis_inside_link_text(self) -> None:
        assert inline("[*a*](b)") == '<a href="b" title="b"><i>a</i></a>'

    def test_empty_src_falls_back_to_alt(self) -> None:
        assert inline("[a]()") == '<a href="a" title="">a</a>'

    def test_empty_alt(self) -> None:
        assert inline("[](b)") == '<a href="b" title="b"></a>'

    def test_image_is_left_for_block_level(self) -> None:
        assert inline("![a](b)") == "![a](b)"

    def test_unclosed_bracket(self) -> None:
        assert inline("[a") == "[a"

    def test_parens_without_bracket(self) -> None:
        assert inline("(x)") == "(x)"

    def test_untrimmed_src(self) -> None:
        with render_config_context(RenderConfig(trim_link_targets=False)):
            assert inline('[a](b "T")') == '<a href="b " title="T">a</a>'

    def test_explicit_config(self) -> None:
        resolver = InlineResolver(tokenize('[a](b "T")'), RenderConfig(trim_link_targets=False))
        assert "".join(resolver.resolve()) == '<a href="b " title="T">a</a>'
