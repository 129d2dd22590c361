"""Error-path and malformed input tests.

The conversion core never raises for str input; malformed markup degrades to
literal text. Exceptions only come from the outer surface.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from stackdown import Markdown, render
from stackdown.errors import ConfigError, InputError, StackdownError
from stackdown.lexer import SPECIAL_CHARS

markdownish = st.text(alphabet=st.sampled_from(sorted(SPECIAL_CHARS) + list("ab \t\\")), max_size=300)


class TestInputErrorFormatting:
    def test_message_only(self) -> None:
        err = InputError("cannot read")
        assert str(err) == "cannot read"
        assert err.source_file is None

    def test_with_source_file(self) -> None:
        err = InputError("cannot read", source_file="notes.md")
        assert str(err) == "notes.md: cannot read"
        assert err.message == "cannot read"

    def test_is_stackdown_error(self) -> None:
        assert isinstance(InputError("x"), StackdownError)


class TestConfigError:
    def test_format(self) -> None:
        err = ConfigError("soft_break", "bad value")
        assert str(err) == "Config 'soft_break': bad value"
        assert err.field == "soft_break"

    def test_is_stackdown_error(self) -> None:
        assert isinstance(ConfigError("f", "m"), StackdownError)


class TestMalformedInput:
    """Malformed markup renders as best-effort literal text."""

    @pytest.mark.parametrize(
        "source",
        ["*", "**", "[", "]", "(", ")", "![", "![](", '"', "\\", "#", "\n", "[a](b", "`"],
    )
    def test_fragments_do_not_raise(self, source: str) -> None:
        assert isinstance(render(source), str)
        assert isinstance(render(source + "\n"), str)

    @given(markdownish)
    @settings(max_examples=300)
    def test_render_is_total(self, source: str) -> None:
        """Any string renders, with or without a terminating newline."""
        assert isinstance(render(source), str)
        assert isinstance(Markdown(terminate_last_line=True)(source), str)

    @given(markdownish)
    @settings(max_examples=100)
    def test_render_is_deterministic(self, source: str) -> None:
        assert render(source) == render(source)
