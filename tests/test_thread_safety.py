"""Thread safety tests for concurrent conversions.

Each conversion owns its tokenizer, resolvers and stack, and configuration is
held in a ContextVar, so concurrent renders must never interfere.
"""

from concurrent.futures import ThreadPoolExecutor

from stackdown import Markdown, render

DOCS = [f"# Doc {i}\n\nContent *{i}* with [link](u{i})\nsecond line\n" for i in range(200)]


def expected(i: int, soft_break: str = " ") -> str:
    return (
        f"<h1> Doc {i}</h1>\n"
        f'<p>Content <i>{i}</i> with <a href="u{i}" title="u{i}">link</a>{soft_break}second line</p>\n'
    )


class TestConcurrentRendering:
    def test_parallel_render(self) -> None:
        with ThreadPoolExecutor(max_workers=8) as ex:
            results = list(ex.map(render, DOCS))
        assert results == [expected(i) for i in range(len(DOCS))]

    def test_shared_markdown_instances_with_different_config(self) -> None:
        spaced = Markdown()
        broken = Markdown(soft_break="<br />")

        def work(i: int) -> tuple[str, str]:
            return spaced(DOCS[i]), broken(DOCS[i])

        with ThreadPoolExecutor(max_workers=8) as ex:
            results = list(ex.map(work, range(len(DOCS))))

        for i, (plain, with_br) in enumerate(results):
            assert plain == expected(i)
            assert with_br == expected(i, "<br />")
