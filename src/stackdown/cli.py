"""Command-line interface for stackdown.

Reads markdown from files (or stdin), renders each source independently and
writes the concatenated HTML to stdout or a file.

Usage:
    stackdown README.md -o README.html
    cat notes.md | stackdown --terminate-last-line
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from stackdown import Markdown, __version__
from stackdown.errors import ConfigError, InputError
from stackdown.utils.logger import configure_cli_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INPUT_OR_CONFIG = 2

STDIN_SOURCE = "-"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stackdown",
        description="Render the stackdown markdown dialect to HTML.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "sources",
        nargs="*",
        default=[STDIN_SOURCE],
        help="Markdown files to render ('-' reads stdin; default: stdin).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Write HTML to this file instead of stdout.",
    )
    parser.add_argument(
        "--terminate-last-line",
        action="store_true",
        help="Resolve a final line that has no trailing newline.",
    )
    parser.add_argument(
        "--soft-break",
        type=str,
        default=" ",
        help="Text placed where a single newline joins paragraph lines.",
    )
    parser.add_argument(
        "--max-heading-level",
        type=int,
        default=6,
        help="Cap heading levels at N (1-6).",
    )
    parser.add_argument(
        "--no-trim-links",
        action="store_true",
        help="Keep whitespace around link and image sources.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return parser


def read_source(source: str) -> str:
    """Read one source, '-' meaning stdin.

    Raises:
        InputError: If the file cannot be read or decoded.
    """
    if source == STDIN_SOURCE:
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"cannot read source: {exc}", source_file=source) from exc


def write_output(path: str, html: str) -> None:
    """Write rendered HTML to path.

    Raises:
        InputError: If the file cannot be written.
    """
    try:
        Path(path).write_text(html, encoding="utf-8")
    except OSError as exc:
        raise InputError(f"cannot write output: {exc}", source_file=path) from exc
    logger.debug("Wrote %d characters to %s", len(html), path)


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    configure_cli_logging(args.verbose)

    try:
        md = Markdown(
            soft_break=args.soft_break,
            max_heading_level=args.max_heading_level,
            trim_link_targets=not args.no_trim_links,
            terminate_last_line=args.terminate_last_line,
        )
        chunks = []
        for source in args.sources:
            logger.debug("Rendering %s", source)
            chunks.append(md(read_source(source)))
    except (ConfigError, InputError) as exc:
        print(f"stackdown: error: {exc}", file=sys.stderr)
        return EXIT_INPUT_OR_CONFIG

    html = "".join(chunks)
    if args.output is None:
        sys.stdout.write(html)
        return EXIT_OK

    try:
        write_output(args.output, html)
    except InputError as exc:
        print(f"stackdown: error: {exc}", file=sys.stderr)
        return EXIT_INPUT_OR_CONFIG
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
