"""Command line interface for conversio."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from conversio.config import (
    CONVERSIO_SOURCE_SUFFIX,
    CONVERSIO_TOC_NUMBERING,
    CONVERSIO_TOC_STYLE,
)
from conversio.converter import DEFAULT_TEMPLATE, Converter
from conversio.discovery import discover_sources, resolve_output_paths
from conversio.exceptions import ConversioError, SourceError
from conversio.htmltoc import TocOptions
from conversio.schemas import TocStyle
from conversio.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

_DESCRIPTION = f"""\
Render Markdown plain text files to XHTML.

SRC is a file or a directory searched for *{CONVERSIO_SOURCE_SUFFIX} files.
DST is an optional target directory; without it every page is written next
to its source.

Templates are plain text with a $content slot (the rendered body) and an
optional $style slot (CSS for highlighted code).
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conversio",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("src", nargs="?", help="Markdown file or directory")
    parser.add_argument("dst", nargs="?", help="Target directory for the XHTML output")
    parser.add_argument("-t", "--template", help="File containing a page template")
    parser.add_argument(
        "--template-default",
        action="store_true",
        help="Print the default template and exit",
    )
    parser.add_argument(
        "--toc-style",
        choices=[style.value for style in TocStyle],
        default=CONVERSIO_TOC_STYLE,
        help="Table of contents style (default: %(default)s)",
    )
    parser.add_argument(
        "--no-numbering",
        dest="numbering",
        action="store_false",
        default=CONVERSIO_TOC_NUMBERING,
        help="Hide heading numbers in the div style",
    )
    parser.add_argument("--no-toc", action="store_true", help="Skip the table of contents")
    parser.add_argument(
        "--highlight", action="store_true", help="Highlight fenced code blocks with Pygments"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every rendered file")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.template_default:
        print(DEFAULT_TEMPLATE, end="")
        return 0

    configure_logging("INFO" if args.verbose else None)

    try:
        if not args.src:
            raise SourceError("No input defined")
        template = _load_template(args.template)
        converter = Converter(
            template,
            toc_options=TocOptions(style=args.toc_style, numbering=args.numbering),
            include_toc=not args.no_toc,
            highlight=args.highlight,
        )
        sources, root = discover_sources(Path(args.src))
        dst = Path(args.dst) if args.dst else None
        pairs = resolve_output_paths(sources, root, dst)
        for source, target in pairs.items():
            converter.markdown_to_xhtml(source, target)
    except (ConversioError, OSError) as exc:
        logger.debug("Conversion failed", exc_info=True)
        print(f"ERROR: {exc}", file=sys.stderr)
        print("  use -h for detailed instructions", file=sys.stderr)
        return 1

    logger.info("Rendered %d file(s)", len(pairs))
    return 0


def _load_template(path: str | None) -> str | None:
    if path is None:
        return None
    template_path = Path(path)
    if not template_path.is_file():
        raise SourceError(f"Template not found: {path}")
    return template_path.read_text(encoding="utf-8")
