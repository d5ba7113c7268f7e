"""Heading anchors and table of contents for rendered HTML bodies."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from conversio.anchors import inject_anchors
from conversio.config import (
    CONVERSIO_TOC_CLASS,
    CONVERSIO_TOC_MARKER,
    CONVERSIO_TOC_NUMBERING,
    CONVERSIO_TOC_STYLE,
)
from conversio.exceptions import ConfigurationError
from conversio.headings import disambiguate_anchors, number_headings, scan_headings
from conversio.schemas import TocResult, TocStyle
from conversio.toc import merge_toc, render_table_of_contents

logger = logging.getLogger(__name__)


def parse_toc_style(value: str | TocStyle) -> TocStyle:
    """Convert a style name into a ``TocStyle``.

    Raises:
        ConfigurationError: If the value is neither ``"div"`` nor ``"list"``.
    """
    try:
        return TocStyle(value)
    except ValueError as exc:
        allowed = ", ".join(style.value for style in TocStyle)
        raise ConfigurationError(
            f"Unknown table of contents style {value!r} (expected one of: {allowed})"
        ) from exc


@dataclass
class TocOptions:
    """Options for table of contents generation.

    Attributes:
        style: ``"div"`` for indented lines or ``"list"`` for nested lists.
        numbering: Show hierarchical numbers (``"div"`` style only).
        div_class: CSS class of the container ``<div>``.
        marker: Placeholder token replaced by the table of contents.
        unique_anchors: Suffix repeated anchors with ``-2``, ``-3``, ...
            Off by default, so identical headings share one anchor.
    """

    style: TocStyle | str = CONVERSIO_TOC_STYLE
    numbering: bool = CONVERSIO_TOC_NUMBERING
    div_class: str = CONVERSIO_TOC_CLASS
    marker: str = CONVERSIO_TOC_MARKER
    unique_anchors: bool = False

    def __post_init__(self) -> None:
        self.style = parse_toc_style(self.style)
        if not self.marker:
            raise ConfigurationError("Table of contents marker must not be empty")


def build_table_of_contents(html: str, options: TocOptions | None = None) -> TocResult:
    """Anchor the headings of ``html`` and merge a table of contents into it.

    Args:
        html: Rendered HTML body.
        options: Generation options. Uses defaults if None.

    Returns:
        The merged HTML together with its parts and the numbered headings.
    """
    opts = options or TocOptions()
    style = parse_toc_style(opts.style)
    lines = html.split("\n")

    headings = number_headings(scan_headings(lines, marker=opts.marker))
    if opts.unique_anchors:
        headings = disambiguate_anchors(headings)

    body = "\n".join(
        inject_anchors(lines, headings, style=style, numbering=opts.numbering)
    )
    toc = render_table_of_contents(
        headings, style=style, numbering=opts.numbering, div_class=opts.div_class
    )
    merged = merge_toc(toc, body, marker=opts.marker)

    logger.debug(
        "Built table of contents",
        extra={"toc_style": style.value, "heading_count": len(headings)},
    )
    return TocResult(html=merged, toc=toc, body=body, headings=headings)


def add_table_of_contents(
    html: str,
    style: TocStyle | str = CONVERSIO_TOC_STYLE,
    *,
    numbering: bool = CONVERSIO_TOC_NUMBERING,
) -> str:
    """Return ``html`` with anchored headings and a table of contents."""
    options = TocOptions(style=style, numbering=numbering)
    return build_table_of_contents(html, options).html
