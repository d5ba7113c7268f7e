"""Render headings into a table of contents and merge it into the body."""

from __future__ import annotations

from typing import Iterable

from conversio.config import CONVERSIO_TOC_CLASS, CONVERSIO_TOC_MARKER
from conversio.headings import MAX_TOC_LEVEL
from conversio.schemas import Heading, TocStyle

_INDENT = "&nbsp;&nbsp;"


def _toc_headings(headings: Iterable[Heading]) -> list[Heading]:
    return [heading for heading in headings if heading.level <= MAX_TOC_LEVEL]


def _link(heading: Heading, text: str | None = None) -> str:
    label = heading.content if text is None else text
    return f'<a href="#{heading.anchor}">{label}</a>'


def render_toc_list(headings: Iterable[Heading]) -> str:
    """Render nested ``<ol>``/``<li>`` elements.

    A jump from ``<h1>`` straight to ``<h3>`` opens a single nested list
    rather than two; a following ``<h2>`` joins that list. ``open_levels``
    holds the item level of every open list, so the closing tags always match
    the opening ones.
    """
    parts: list[str] = []
    open_levels: list[int] = []

    for heading in _toc_headings(headings):
        level = min(heading.level, MAX_TOC_LEVEL)
        item = _link(heading)
        while len(open_levels) > 1 and open_levels[-2] >= level:
            open_levels.pop()
            parts.append("</li>\n</ol>")
        if open_levels and level <= open_levels[-1]:
            parts.append(f"</li>\n<li>{item}")
            open_levels[-1] = level
        else:
            parts.append(f"\n<ol>\n<li>{item}")
            open_levels.append(level)

    parts.extend("</li>\n</ol>" for _ in open_levels)
    parts.append("\n")
    return "".join(parts)


def render_toc_div(headings: Iterable[Heading], *, numbering: bool = True) -> str:
    """Render one link per line, indented with ``&nbsp;`` by level."""
    lines: list[str] = []
    for heading in _toc_headings(headings):
        indent = _INDENT * (heading.level - 1)
        text = heading.content
        if numbering and heading.number is not None:
            text = f"{heading.number}&nbsp;{text}"
        lines.append(f"{indent}{_link(heading, text)}<br/>\n")
    return "".join(lines)


def render_table_of_contents(
    headings: Iterable[Heading],
    *,
    style: TocStyle,
    numbering: bool = True,
    div_class: str = CONVERSIO_TOC_CLASS,
) -> str:
    """Render the table of contents wrapped in its container ``<div>``."""
    if style is TocStyle.DIV:
        fragment = render_toc_div(headings, numbering=numbering)
    else:
        fragment = render_toc_list(headings)
    return f'<div class="{div_class}" id="toc">\n{fragment}</div>\n'


def merge_toc(toc: str, body: str, *, marker: str = CONVERSIO_TOC_MARKER) -> str:
    """Place ``toc`` at the first ``marker`` in ``body``, or in front of it.

    Later marker occurrences are left in place.
    """
    if marker in body:
        return body.replace(marker, toc, 1)
    return f"{toc}\n{body}"
