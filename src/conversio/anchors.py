"""Rewrite heading lines so they carry a named anchor."""

from __future__ import annotations

from typing import Iterable, Sequence

from conversio.headings import MAX_TOC_LEVEL
from conversio.schemas import Heading, TocStyle


def render_heading_line(heading: Heading, *, style: TocStyle, numbering: bool) -> str:
    """Build the replacement line for a single heading."""
    prefix = f'<a name="{heading.anchor}"></a>'
    if style is TocStyle.DIV and numbering and heading.number is not None:
        prefix += f'<span class="numbering">{heading.number}</span>&nbsp;'
    return f"<h{heading.level}>{prefix}{heading.content}</h{heading.level}>"


def inject_anchors(
    lines: Sequence[str],
    headings: Iterable[Heading],
    *,
    style: TocStyle,
    numbering: bool = True,
) -> list[str]:
    """Return a copy of ``lines`` with every level 1-3 heading rewritten.

    Deeper headings keep their original line.
    """
    rewritten = list(lines)
    for heading in headings:
        if heading.level > MAX_TOC_LEVEL:
            continue
        rewritten[heading.line_index] = render_heading_line(
            heading, style=style, numbering=numbering
        )
    return rewritten
