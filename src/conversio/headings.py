"""Scan HTML lines for heading elements and number them."""

from __future__ import annotations

import logging
import re
from typing import Iterable, Sequence

from conversio.config import CONVERSIO_TOC_MARKER
from conversio.schemas import Heading

logger = logging.getLogger(__name__)

# Whole-line heading element; group 1 is the level, group 3 the content.
_HEADING_RE = re.compile(r"<h([1-9])([^>]*)>(.*?)</h\1>")

MAX_TOC_LEVEL = 3


def make_anchor(content: str) -> str:
    """Transform heading content into an anchor identifier.

        make_anchor("Text with spaces")       # textwithspaces
        make_anchor("step 1 step 2 step: 3")  # step1step2step3
        make_anchor("Über uns")               # überuns
    """
    return "".join(char for char in content if char.isalnum()).lower()


def scan_headings(
    lines: Sequence[str], *, marker: str = CONVERSIO_TOC_MARKER
) -> list[Heading]:
    """Collect heading lines in document order.

    When ``marker`` appears anywhere in ``lines``, only the lines after the one
    holding its first occurrence are examined.

    Args:
        lines: The document split into lines.
        marker: Placeholder token that marks the table of contents position.

    Returns:
        Headings with ``line_index``, ``level``, ``content`` and ``anchor`` set.
    """
    active = not any(marker in line for line in lines)
    headings: list[Heading] = []

    for index, line in enumerate(lines):
        if not active:
            active = marker in line
            continue
        match = _HEADING_RE.fullmatch(line)
        if not match:
            continue
        content = match.group(3)
        headings.append(
            Heading(
                line_index=index,
                level=int(match.group(1)),
                content=content,
                anchor=make_anchor(content),
            )
        )

    logger.debug("Scanned %d heading(s) from %d line(s)", len(headings), len(lines))
    return headings


def number_headings(headings: Iterable[Heading]) -> list[Heading]:
    """Assign chapter/section/subsection numbers in a single ordered pass.

    Counters start at zero and lower levels are never checked for a parent,
    so a document opening with ``<h3>`` yields ``"0.0.1"``.
    """
    chapter = section = subsection = 0
    numbered: list[Heading] = []

    for heading in headings:
        if heading.level == 1:
            chapter += 1
            section = subsection = 0
            number = f"{chapter}"
        elif heading.level == 2:
            section += 1
            subsection = 0
            number = f"{chapter}.{section}"
        elif heading.level == 3:
            subsection += 1
            number = f"{chapter}.{section}.{subsection}"
        else:
            numbered.append(heading)
            continue
        numbered.append(heading.model_copy(update={"number": number}))

    return numbered


def disambiguate_anchors(headings: Iterable[Heading]) -> list[Heading]:
    """Suffix repeated anchors with ``-2``, ``-3`` and so on, in document order.

    Only headings that take part in the table of contents are considered.
    """
    seen: dict[str, int] = {}
    result: list[Heading] = []

    for heading in headings:
        if heading.level > MAX_TOC_LEVEL:
            result.append(heading)
            continue
        count = seen.get(heading.anchor, 0) + 1
        seen[heading.anchor] = count
        if count == 1:
            result.append(heading)
        else:
            result.append(heading.model_copy(update={"anchor": f"{heading.anchor}-{count}"}))

    return result
