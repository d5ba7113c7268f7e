"""Table of contents models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from conversio.schemas.headings import Heading


class TocStyle(str, Enum):
    """Rendering style of the table of contents."""

    DIV = "div"
    LIST = "list"


class TocResult(BaseModel):
    """Final table of contents output.

    Attributes:
        html: Body with anchors injected and the table of contents merged in.
        toc: The table of contents fragment, container included.
        body: Body with anchors injected, before merging.
        headings: Scanned headings with numbers (and final anchors) applied.
    """

    html: str
    toc: str
    body: str
    headings: list[Heading]
