"""Heading record model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Heading(BaseModel):
    """One heading element found while scanning an HTML body.

    Attributes:
        line_index: Position of the heading line in the original line buffer.
        level: Numeral of the heading tag (``<h2>`` is 2).
        content: Raw text between the opening and closing tag, markup included.
        anchor: Identifier derived from ``content``.
        number: Hierarchical label such as ``"1.2"``; only set for levels 1-3.
    """

    model_config = ConfigDict(frozen=True)

    line_index: int = Field(..., ge=0)
    level: int = Field(..., ge=1, le=9)
    content: str
    anchor: str
    number: str | None = None
