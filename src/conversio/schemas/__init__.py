"""Shared schemas for conversio."""

from conversio.schemas.headings import Heading
from conversio.schemas.toc import TocResult, TocStyle

__all__ = ["Heading", "TocResult", "TocStyle"]
