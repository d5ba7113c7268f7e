"""conversio: render Markdown to XHTML with heading anchors and a table of contents."""

from conversio.exceptions import (
    ConfigurationError,
    ConversioError,
    ConversionError,
    SourceError,
    TemplateError,
)
from conversio.headings import make_anchor, number_headings, scan_headings
from conversio.htmltoc import TocOptions, add_table_of_contents, build_table_of_contents
from conversio.schemas import Heading, TocResult, TocStyle

__all__ = [
    "ConfigurationError",
    "ConversioError",
    "ConversionError",
    "Heading",
    "SourceError",
    "TemplateError",
    "TocOptions",
    "TocResult",
    "TocStyle",
    "add_table_of_contents",
    "build_table_of_contents",
    "make_anchor",
    "number_headings",
    "scan_headings",
]
