"""Render Markdown files to XHTML pages with a table of contents."""

from __future__ import annotations

import logging
from pathlib import Path
from string import Template

import markdown
from pygments.formatters import HtmlFormatter

from conversio.exceptions import ConversionError, TemplateError
from conversio.htmltoc import TocOptions, build_table_of_contents

logger = logging.getLogger(__name__)

_BASE_EXTENSIONS = ("fenced_code", "tables")
_HIGHLIGHT_CLASS = "codehilite"
_TEMPLATE_SLOTS = frozenset({"content", "style"})

DEFAULT_TEMPLATE = """\
<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE html
   PUBLIC "-//W3C//DTD XHTML 1.0 Transitional//EN"
   "http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd">
<html xmlns="http://www.w3.org/1999/xhtml" xml:lang="en" lang="en">
<head>
  <meta http-equiv="content-type" content="text/html; charset=utf-8" />
  <style type="text/css" media="screen">
    $style
  </style>
</head>
<body>
  $content
</body>
</html>
"""


def render_markdown(text: str, *, highlight: bool = False) -> str:
    """Convert Markdown text into an HTML body fragment.

    Parameters
    ----------
    text : str
        Markdown source.
    highlight : bool
        If True, fenced code blocks are highlighted with Pygments.
    """
    extensions = list(_BASE_EXTENSIONS)
    if highlight:
        extensions.append(_HIGHLIGHT_CLASS)
    try:
        return markdown.markdown(text, extensions=extensions, output_format="xhtml")
    except (ImportError, ValueError) as exc:
        raise ConversionError(f"Markdown rendering failed: {exc}") from exc


def highlight_css() -> str:
    """Return the Pygments stylesheet for highlighted code blocks."""
    return HtmlFormatter().get_style_defs(f".{_HIGHLIGHT_CLASS}")


def render_template(template: str, *, content: str, style: str = "") -> str:
    """Fill the ``$content`` and ``$style`` slots of a page template.

    Raises:
        TemplateError: If the template has no ``$content`` slot, uses another
            placeholder, or is malformed.
    """
    page = Template(template)
    if not page.is_valid():
        raise TemplateError("Template contains an invalid '$' placeholder")
    identifiers = set(page.get_identifiers())
    if "content" not in identifiers:
        raise TemplateError("Template has no $content slot")
    unknown = identifiers - _TEMPLATE_SLOTS
    if unknown:
        raise TemplateError(f"Unknown template slot(s): {', '.join(sorted(unknown))}")
    return page.substitute(content=content, style=style)


class Converter:
    """Turn Markdown documents into complete XHTML pages."""

    def __init__(
        self,
        template: str | None = None,
        *,
        toc_options: TocOptions | None = None,
        include_toc: bool = True,
        highlight: bool = False,
    ) -> None:
        self.template = DEFAULT_TEMPLATE if template is None else template
        self.toc_options = toc_options or TocOptions()
        self.include_toc = include_toc
        self.highlight = highlight

    def convert_text(self, text: str) -> str:
        """Render Markdown text into a full page."""
        body = render_markdown(text, highlight=self.highlight)
        if self.include_toc:
            body = build_table_of_contents(body, self.toc_options).html
        style = highlight_css() if self.highlight else ""
        return render_template(self.template, content=body, style=style)

    def markdown_to_xhtml(self, src: Path, dst: Path) -> Path:
        """Render the Markdown file ``src`` into ``dst``.

        Parent directories of ``dst`` are created as needed.
        """
        page = self.convert_text(src.read_text(encoding="utf-8"))
        dst.parent.mkdir(parents=True, exist_ok=True)
        dst.write_text(page, encoding="utf-8")
        logger.info("Rendered %s -> %s", src, dst)
        return dst
