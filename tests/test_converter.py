"""Tests for Markdown to XHTML conversion."""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from conversio.converter import (
    DEFAULT_TEMPLATE,
    Converter,
    highlight_css,
    render_markdown,
    render_template,
)
from conversio.exceptions import TemplateError
from conversio.htmltoc import TocOptions


class TestRenderMarkdown:
    """Tests for render_markdown function."""

    def test_headings_render_one_per_line(self) -> None:
        html = render_markdown("# Intro\n\nText.\n\n## Details\n")

        assert html.split("\n") == ["<h1>Intro</h1>", "<p>Text.</p>", "<h2>Details</h2>"]

    def test_highlight_marks_code_blocks(self) -> None:
        html = render_markdown("```python\nx = 1\n```\n", highlight=True)

        assert 'class="codehilite"' in html

    def test_plain_code_blocks_without_highlight(self) -> None:
        html = render_markdown("```python\nx = 1\n```\n")

        assert "codehilite" not in html
        assert "<pre><code" in html

    def test_highlight_css_targets_code_class(self) -> None:
        assert ".codehilite" in highlight_css()


class TestRenderTemplate:
    """Tests for render_template function."""

    def test_fills_slots(self) -> None:
        page = render_template("<style>$style</style><body>$content</body>", content="<p>x</p>", style="p{}")

        assert page == "<style>p{}</style><body><p>x</p></body>"

    def test_style_slot_is_optional(self) -> None:
        assert render_template("<body>${content}</body>", content="x") == "<body>x</body>"

    def test_content_with_dollar_sign_is_kept(self) -> None:
        assert render_template("$content", content="costs $5") == "costs $5"

    def test_missing_content_slot(self) -> None:
        with pytest.raises(TemplateError, match=r"no \$content slot"):
            render_template("<body></body>", content="x")

    def test_unknown_slot(self) -> None:
        with pytest.raises(TemplateError, match="Unknown template slot"):
            render_template("<title>$title</title>$content", content="x")

    def test_invalid_placeholder(self) -> None:
        with pytest.raises(TemplateError, match="invalid"):
            render_template("$content $1", content="x")


class TestConverter:
    """Tests for the Converter class."""

    def test_default_page_has_toc_and_anchors(self) -> None:
        converter = Converter(toc_options=TocOptions(style="list"))

        page = converter.convert_text("# Intro\n\n## Details\n")

        assert page.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        soup = BeautifulSoup(page, "lxml")
        toc = soup.find("div", id="toc")
        assert toc is not None
        assert [a["href"] for a in toc.find_all("a")] == ["#intro", "#details"]
        assert soup.find("a", attrs={"name": "details"}) is not None

    def test_marker_in_markdown(self) -> None:
        converter = Converter(toc_options=TocOptions(style="div"))

        page = converter.convert_text("# Cover\n\n%TOC\n\n# One\n")

        assert "%TOC" not in page
        assert '<h1>Cover</h1>' in page
        assert '<span class="numbering">1</span>&nbsp;One' in page

    def test_without_toc(self) -> None:
        converter = Converter(include_toc=False)

        page = converter.convert_text("# Intro\n")

        assert 'id="toc"' not in page
        assert "<h1>Intro</h1>" in page

    def test_highlight_fills_style_slot(self) -> None:
        converter = Converter("<style>$style</style>$content", highlight=True)

        page = converter.convert_text("```\ncode\n```\n")

        style, _, _ = page.partition("</style>")
        assert ".codehilite" in style
        assert 'class="codehilite"' in page

    def test_default_template_is_used(self) -> None:
        assert Converter().template == DEFAULT_TEMPLATE

    def test_empty_template_is_rejected(self) -> None:
        converter = Converter("")

        with pytest.raises(TemplateError, match=r"no \$content slot"):
            converter.convert_text("# Intro\n")

    def test_markdown_to_xhtml_writes_file(self, tmp_path: Path) -> None:
        src = tmp_path / "doc.markdown"
        src.write_text("# Title\n", encoding="utf-8")
        dst = tmp_path / "out" / "nested" / "doc.html"

        written = Converter("$content", toc_options=TocOptions(style="list")).markdown_to_xhtml(src, dst)

        assert written == dst
        assert dst.read_text(encoding="utf-8").endswith('<h1><a name="title"></a>Title</h1>')
