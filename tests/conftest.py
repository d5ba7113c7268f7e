"""Test setup for conversio."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def chapter_html() -> str:
    """Rendered body with two chapters, a subsection and a deep heading."""
    return "\n".join(
        [
            "<h1>Intro</h1>",
            "<p>Welcome.</p>",
            "<h2>Setup Guide</h2>",
            "<h3>Install</h3>",
            "<h4>Footnote</h4>",
            "<h1>Usage</h1>",
        ]
    )


@pytest.fixture
def markdown_tree(tmp_path: Path) -> Path:
    """Directory with two Markdown sources, one nested."""
    root = tmp_path / "docs"
    (root / "guide").mkdir(parents=True)
    (root / "index.markdown").write_text("# Home\n\n## News\n", encoding="utf-8")
    (root / "guide" / "start.markdown").write_text("# Start\n\nText.\n", encoding="utf-8")
    (root / "notes.txt").write_text("not markdown", encoding="utf-8")
    return root
