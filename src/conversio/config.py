"""Local configuration for conversio."""

from __future__ import annotations

import os


DEFAULT_TOC_STYLE = "list"
DEFAULT_TOC_NUMBERING = "true"
DEFAULT_TOC_CLASS = "toc"
DEFAULT_TOC_MARKER = "%TOC"
DEFAULT_SOURCE_SUFFIX = ".markdown"
DEFAULT_OUTPUT_SUFFIX = ".html"
DEFAULT_LOG_LEVEL = "WARNING"

CONVERSIO_TOC_STYLE = os.getenv("CONVERSIO_TOC_STYLE", DEFAULT_TOC_STYLE)
CONVERSIO_TOC_NUMBERING = os.getenv("CONVERSIO_TOC_NUMBERING", DEFAULT_TOC_NUMBERING).lower() in {"1", "true", "yes"}
CONVERSIO_TOC_CLASS = os.getenv("CONVERSIO_TOC_CLASS", DEFAULT_TOC_CLASS)
# Insertion point placeholder; also gates heading capture above it.
CONVERSIO_TOC_MARKER = os.getenv("CONVERSIO_TOC_MARKER", DEFAULT_TOC_MARKER)
CONVERSIO_SOURCE_SUFFIX = os.getenv("CONVERSIO_SOURCE_SUFFIX", DEFAULT_SOURCE_SUFFIX)
CONVERSIO_OUTPUT_SUFFIX = os.getenv("CONVERSIO_OUTPUT_SUFFIX", DEFAULT_OUTPUT_SUFFIX)
CONVERSIO_LOG_LEVEL = os.getenv("CONVERSIO_LOG_LEVEL", DEFAULT_LOG_LEVEL)
