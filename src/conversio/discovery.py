"""Locate Markdown sources and map them to output paths."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from conversio.config import CONVERSIO_OUTPUT_SUFFIX, CONVERSIO_SOURCE_SUFFIX
from conversio.exceptions import SourceError


def discover_sources(
    src: Path, *, suffix: str = CONVERSIO_SOURCE_SUFFIX
) -> tuple[list[Path], Path]:
    """Find the Markdown files to render.

    Args:
        src: A single file or a directory searched recursively.
        suffix: File suffix of Markdown sources inside a directory.

    Returns:
        Tuple of (sources, root) where root is ``src`` for a directory and the
        parent directory for a single file.

    Raises:
        SourceError: If ``src`` does not exist.
    """
    path = src.expanduser()
    if path.is_dir():
        return sorted(path.rglob(f"*{suffix}")), path
    if path.is_file():
        resolved = path.resolve()
        return [resolved], resolved.parent
    raise SourceError(f"Input not found: {src}")


def resolve_output_paths(
    sources: Iterable[Path],
    root: Path,
    dst: Path | None = None,
    *,
    output_suffix: str = CONVERSIO_OUTPUT_SUFFIX,
) -> dict[Path, Path]:
    """Map every source to its output file.

    Without ``dst`` the output sits next to its source. With ``dst`` the
    layout below ``root`` is recreated below ``dst``.

    Raises:
        SourceError: If an output path would overwrite its source.
    """
    pairs: dict[Path, Path] = {}
    for source in sources:
        target = source.with_suffix(output_suffix)
        if dst is not None:
            target = dst / target.relative_to(root)
        if target == source:
            raise SourceError(f"Output would overwrite its source: {source}")
        pairs[source] = target
    return pairs
