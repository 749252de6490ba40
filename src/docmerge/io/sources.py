"""Expansion of command-line patterns into source paths."""

from __future__ import annotations

import glob
from collections.abc import Iterable
from pathlib import Path

from docmerge.utils.logging import get_logger

logger = get_logger(__name__)


def expand_patterns(patterns: Iterable[str]) -> list[Path]:
    """Expand each glob pattern into matching files.

    Patterns are processed in the given order and the matches of a single
    pattern are sorted.  ``**`` matches across directories.  Directories are
    skipped.  A plain path that exists is returned as is.  Duplicates are kept
    so the caller sees every occurrence it asked for.
    """

    paths: list[Path] = []
    for pattern in patterns:
        matches = sorted(glob.glob(pattern, recursive=True))
        files = [Path(m) for m in matches if Path(m).is_file()]
        if not files:
            logger.warning("No files matched pattern %r", pattern)
            continue
        paths.extend(files)
    return paths


__all__ = ["expand_patterns"]
