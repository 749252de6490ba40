"""Writer for the merged text.

The merged string is written exactly as produced: newline characters are not
translated and no trailing newline is appended.  Parent directories are
created when missing.
"""

from __future__ import annotations

import os
from pathlib import Path


def write_merged_text(
    path: str | os.PathLike[str],
    text: str,
    *,
    encoding: str = "utf-8",
) -> Path:
    """Write ``text`` to ``path`` and return the destination path.

    ``OSError`` and ``LookupError`` (unknown ``encoding``) propagate to the
    caller.
    """

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding=encoding, newline="") as f:
        f.write(text)
    return file_path


__all__ = ["write_merged_text"]
