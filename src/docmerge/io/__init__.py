"""File-system collaborators of the core.

The core never touches the file system itself.  This package reads the main
markup part out of a document package, expands command-line patterns into
source paths and writes the merged result.
"""

from __future__ import annotations

from .output import write_merged_text
from .package import DOCUMENT_ENTRY, open_entry, read_document_xml
from .sources import expand_patterns

__all__ = [
    "DOCUMENT_ENTRY",
    "expand_patterns",
    "open_entry",
    "read_document_xml",
    "write_merged_text",
]
