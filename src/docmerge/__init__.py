"""Merge plain text extracted from DOCX documents.

The main markup part of each package is scanned as a stream of structural
events; text runs are joined with single spaces and, on request, the text of
field-instruction elements (hyperlink field codes) is suppressed.  The text of
several documents is joined with a blank line between them.
"""

from .extract import extract_docx, extract_text
from .merge import merge_documents, merge_docx_files
from .utils.errors import (
    ArchiveEntryNotFound,
    ArchiveReadError,
    EncodingError,
    ExtractionError,
    MalformedMarkup,
)

__version__ = "0.1.0"

__all__ = [
    "ArchiveEntryNotFound",
    "ArchiveReadError",
    "EncodingError",
    "ExtractionError",
    "MalformedMarkup",
    "__version__",
    "extract_docx",
    "extract_text",
    "merge_documents",
    "merge_docx_files",
]
