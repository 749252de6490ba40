"""Typed exceptions for document extraction and merging.

Every failure surfaced by the core API is an :class:`ExtractionError`
subclass so callers can branch on the error kind instead of inspecting
message text.
"""

from __future__ import annotations


class ExtractionError(Exception):
    """Base class for extraction and merge failures.

    ``source`` names the document that failed when it is known.
    """

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source

    def __str__(self) -> str:
        message = super().__str__()
        if self.source and self.source not in message:
            return f"{self.source}: {message}"
        return message


class ArchiveEntryNotFound(ExtractionError):
    """Raised when a package is not a ZIP archive or lacks the markup part."""


class ArchiveReadError(ExtractionError):
    """Raised when the bytes of a package cannot be read."""


class MalformedMarkup(ExtractionError):
    """Raised when the markup part is not well-formed."""


class EncodingError(ExtractionError):
    """Raised when text content cannot be decoded or unescaped."""


__all__ = [
    "ExtractionError",
    "ArchiveEntryNotFound",
    "ArchiveReadError",
    "MalformedMarkup",
    "EncodingError",
]
