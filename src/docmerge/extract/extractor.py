"""Extract visible text from the main markup part of a document.

:func:`extract_text` consumes the event stream of one markup part exactly once.
Accepted text chunks are joined with a single space and the result is trimmed
of outer whitespace.  When ``strip_field_instructions`` is set, every chunk
seen while inside a field-instruction element is discarded, regardless of its
content; the visible hyperlink label sits outside that element and is kept.

Errors from the parser propagate unchanged; no partial text is returned.
"""

from __future__ import annotations

import os

from docmerge.io.package import read_document_xml
from docmerge.markup.events import EndOfStream, TextChunk, iter_events
from docmerge.utils.errors import ExtractionError
from docmerge.utils.logging import get_logger

from .field_state import FIELD_INSTRUCTION_TAG, FieldState, next_state

logger = get_logger(__name__)

CHUNK_SEPARATOR = " "


def extract_text(
    raw_markup: bytes,
    strip_field_instructions: bool = False,
    *,
    field_tag: str = FIELD_INSTRUCTION_TAG,
) -> str:
    """Return the text content of ``raw_markup``.

    Parameters
    ----------
    raw_markup:
        Bytes of the markup part, e.g. ``word/document.xml``.
    strip_field_instructions:
        Drop text found inside ``field_tag`` elements.
    field_tag:
        Qualified name of the field-instruction element.

    Raises
    ------
    MalformedMarkup
        If ``raw_markup`` is not well-formed.
    EncodingError
        If text content cannot be decoded.
    """

    state = FieldState.NORMAL
    parts: list[str] = []
    skipped = 0
    for event in iter_events(raw_markup):
        if isinstance(event, EndOfStream):
            break
        state = next_state(state, event, field_tag)
        if not isinstance(event, TextChunk):
            continue
        if strip_field_instructions and state is FieldState.IN_FIELD_INSTRUCTION:
            skipped += 1
            continue
        parts.append(event.content)
        parts.append(CHUNK_SEPARATOR)

    if skipped:
        logger.debug("Dropped %d field-instruction chunk(s)", skipped)
    return "".join(parts).strip()


def extract_docx(
    path: str | os.PathLike[str],
    strip_field_instructions: bool = False,
) -> str:
    """Read the main markup part of the package at ``path`` and extract it.

    Raises :class:`ArchiveEntryNotFound` or :class:`ArchiveReadError` in
    addition to the errors of :func:`extract_text`.  Errors carry ``path`` as
    their ``source``.
    """

    raw = read_document_xml(path)
    try:
        text = extract_text(raw, strip_field_instructions)
    except ExtractionError as exc:
        if exc.source is None:
            exc.source = os.fspath(path)
        raise
    logger.debug("Extracted %d chars from %s", len(text), os.fspath(path))
    return text


__all__ = ["CHUNK_SEPARATOR", "extract_docx", "extract_text"]
