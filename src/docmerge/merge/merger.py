"""Fail-fast merge of extracted document text.

Each source is loaded, extracted and appended to the result followed by
:data:`DOCUMENT_SEPARATOR`; the final string is trimmed of outer whitespace.
Order follows the input and nothing is deduplicated.

The first failing source aborts the merge and its error propagates unchanged.
Remaining sources are not touched and no partial merge is returned.  Callers
that want best-effort behaviour must loop over :func:`extract_docx`
themselves.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from typing import TypeVar

from docmerge.extract.extractor import extract_text
from docmerge.io.package import read_document_xml
from docmerge.utils.errors import ExtractionError
from docmerge.utils.logging import get_logger

logger = get_logger(__name__)

DOCUMENT_SEPARATOR = "\n\n"

S = TypeVar("S")

Extractor = Callable[[bytes, bool], str]


def merge_documents(
    sources: Iterable[S],
    load: Callable[[S], bytes],
    strip_field_instructions: bool = False,
    *,
    extract: Extractor = extract_text,
) -> str:
    """Return the merged text of ``sources``.

    Parameters
    ----------
    sources:
        Ordered source identifiers.
    load:
        Returns the raw markup bytes of one source.
    strip_field_instructions:
        Forwarded to ``extract`` for every source.
    extract:
        Turns raw markup into text; :func:`extract_text` by default.

    Raises
    ------
    ExtractionError
        The error of the first source that failed, with ``source`` set.
    """

    parts: list[str] = []
    count = 0
    for source in sources:
        try:
            raw = load(source)
            text = extract(raw, strip_field_instructions)
        except ExtractionError as exc:
            if exc.source is None:
                exc.source = _describe(source)
            logger.error("Aborting merge after %d document(s): %s", count, exc)
            raise
        parts.append(text)
        parts.append(DOCUMENT_SEPARATOR)
        count += 1
        logger.debug("Merged %s (%d chars)", _describe(source), len(text))

    return "".join(parts).strip()


def merge_docx_files(
    paths: Iterable[str | os.PathLike[str]],
    strip_field_instructions: bool = False,
) -> str:
    """Merge the text of the document packages at ``paths``."""

    return merge_documents(paths, read_document_xml, strip_field_instructions)


def _describe(source: object) -> str:
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    return repr(source)


__all__ = ["DOCUMENT_SEPARATOR", "merge_documents", "merge_docx_files"]
