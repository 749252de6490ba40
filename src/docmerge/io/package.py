"""Archive access for ZIP-based document packages.

:func:`open_entry` returns the complete bytes of one named entry.  The whole
entry is materialized in memory; extraction never reads incrementally from the
archive.

Failure mapping
---------------
- the file is not a ZIP archive, or the entry is absent:
  :class:`ArchiveEntryNotFound`
- the file cannot be opened or the entry cannot be decompressed (missing
  file, permissions, CRC mismatch, unsupported compression method, encrypted
  entry): :class:`ArchiveReadError`
"""

from __future__ import annotations

import os
import zipfile
import zlib

from docmerge.utils.errors import ArchiveEntryNotFound, ArchiveReadError
from docmerge.utils.logging import get_logger

logger = get_logger(__name__)

DOCUMENT_ENTRY = "word/document.xml"

# zipfile raises NotImplementedError for unknown compression methods and
# RuntimeError for encrypted entries read without a password.
_READ_FAILURES = (zipfile.BadZipFile, zlib.error, OSError, NotImplementedError, RuntimeError)

PathLikeStr = os.PathLike[str]


def open_entry(source: str | PathLikeStr, entry_name: str = DOCUMENT_ENTRY) -> bytes:
    """Return the bytes of ``entry_name`` inside the package at ``source``."""

    name = os.fspath(source)
    try:
        archive = zipfile.ZipFile(source)
    except zipfile.BadZipFile as exc:
        raise ArchiveEntryNotFound("not a valid document package", source=name) from exc
    except OSError as exc:
        raise ArchiveReadError(f"cannot open package: {exc.strerror or exc}", source=name) from exc

    with archive:
        try:
            info = archive.getinfo(entry_name)
        except KeyError:
            raise ArchiveEntryNotFound(f"package has no '{entry_name}' entry", source=name) from None
        try:
            data = archive.read(info)
        except _READ_FAILURES as exc:
            raise ArchiveReadError(f"cannot read '{entry_name}': {exc}", source=name) from exc

    logger.debug("Read %d bytes of %s from %s", len(data), entry_name, name)
    return data


def read_document_xml(source: str | PathLikeStr) -> bytes:
    """Return the main markup part of the package at ``source``."""

    return open_entry(source, DOCUMENT_ENTRY)


__all__ = ["DOCUMENT_ENTRY", "open_entry", "read_document_xml"]
