"""Tests for reading entries out of document packages."""

from __future__ import annotations

from pathlib import Path

import pytest

from docx_factory import document_xml, patch_central_directory, write_package
from docmerge.io import DOCUMENT_ENTRY, open_entry, read_document_xml
from docmerge.utils.errors import ArchiveEntryNotFound, ArchiveReadError


def test_read_document_xml(tmp_path: Path) -> None:
    markup = document_xml("Hello")
    path = write_package(tmp_path / "a.docx", {DOCUMENT_ENTRY: markup})
    assert read_document_xml(path) == markup


def test_open_named_entry(tmp_path: Path) -> None:
    path = write_package(
        tmp_path / "a.docx",
        {DOCUMENT_ENTRY: b"<doc/>", "word/footnotes.xml": b"<notes/>"},
    )
    assert open_entry(path, "word/footnotes.xml") == b"<notes/>"
    assert open_entry(str(path)) == b"<doc/>"


def test_missing_entry(tmp_path: Path) -> None:
    path = write_package(tmp_path / "a.docx", {"word/styles.xml": b"<s/>"})
    with pytest.raises(ArchiveEntryNotFound) as excinfo:
        read_document_xml(path)
    assert DOCUMENT_ENTRY in str(excinfo.value)
    assert excinfo.value.source == str(path)


def test_not_a_zip(tmp_path: Path) -> None:
    path = tmp_path / "fake.docx"
    path.write_bytes(b"PK? not really")
    with pytest.raises(ArchiveEntryNotFound):
        read_document_xml(path)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ArchiveReadError) as excinfo:
        read_document_xml(tmp_path / "nope.docx")
    assert "nope.docx" in str(excinfo.value)


def test_directory_is_read_error(tmp_path: Path) -> None:
    with pytest.raises(ArchiveReadError):
        read_document_xml(tmp_path)


def test_unsupported_compression_is_read_error(tmp_path: Path) -> None:
    path = write_package(tmp_path / "a.docx", {DOCUMENT_ENTRY: document_xml("x")})
    patch_central_directory(path, compress_type=9)
    with pytest.raises(ArchiveReadError) as excinfo:
        read_document_xml(path)
    assert excinfo.value.source == str(path)


def test_encrypted_entry_is_read_error(tmp_path: Path) -> None:
    path = write_package(tmp_path / "a.docx", {DOCUMENT_ENTRY: document_xml("x")})
    patch_central_directory(path, flag_bits=0x1)
    with pytest.raises(ArchiveReadError):
        read_document_xml(path)
