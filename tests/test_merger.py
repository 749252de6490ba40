"""Tests for fail-fast document merging."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from docx_factory import document_xml, hyperlink_xml
from docmerge.extract import extract_text
from docmerge.merge import DOCUMENT_SEPARATOR, merge_documents, merge_docx_files
from docmerge.utils.errors import ArchiveEntryNotFound, MalformedMarkup


def test_merge_two_documents() -> None:
    sources = {"a": document_xml("A."), "b": document_xml("B.")}
    assert merge_documents(["a", "b"], sources.__getitem__) == "A.\n\nB."


@pytest.mark.parametrize("strip", [True, False])
def test_merge_matches_joined_extractions(strip: bool) -> None:
    a, b = hyperlink_xml(), document_xml("Plain", "text")
    expected = (extract_text(a, strip) + DOCUMENT_SEPARATOR + extract_text(b, strip)).strip()
    assert merge_documents([a, b], lambda raw: raw, strip) == expected


def test_merge_preserves_order_and_duplicates() -> None:
    sources = {"x": document_xml("X"), "y": document_xml("Y")}
    merged = merge_documents(["y", "x", "y"], sources.__getitem__)
    assert merged == "Y\n\nX\n\nY"


def test_merge_empty_sources() -> None:
    assert merge_documents([], lambda s: b"") == ""


def test_merge_forwards_strip_flag() -> None:
    merged = merge_documents([hyperlink_xml()], lambda raw: raw, True)
    assert merged == "Visible Link Text"


def test_merge_custom_extract() -> None:
    calls: list[tuple[bytes, bool]] = []

    def fake_extract(raw: bytes, strip: bool) -> str:
        calls.append((raw, strip))
        return raw.decode().upper()

    merged = merge_documents(["a", "b"], str.encode, True, extract=fake_extract)
    assert merged == "A\n\nB"
    assert calls == [(b"a", True), (b"b", True)]


def test_merge_stops_at_first_failure() -> None:
    loaded: list[str] = []
    sources = {
        "good": document_xml("fine"),
        "bad": b"<w:t>broken",
        "later": document_xml("never"),
    }

    def load(name: str) -> bytes:
        loaded.append(name)
        return sources[name]

    with pytest.raises(MalformedMarkup) as excinfo:
        merge_documents(["good", "bad", "later"], load)
    assert loaded == ["good", "bad"]
    assert excinfo.value.source == "bad"


def test_merge_docx_files(make_docx: Callable[..., Path]) -> None:
    first = make_docx("1.docx", "First document text.")
    second = make_docx("2.docx", "Second document text.")
    merged = merge_docx_files([first, second])
    assert merged == "First document text.\n\nSecond document text."


def test_merge_docx_files_with_hyperlinks(make_docx: Callable[..., Path]) -> None:
    link = make_docx("link.docx", xml=hyperlink_xml())
    plain = make_docx("plain.docx", "After.")
    assert merge_docx_files([link, plain], True) == "Visible Link Text\n\nAfter."


def test_merge_docx_files_fails_on_invalid_package(
    make_docx: Callable[..., Path], tmp_path: Path
) -> None:
    good = make_docx("good.docx", "ok")
    bad = tmp_path / "bad.docx"
    bad.write_bytes(b"plain bytes")
    with pytest.raises(ArchiveEntryNotFound) as excinfo:
        merge_docx_files([good, bad])
    assert excinfo.value.source == str(bad)
