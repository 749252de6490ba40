"""Shared fixtures: DOCX packages written into ``tmp_path``."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from docx_factory import document_xml, write_package


@pytest.fixture
def make_docx(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a package whose main part is ``xml`` or built from ``texts``."""

    def _make(name: str = "doc.docx", *texts: str, xml: bytes | None = None) -> Path:
        markup = xml if xml is not None else document_xml(*texts)
        return write_package(tmp_path / name, {"word/document.xml": markup})

    return _make
