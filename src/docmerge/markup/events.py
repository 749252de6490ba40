"""Markup event stream.

Purpose:
    Turn the raw bytes of a markup part into a lazy, forward-only sequence of
    structural events.

Events
------
``StartElement(name)`` and ``EndElement(name)`` carry the qualified tag name
exactly as written (``"w:instrText"``); no namespace resolution is performed.
``TextChunk(content)`` carries the character data found between two
structural events with entity references already resolved and surrounding
whitespace trimmed.  Whitespace-only character data is dropped.
``EndOfStream`` is always the final event of a well-formed document.

Notes/Edge cases:
    - Bytes are fed to an incremental expat parser in fixed-size slices, so
      events are produced while later input is still unparsed.  Only the
      character data of the current chunk is buffered.
    - The generator is single use; iterating it a second time yields nothing.
    - Parser failures are translated to :class:`MalformedMarkup` or
      :class:`EncodingError` as soon as they occur.  Events produced before
      the failure may already have been yielded.
"""

from __future__ import annotations

import codecs
import re
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union
from xml.parsers import expat
from xml.parsers.expat import errors as expat_errors

from docmerge.utils.errors import EncodingError, ExtractionError, MalformedMarkup

DEFAULT_CHUNK_SIZE = 64 * 1024

_ENCODING_ERROR_CODES = frozenset(
    expat_errors.codes[message]
    for message in (
        expat_errors.XML_ERROR_UNDEFINED_ENTITY,
        expat_errors.XML_ERROR_BAD_CHAR_REF,
        expat_errors.XML_ERROR_UNKNOWN_ENCODING,
        expat_errors.XML_ERROR_INCORRECT_ENCODING,
        expat_errors.XML_ERROR_PARTIAL_CHAR,
    )
)

# Expat reports bytes that are invalid in the document encoding as an invalid
# token, the same code it uses for syntax such as "<1/>".
_INVALID_TOKEN_CODE = expat_errors.codes[expat_errors.XML_ERROR_INVALID_TOKEN]

_DECLARED_ENCODING = re.compile(
    rb"""\A\s*<\?xml[^>]*?encoding\s*=\s*["']([A-Za-z][A-Za-z0-9._-]*)["']"""
)


@dataclass(slots=True, frozen=True)
class StartElement:
    """An element was opened."""

    name: str


@dataclass(slots=True, frozen=True)
class EndElement:
    """An element was closed."""

    name: str


@dataclass(slots=True, frozen=True)
class TextChunk:
    """Character data between two structural events."""

    content: str


@dataclass(slots=True, frozen=True)
class EndOfStream:
    """The markup was consumed completely."""


MarkupEvent = Union[StartElement, EndElement, TextChunk, EndOfStream]


def sniff_encoding(raw_markup: bytes) -> str:
    """Return the codec name expat will use for ``raw_markup``.

    A byte-order mark wins over the XML declaration; without either the
    markup is UTF-8.
    """

    if raw_markup.startswith(codecs.BOM_UTF8):
        return "utf-8-sig"
    if raw_markup.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return "utf-16"
    match = _DECLARED_ENCODING.match(raw_markup)
    return match.group(1).decode("ascii") if match else "utf-8"


def _decodes(raw_markup: bytes) -> bool:
    try:
        raw_markup.decode(sniff_encoding(raw_markup))
    except UnicodeDecodeError:
        return False
    except LookupError:
        # unknown codecs are reported by expat itself
        return True
    return True


def translate_parser_error(
    exc: expat.ExpatError,
    raw_markup: bytes | None = None,
) -> ExtractionError:
    """Map an expat failure onto the extraction error taxonomy.

    When ``raw_markup`` is given, an invalid token is classified as an
    :class:`EncodingError` if the bytes do not decode in the document
    encoding.
    """

    where = f"line {exc.lineno}, column {exc.offset}"
    reason = expat_errors.messages.get(exc.code, str(exc))
    undecodable = (
        exc.code == _INVALID_TOKEN_CODE and raw_markup is not None and not _decodes(raw_markup)
    )
    if exc.code in _ENCODING_ERROR_CODES or undecodable:
        return EncodingError(f"cannot decode text ({reason}) at {where}")
    return MalformedMarkup(f"malformed markup ({reason}) at {where}")


class _EventCollector:
    """Expat callbacks that queue events and coalesce character data."""

    def __init__(self) -> None:
        self.pending: deque[MarkupEvent] = deque()
        self._text: list[str] = []

    def start(self, name: str, attrs: dict[str, str]) -> None:
        self.flush_text()
        self.pending.append(StartElement(name))

    def end(self, name: str) -> None:
        self.flush_text()
        self.pending.append(EndElement(name))

    def characters(self, data: str) -> None:
        self._text.append(data)

    def boundary(self, *args: str) -> None:
        """Comments and processing instructions split character data."""

        self.flush_text()

    def flush_text(self) -> None:
        if not self._text:
            return
        content = "".join(self._text).strip()
        self._text.clear()
        if content:
            self.pending.append(TextChunk(content))


def _create_parser(collector: _EventCollector) -> expat.XMLParserType:
    parser = expat.ParserCreate()
    parser.buffer_text = True
    parser.StartElementHandler = collector.start
    parser.EndElementHandler = collector.end
    parser.CharacterDataHandler = collector.characters
    parser.CommentHandler = collector.boundary
    parser.ProcessingInstructionHandler = collector.boundary
    return parser


def iter_events(raw_markup: bytes, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[MarkupEvent]:
    """Yield the structural events of ``raw_markup`` in document order.

    Parameters
    ----------
    raw_markup:
        Complete bytes of the markup part.  The declared encoding (UTF-8 when
        absent) is honoured.
    chunk_size:
        Number of bytes handed to the parser per step.

    Raises
    ------
    MalformedMarkup
        If the bytes are not well-formed markup, including empty input and
        unterminated elements.
    EncodingError
        If character data cannot be decoded: an undefined entity, or bytes
        that are invalid in the document encoding.
    """

    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    collector = _EventCollector()
    parser = _create_parser(collector)
    view = memoryview(raw_markup)
    offset = 0
    while True:
        piece = bytes(view[offset : offset + chunk_size])
        offset += len(piece)
        final = offset >= len(view)
        try:
            parser.Parse(piece, final)
        except expat.ExpatError as exc:
            raise translate_parser_error(exc, raw_markup) from exc
        if final:
            collector.flush_text()
        while collector.pending:
            yield collector.pending.popleft()
        if final:
            break
    yield EndOfStream()


__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "EndElement",
    "EndOfStream",
    "MarkupEvent",
    "StartElement",
    "TextChunk",
    "iter_events",
    "sniff_encoding",
    "translate_parser_error",
]
