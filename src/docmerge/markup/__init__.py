"""Streaming structural view of document markup."""

from .events import (
    EndElement,
    EndOfStream,
    MarkupEvent,
    StartElement,
    TextChunk,
    iter_events,
)

__all__ = [
    "EndElement",
    "EndOfStream",
    "MarkupEvent",
    "StartElement",
    "TextChunk",
    "iter_events",
]
