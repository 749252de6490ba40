"""Plain-text extraction from document markup."""

from .extractor import extract_docx, extract_text
from .field_state import FIELD_INSTRUCTION_TAG, FieldState, next_state

__all__ = [
    "FIELD_INSTRUCTION_TAG",
    "FieldState",
    "extract_docx",
    "extract_text",
    "next_state",
]
