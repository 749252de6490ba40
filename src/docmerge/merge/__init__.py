"""Merging the text of several documents into one string."""

from .merger import DOCUMENT_SEPARATOR, merge_documents, merge_docx_files

__all__ = ["DOCUMENT_SEPARATOR", "merge_documents", "merge_docx_files"]
