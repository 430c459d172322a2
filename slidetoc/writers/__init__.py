"""
Writers for the slide index and the table-of-contents document.

TOC documents are generated with python-docx, or with Word over COM.
"""

from typing import Optional

from slidetoc.writers.base import BaseWriter, TocDocument, TocStyle, caption_for
from slidetoc.writers.docx_writer import DocxWriter
from slidetoc.writers.com_writer import ComWriter
from slidetoc.writers.index_writer import IndexWriter

WRITERS = {
    "python": DocxWriter,
    "com": ComWriter,
}


def get_writer(name: str, style: Optional[TocStyle] = None) -> BaseWriter:
    """Create the TOC writer for a backend name."""
    try:
        return WRITERS[name](style)
    except KeyError:
        raise ValueError(f"Unknown writer backend: {name}") from None


__all__ = [
    "BaseWriter",
    "TocDocument",
    "TocStyle",
    "DocxWriter",
    "ComWriter",
    "IndexWriter",
    "caption_for",
    "get_writer",
]
