"""
Presentation readers producing SlideEntry records.

Supports multiple backends:
- python-pptx (default, cross-platform)
- PowerPoint COM automation (Windows, also reads .ppt)
"""

from slidetoc.readers.base import BaseReader, clean_title
from slidetoc.readers.pptx_reader import PptxReader
from slidetoc.readers.com_reader import ComReader

READERS = {
    "python": PptxReader,
    "com": ComReader,
}


def get_reader(name: str) -> BaseReader:
    """Create the reader for a backend name."""
    try:
        return READERS[name]()
    except KeyError:
        raise ValueError(f"Unknown reader backend: {name}") from None


__all__ = ["BaseReader", "PptxReader", "ComReader", "clean_title", "get_reader"]
