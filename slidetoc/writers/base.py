"""
Base writer interface for table-of-contents documents.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional
from pydantic import BaseModel, Field

from slidetoc.models import Outline, OutlineEntry, OutlineLevel

CAPTIONS: Dict[str, Dict[str, str]] = {
    "ja": {
        "main": "目次（本編）",
        "appendix": "目次（付録）",
        "default": "目次",
    },
    "en": {
        "main": "Contents (Main Volume)",
        "appendix": "Contents (Appendix)",
        "default": "Contents",
    },
}


def caption_for(base_name: str, locale: str = "ja") -> str:
    """
    Pick the header/footer caption from an output file's base name.

    "main" wins over "appendix" when a name contains both.
    """
    captions = CAPTIONS[locale]
    name = base_name.lower()
    if "main" in name:
        return captions["main"]
    if "appendix" in name:
        return captions["appendix"]
    return captions["default"]


class TocStyle(BaseModel):
    """Paragraph layout of TOC entries. Lengths are in centimetres."""

    chapter_indent: float = Field(default=0.0, ge=0)
    section_indent: float = Field(default=1.0, ge=0)
    subsection_indent: float = Field(default=2.0, ge=0)
    right_indent: float = Field(default=0.5, ge=0)
    tab_position: float = Field(default=15.5, gt=0)
    font_size: float = Field(default=10.5, gt=0)
    font_name: Optional[str] = None

    def left_indent(self, level: OutlineLevel) -> float:
        return {
            OutlineLevel.CHAPTER: self.chapter_indent,
            OutlineLevel.SECTION: self.section_indent,
            OutlineLevel.SUBSECTION: self.subsection_indent,
        }[level]

    @staticmethod
    def is_bold(level: OutlineLevel) -> bool:
        return level == OutlineLevel.CHAPTER


class TocDocument(ABC):
    """
    One TOC document being built.

    Tracks whether its first paragraph has been written: the first entry
    fills the document's initial paragraph, later entries append new ones.
    """

    def __init__(self, style: TocStyle):
        self.style = style
        self.paragraph_count = 0

    def add_entry(self, entry: OutlineEntry) -> None:
        self._write_entry(entry, first=self.paragraph_count == 0)
        self.paragraph_count += 1

    def add_outline(self, outline: Outline) -> None:
        for entry in outline:
            self.add_entry(entry)

    @abstractmethod
    def _write_entry(self, entry: OutlineEntry, first: bool) -> None:
        """
        Emit one paragraph.

        Args:
            entry: Entry to render; separators become an empty paragraph
            first: True for the first paragraph of the document
        """
        pass

    @abstractmethod
    def set_header_footer(self, caption: str) -> None:
        """Attach the caption header and the caption + page-number footer."""
        pass

    @abstractmethod
    def save(self, path: Path) -> Path:
        pass

    @abstractmethod
    def close(self) -> None:
        pass


class BaseWriter(ABC):
    """Abstract base class for TOC document writers."""

    def __init__(self, style: Optional[TocStyle] = None):
        self.style = style or TocStyle()

    @abstractmethod
    def create(self) -> TocDocument:
        """Start a new, empty TOC document."""
        pass

    def quit(self) -> None:
        """Release the backend application, if any. Called once per run."""
