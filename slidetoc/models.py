"""
Core data models for SlideTOC.

Defines the slide/outline records passed between readers, the classifier
and the writers, using Pydantic for validation.
"""

from enum import Enum
from pathlib import Path
from typing import List, Literal, Optional
from pydantic import BaseModel, Field


class SlideEntry(BaseModel):
    """One slide's cleaned title and its page number."""

    title: str = ""
    page_number: int = Field(ge=0)


class OutlineLevel(str, Enum):
    """Structural depth of a table-of-contents entry."""

    CHAPTER = "chapter"
    SECTION = "section"
    SUBSECTION = "subsection"


class OutlineEntry(BaseModel):
    """
    A classified slide title, ready for rendering.

    Separator entries carry an empty title and no page number; they render
    as a blank paragraph ahead of a chapter.
    """

    level: OutlineLevel
    title: str = ""
    page_number: Optional[int] = Field(default=None, ge=0)

    @property
    def is_separator(self) -> bool:
        return not self.title and self.page_number is None

    @classmethod
    def separator(cls) -> "OutlineEntry":
        return cls(level=OutlineLevel.CHAPTER)


class Outline(BaseModel):
    """Ordered outline entries for one presentation."""

    source: str = ""
    entries: List[OutlineEntry] = Field(default_factory=list)

    def __iter__(self):
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def headings(self) -> List[OutlineEntry]:
        """Entries that are not blank separators."""
        return [entry for entry in self.entries if not entry.is_separator]

    @property
    def chapters(self) -> List[OutlineEntry]:
        return [e for e in self.headings if e.level == OutlineLevel.CHAPTER]


class ProcessResult(BaseModel):
    """Outcome of processing one input file."""

    input_path: Path
    output_path: Path
    status: Literal["written", "skipped"]
    entries: int = Field(ge=0, default=0)


class RunSummary(BaseModel):
    """All per-file results of one directory scan."""

    results: List[ProcessResult] = Field(default_factory=list)

    @property
    def written(self) -> int:
        return sum(1 for r in self.results if r.status == "written")

    @property
    def skipped(self) -> int:
        return sum(1 for r in self.results if r.status == "skipped")

    def to_dict(self) -> dict:
        """Export to dict for JSON serialization."""
        return self.model_dump(mode="json")
