"""
Tests for SlideTOC data models.
"""

from pathlib import Path

import pytest
from slidetoc.models import (
    Outline,
    OutlineEntry,
    OutlineLevel,
    ProcessResult,
    RunSummary,
    SlideEntry,
)


def test_slide_entry_validation():
    """Test SlideEntry validation."""
    entry = SlideEntry(title="1. Intro", page_number=3)
    assert entry.title == "1. Intro"
    assert entry.page_number == 3

    # Negative page numbers are rejected
    with pytest.raises(ValueError):
        SlideEntry(title="x", page_number=-1)


def test_separator_entry():
    """Test blank separator entries."""
    separator = OutlineEntry.separator()
    assert separator.is_separator
    assert separator.level == OutlineLevel.CHAPTER
    assert separator.page_number is None

    heading = OutlineEntry(level=OutlineLevel.CHAPTER, title="2. Methods", page_number=4)
    assert not heading.is_separator


def test_outline_helpers():
    """Test Outline counting helpers."""
    outline = Outline(
        source="deck.pptx",
        entries=[
            OutlineEntry(level=OutlineLevel.CHAPTER, title="1. Intro", page_number=1),
            OutlineEntry(level=OutlineLevel.SECTION, title="1.1 Background", page_number=2),
            OutlineEntry.separator(),
            OutlineEntry(level=OutlineLevel.CHAPTER, title="2. Methods", page_number=3),
        ],
    )

    assert len(outline) == 4
    assert len(outline.headings) == 3
    assert [e.title for e in outline.chapters] == ["1. Intro", "2. Methods"]
    assert [e.title for e in outline][:2] == ["1. Intro", "1.1 Background"]


def test_run_summary_counts():
    """Test RunSummary aggregation and serialization."""
    summary = RunSummary(
        results=[
            ProcessResult(
                input_path=Path("a.pptx"),
                output_path=Path("a.index.txt"),
                status="written",
                entries=5,
            ),
            ProcessResult(
                input_path=Path("b.pptx"),
                output_path=Path("b.index.txt"),
                status="skipped",
            ),
        ]
    )

    assert summary.written == 1
    assert summary.skipped == 1

    data = summary.to_dict()
    assert len(data["results"]) == 2
    assert data["results"][0]["status"] == "written"

    with pytest.raises(ValueError):
        ProcessResult(input_path=Path("a"), output_path=Path("b"), status="failed")
