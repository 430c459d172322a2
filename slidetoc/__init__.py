"""
SlideTOC: slide title indexes and table-of-contents documents from presentations.

Reads slide titles (python-pptx or PowerPoint automation), classifies them as
chapter/section/subsection and writes a plain-text index or a formatted
Word table of contents (python-docx or Word automation).
"""

__version__ = "0.1.0"
__author__ = "SlideTOC Team"

from slidetoc.models import SlideEntry, OutlineLevel, OutlineEntry, Outline
from slidetoc.classifier import OutlineClassifier, build_outline
from slidetoc.pipeline import IndexPipeline, TocPipeline

__all__ = [
    "SlideEntry",
    "OutlineLevel",
    "OutlineEntry",
    "Outline",
    "OutlineClassifier",
    "build_outline",
    "IndexPipeline",
    "TocPipeline",
]
