"""
Base reader interface.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterator, List, Tuple

from slidetoc.models import SlideEntry

# Vertical tab is how PowerPoint encodes a line break inside a paragraph.
_STRIP_CHARS = ("\v", "\t", "\r", "\n")


def clean_title(text: str) -> str:
    """Remove line breaks and tabs from a slide title."""
    if not text:
        return ""
    for ch in _STRIP_CHARS:
        text = text.replace(ch, "")
    return text


class BaseReader(ABC):
    """Abstract base class for presentation readers."""

    extensions: Tuple[str, ...] = (".pptx",)

    @abstractmethod
    def open(self, path: Path) -> Any:
        """
        Open a presentation.

        Args:
            path: Path to the presentation file

        Returns:
            Backend-specific document handle
        """
        pass

    @abstractmethod
    def slides(self, document: Any) -> Iterator[SlideEntry]:
        """
        Enumerate the slides of an opened presentation in order.

        Yields one SlideEntry per slide, title already cleaned (possibly empty).
        """
        pass

    @abstractmethod
    def close(self, document: Any) -> None:
        pass

    def quit(self) -> None:
        """Release the backend application, if any. Called once per run."""

    def read(self, path: Path) -> List[SlideEntry]:
        """Open path, list its slides and close it."""
        document = self.open(path)
        entries = list(self.slides(document))
        self.close(document)
        return entries
