"""
Plain-text slide index writer.
"""

from pathlib import Path
from typing import Iterable

from slidetoc.models import SlideEntry
from slidetoc.walker import atomic_output


class IndexWriter:
    """Write "title<TAB>page" lines, one per slide with a non-empty title."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    @staticmethod
    def format_lines(entries: Iterable[SlideEntry]):
        return [f"{entry.title}\t{entry.page_number}" for entry in entries if entry.title.strip()]

    def write(self, entries: Iterable[SlideEntry], output_path: Path) -> int:
        """
        Write the index file atomically.

        Returns:
            Number of lines written
        """
        lines = self.format_lines(entries)
        with atomic_output(Path(output_path)) as tmp_path:
            with open(tmp_path, "w", encoding=self.encoding) as f:
                for line in lines:
                    f.write(line + "\n")
        return len(lines)
