"""
Presentation reader using python-pptx.

Reads .pptx/.pptm files directly, no PowerPoint installation required.
"""

from pathlib import Path
from typing import Iterator

from pptx import Presentation

from slidetoc.models import SlideEntry
from slidetoc.readers.base import BaseReader, clean_title


class PptxReader(BaseReader):
    """Read slide titles from OOXML presentations with python-pptx."""

    extensions = (".pptx", ".pptm")

    def open(self, path: Path):
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Presentation not found: {path}")
        return Presentation(str(path))

    def slides(self, document) -> Iterator[SlideEntry]:
        # <p:presentation firstSlideNum="..."> offsets the displayed numbers
        first_number = int(document._element.get("firstSlideNum", "1"))

        for index, slide in enumerate(document.slides):
            yield SlideEntry(
                title=self._title_text(slide),
                page_number=first_number + index,
            )

    def close(self, document) -> None:
        # python-pptx keeps nothing open once the package is loaded
        pass

    @staticmethod
    def _title_text(slide) -> str:
        title_shape = slide.shapes.title
        if title_shape is None or not title_shape.has_text_frame:
            return ""
        return clean_title(title_shape.text_frame.text)
