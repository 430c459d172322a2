"""
Presentation reader driving Microsoft PowerPoint through COM automation.

Windows only; requires PowerPoint and pywin32. Unlike the python-pptx
reader this also opens legacy .ppt files.
"""

from pathlib import Path
from typing import Iterator

from slidetoc.models import SlideEntry
from slidetoc.readers.base import BaseReader, clean_title

MSO_TRUE = -1
MSO_FALSE = 0


def dispatch(prog_id: str):
    """Start a new instance of an Office application."""
    try:
        import win32com.client
    except ImportError as e:
        raise RuntimeError(
            "The com backend requires pywin32 on Windows (pip install 'slidetoc[com]')"
        ) from e

    return win32com.client.DispatchEx(prog_id)


class ComReader(BaseReader):
    """
    Read slide titles through PowerPoint.Application.

    One PowerPoint instance is started on the first open() and reused for
    every presentation until quit().
    """

    extensions = (".ppt", ".pptx", ".pptm")

    def __init__(self):
        self._app = None

    @property
    def app(self):
        if self._app is None:
            print("[COM] Starting PowerPoint")
            self._app = dispatch("PowerPoint.Application")
        return self._app

    def open(self, path: Path):
        path = Path(path).resolve()
        return self.app.Presentations.Open(
            str(path), ReadOnly=MSO_TRUE, Untitled=MSO_FALSE, WithWindow=MSO_FALSE
        )

    def slides(self, document) -> Iterator[SlideEntry]:
        slides = document.Slides
        for i in range(1, slides.Count + 1):
            slide = slides.Item(i)
            title = ""
            if slide.Shapes.HasTitle:
                title = clean_title(slide.Shapes.Title.TextFrame.TextRange.Text)
            yield SlideEntry(title=title, page_number=slide.SlideNumber)

    def close(self, document) -> None:
        document.Close()

    def quit(self) -> None:
        if self._app is not None:
            print("[COM] Quitting PowerPoint")
            self._app.Quit()
            self._app = None
