"""
TOC writer driving Microsoft Word through COM automation.

Windows only; requires Word and pywin32.
"""

from pathlib import Path
from typing import Optional

from slidetoc.models import OutlineEntry
from slidetoc.readers.com_reader import dispatch
from slidetoc.writers.base import BaseWriter, TocDocument, TocStyle

# Word object model constants
WD_ALIGN_PARAGRAPH_CENTER = 1
WD_ALIGN_PARAGRAPH_RIGHT = 2
WD_ALIGN_PARAGRAPH_JUSTIFY = 3
WD_ALIGN_TAB_RIGHT = 2
WD_TAB_LEADER_DOTS = 1
WD_HEADER_FOOTER_PRIMARY = 1
WD_BORDER_BOTTOM = -3
WD_LINE_STYLE_SINGLE = 1
WD_FIELD_PAGE = 33
WD_FORMAT_XML_DOCUMENT = 12
WD_DO_NOT_SAVE_CHANGES = 0

POINTS_PER_CM = 72 / 2.54


class ComTocDocument(TocDocument):
    """A TOC being built as an open Word document."""

    def __init__(self, style: TocStyle, document):
        super().__init__(style)
        self.document = document

    def _write_entry(self, entry: OutlineEntry, first: bool) -> None:
        if not first:
            self.document.Content.InsertParagraphAfter()
        paragraph = self.document.Paragraphs.Last

        if entry.is_separator:
            return

        paragraph.Range.InsertBefore(f"{entry.title}\t{entry.page_number}")

        fmt = paragraph.Format
        fmt.LeftIndent = self.style.left_indent(entry.level) * POINTS_PER_CM
        fmt.RightIndent = self.style.right_indent * POINTS_PER_CM
        fmt.Alignment = WD_ALIGN_PARAGRAPH_JUSTIFY
        fmt.TabStops.ClearAll()
        fmt.TabStops.Add(
            Position=self.style.tab_position * POINTS_PER_CM,
            Alignment=WD_ALIGN_TAB_RIGHT,
            Leader=WD_TAB_LEADER_DOTS,
        )

        font = paragraph.Range.Font
        font.Bold = self.style.is_bold(entry.level)
        font.Size = self.style.font_size
        if self.style.font_name:
            font.Name = self.style.font_name

    def set_header_footer(self, caption: str) -> None:
        section = self.document.Sections.Item(1)

        header = section.Headers.Item(WD_HEADER_FOOTER_PRIMARY).Range
        header.Text = caption
        header.ParagraphFormat.Alignment = WD_ALIGN_PARAGRAPH_RIGHT
        header.ParagraphFormat.Borders.Item(WD_BORDER_BOTTOM).LineStyle = WD_LINE_STYLE_SINGLE

        footer = section.Footers.Item(WD_HEADER_FOOTER_PRIMARY).Range
        footer.Text = f"{caption}  "
        footer.ParagraphFormat.Alignment = WD_ALIGN_PARAGRAPH_CENTER
        # Before the final paragraph mark, which a range end would be past
        page_range = footer.Duplicate
        page_range.SetRange(footer.End - 1, footer.End - 1)
        footer.Fields.Add(page_range, WD_FIELD_PAGE)

    def save(self, path: Path) -> Path:
        # Word writes through its own temporary file and keeps the target open,
        # so the document is saved in place rather than renamed afterwards.
        path = Path(path).resolve()
        self.document.SaveAs2(str(path), FileFormat=WD_FORMAT_XML_DOCUMENT)
        print(f"[COM] Saved TOC to {path}")
        return path

    def close(self) -> None:
        self.document.Close(SaveChanges=WD_DO_NOT_SAVE_CHANGES)


class ComWriter(BaseWriter):
    """
    Create TOC documents through Word.Application.

    One Word instance is started on the first create() and reused until quit().
    """

    def __init__(self, style: Optional[TocStyle] = None):
        super().__init__(style)
        self._app = None

    @property
    def app(self):
        if self._app is None:
            print("[COM] Starting Word")
            self._app = dispatch("Word.Application")
            self._app.Visible = False
        return self._app

    def create(self) -> ComTocDocument:
        return ComTocDocument(self.style, self.app.Documents.Add())

    def quit(self) -> None:
        if self._app is not None:
            print("[COM] Quitting Word")
            self._app.Quit()
            self._app = None
