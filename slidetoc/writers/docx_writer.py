"""
TOC writer using python-docx.

Builds the .docx file directly, no Word installation required.
"""

from pathlib import Path

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH, WD_TAB_ALIGNMENT, WD_TAB_LEADER
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Cm, Pt

from slidetoc.models import OutlineEntry
from slidetoc.walker import atomic_output
from slidetoc.writers.base import BaseWriter, TocDocument, TocStyle


def _add_bottom_border(paragraph) -> None:
    """Draw a single line under a paragraph."""
    pPr = paragraph._p.get_or_add_pPr()
    pBdr = OxmlElement("w:pBdr")
    bottom = OxmlElement("w:bottom")
    bottom.set(qn("w:val"), "single")
    bottom.set(qn("w:sz"), "6")
    bottom.set(qn("w:space"), "1")
    bottom.set(qn("w:color"), "auto")
    pBdr.append(bottom)
    pPr.append(pBdr)


def _add_page_field(run) -> None:
    """Insert a PAGE field into a run."""
    fldChar1 = OxmlElement("w:fldChar")
    fldChar1.set(qn("w:fldCharType"), "begin")
    run._r.append(fldChar1)

    instrText = OxmlElement("w:instrText")
    instrText.set(qn("xml:space"), "preserve")
    instrText.text = " PAGE "
    run._r.append(instrText)

    fldChar2 = OxmlElement("w:fldChar")
    fldChar2.set(qn("w:fldCharType"), "end")
    run._r.append(fldChar2)


def _first_paragraph(container):
    """Reuse a container's existing paragraph, emptied, or add one."""
    if container.paragraphs:
        paragraph = container.paragraphs[0]
        paragraph.clear()
        return paragraph
    return container.add_paragraph()


class DocxTocDocument(TocDocument):
    """A TOC being built as a python-docx Document."""

    def __init__(self, style: TocStyle):
        super().__init__(style)
        self.document = Document()

    def _write_entry(self, entry: OutlineEntry, first: bool) -> None:
        if first:
            paragraph = _first_paragraph(self.document)
        else:
            paragraph = self.document.add_paragraph()

        if entry.is_separator:
            return

        fmt = paragraph.paragraph_format
        fmt.left_indent = Cm(self.style.left_indent(entry.level))
        fmt.right_indent = Cm(self.style.right_indent)
        fmt.tab_stops.add_tab_stop(
            Cm(self.style.tab_position), WD_TAB_ALIGNMENT.RIGHT, WD_TAB_LEADER.DOTS
        )
        paragraph.alignment = WD_ALIGN_PARAGRAPH.JUSTIFY

        bold = self.style.is_bold(entry.level)
        for text in (entry.title, f"\t{entry.page_number}"):
            run = paragraph.add_run(text)
            run.bold = bold
            run.font.size = Pt(self.style.font_size)
            if self.style.font_name:
                run.font.name = self.style.font_name

    def set_header_footer(self, caption: str) -> None:
        section = self.document.sections[0]

        header = _first_paragraph(section.header)
        header.add_run(caption)
        _add_bottom_border(header)
        header.alignment = WD_ALIGN_PARAGRAPH.RIGHT

        footer = _first_paragraph(section.footer)
        footer.alignment = WD_ALIGN_PARAGRAPH.CENTER
        footer.add_run(f"{caption}  ")
        _add_page_field(footer.add_run())

    def save(self, path: Path) -> Path:
        path = Path(path)
        with atomic_output(path) as tmp_path:
            self.document.save(str(tmp_path))
        print(f"[DOCX] Saved TOC to {path}")
        return path

    def close(self) -> None:
        self.document = None


class DocxWriter(BaseWriter):
    """Create TOC documents with python-docx."""

    def create(self) -> DocxTocDocument:
        return DocxTocDocument(self.style)
