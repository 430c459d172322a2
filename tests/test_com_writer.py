"""
Tests for the Word automation writer, run against stand-in COM objects.
"""

from types import SimpleNamespace

from slidetoc.writers import TocStyle
from slidetoc.writers.com_writer import (
    WD_ALIGN_PARAGRAPH_CENTER,
    WD_ALIGN_PARAGRAPH_RIGHT,
    WD_BORDER_BOTTOM,
    WD_FIELD_PAGE,
    WD_LINE_STYLE_SINGLE,
    ComTocDocument,
)


class FakeFields:
    def __init__(self):
        self.added = []

    def Add(self, rng, field_type):
        self.added.append((rng.Start, rng.End, field_type))


class FakeBorders:
    def __init__(self):
        self.items = {}

    def Item(self, index):
        return self.items.setdefault(index, SimpleNamespace(LineStyle=None))


class FakeRange:
    """Story range whose text always ends with Word's paragraph mark."""

    def __init__(self, owner=None, start=None, end=None):
        self.owner = owner or self
        self.Start = start
        self.End = end
        if owner is None:
            self._text = "\r"
            self.Start, self.End = 0, 1
            self.Fields = FakeFields()
            self.ParagraphFormat = SimpleNamespace(Alignment=None, Borders=FakeBorders())

    @property
    def Text(self):
        return self._text

    @Text.setter
    def Text(self, value):
        self._text = value + "\r"
        self.End = len(self._text)

    @property
    def Duplicate(self):
        return FakeRange(self.owner, self.Start, self.End)

    def SetRange(self, start, end):
        self.Start, self.End = start, end


class FakeStory:
    def __init__(self):
        self.Range = FakeRange()


class FakeSection:
    def __init__(self):
        self.header = FakeStory()
        self.footer = FakeStory()
        self.Headers = SimpleNamespace(Item=lambda index: self.header)
        self.Footers = SimpleNamespace(Item=lambda index: self.footer)


class FakeDocument:
    def __init__(self):
        self.section = FakeSection()
        self.Sections = SimpleNamespace(Item=lambda index: self.section)


def test_com_header_caption_and_border():
    """Header holds the caption, right aligned, with a bottom border."""
    word_doc = FakeDocument()
    ComTocDocument(TocStyle(), word_doc).set_header_footer("Contents")

    header = word_doc.section.header.Range
    assert header.Text == "Contents\r"
    assert header.ParagraphFormat.Alignment == WD_ALIGN_PARAGRAPH_RIGHT
    assert header.ParagraphFormat.Borders.Item(WD_BORDER_BOTTOM).LineStyle == WD_LINE_STYLE_SINGLE


def test_com_footer_page_field_before_paragraph_mark():
    """The PAGE field goes after the caption, inside the footer paragraph."""
    word_doc = FakeDocument()
    ComTocDocument(TocStyle(), word_doc).set_header_footer("Contents")

    footer = word_doc.section.footer.Range
    assert footer.Text == "Contents  \r"
    assert footer.ParagraphFormat.Alignment == WD_ALIGN_PARAGRAPH_CENTER

    mark = footer.End - 1
    assert footer.Fields.added == [(mark, mark, WD_FIELD_PAGE)]
    assert footer.Text[mark] == "\r"
