"""
Outline classification of slide titles.

Slide titles follow a loose numbering convention ("1. Intro", "1.1 Background",
"1.1.1 Detail", "第2章 ...") that is not applied everywhere, so titles are
matched against an ordered rule table. The first matching rule decides the
level. Once any structural title has been seen, unnumbered titles are listed
as subsections of the current heading.

Priority table (first match wins):

    #  rule                 level        listing flag
    1  empty title          (skipped)    unchanged
    2  subsection pattern   subsection   set
    3  section pattern      section      set
    4  chapter pattern      chapter      set  (blank separator before it)
    5  appendix marker      chapter      set
    6  listing flag set     subsection   set
    7  default              section      unchanged
"""

import re
from typing import Callable, Iterable, List, NamedTuple, Optional

from slidetoc.models import Outline, OutlineEntry, OutlineLevel, SlideEntry

# ASCII or full-width period; \d already covers full-width digits.
_DOT = r"[.．]"
_LETTER = r"[A-ZＡ-Ｚ]"

SUBSECTION_PATTERNS: List[re.Pattern] = [
    re.compile(rf"^\s*\d+{_DOT}\d+{_DOT}\d+"),
    re.compile(rf"^\s*{_LETTER}[\s.．]?\d+{_DOT}\d+"),
]

SECTION_PATTERNS: List[re.Pattern] = [
    re.compile(rf"^\s*\d+{_DOT}\d+(?!\d)"),
    re.compile(rf"^\s*{_LETTER}[\s.．]?\d+(?!\d|{_DOT}\d)"),
    re.compile(r"^\s*(?:本章|目次|目的|目標)"),
    re.compile(
        r"^\s*(?:this\s+chapter|table\s+of\s+contents|contents|objectives?)\b",
        re.IGNORECASE,
    ),
]

CHAPTER_PATTERNS: List[re.Pattern] = [
    re.compile(r"^\s*chapter\s*\d+", re.IGNORECASE),
    re.compile(r"^\s*第\s*\d+\s*章"),
    re.compile(rf"^\s*\d+{_DOT}(?!\d)"),
    re.compile(r"^\s*§"),
]

APPENDIX_PATTERN: re.Pattern = re.compile(r"appendix|付録", re.IGNORECASE)


class Rule(NamedTuple):
    """One row of the classification table."""

    name: str
    predicate: Callable[[str, bool], bool]
    level: OutlineLevel
    sets_flag: bool = True
    separator: bool = False


def _any_of(patterns: Iterable[re.Pattern]) -> Callable[[str, bool], bool]:
    patterns = list(patterns)

    def predicate(title: str, listing: bool) -> bool:
        return any(p.search(title) for p in patterns)

    return predicate


RULES: List[Rule] = [
    Rule("subsection", _any_of(SUBSECTION_PATTERNS), OutlineLevel.SUBSECTION),
    Rule("section", _any_of(SECTION_PATTERNS), OutlineLevel.SECTION),
    Rule("chapter", _any_of(CHAPTER_PATTERNS), OutlineLevel.CHAPTER, separator=True),
    Rule("appendix", _any_of([APPENDIX_PATTERN]), OutlineLevel.CHAPTER),
    Rule("continuation", lambda title, listing: listing, OutlineLevel.SUBSECTION),
    Rule("default", lambda title, listing: True, OutlineLevel.SECTION, sets_flag=False),
]


class OutlineClassifier:
    """
    Stateful classifier for the titles of one presentation.

    Holds the "currently listing subsections" flag; create one instance per
    document (or call reset()).
    """

    def __init__(self, rules: Optional[List[Rule]] = None):
        self.rules = list(rules) if rules is not None else list(RULES)
        self.listing_subsections = False

    def reset(self) -> None:
        self.listing_subsections = False

    def match(self, title: str) -> Optional[Rule]:
        """Return the first rule matching title, updating the flag. None for empty titles."""
        if not title or not title.strip():
            return None

        for rule in self.rules:
            if rule.predicate(title, self.listing_subsections):
                if rule.sets_flag:
                    self.listing_subsections = True
                return rule

        return None

    def classify(self, title: str) -> Optional[OutlineLevel]:
        rule = self.match(title)
        return rule.level if rule else None


def build_outline(
    slides: Iterable[SlideEntry],
    source: str = "",
    classifier: Optional[OutlineClassifier] = None,
) -> Outline:
    """
    Classify slides in order into an Outline.

    Slides with an empty title produce no entry. A blank separator entry is
    placed before every numbered chapter except when it is the first entry.

    Args:
        slides: SlideEntry objects in slide order
        source: Name of the presentation (kept on the Outline for reporting)
        classifier: Classifier to use; a fresh one by default

    Returns:
        Outline with one entry per non-empty title, plus separators
    """
    classifier = classifier or OutlineClassifier()
    outline = Outline(source=source)

    for slide in slides:
        rule = classifier.match(slide.title)
        if rule is None:
            continue

        if rule.separator and outline.entries:
            outline.entries.append(OutlineEntry.separator())

        outline.entries.append(
            OutlineEntry(
                level=rule.level,
                title=slide.title.strip(),
                page_number=slide.page_number,
            )
        )

    return outline
