"""
Orchestration pipelines for SlideTOC.

Walks a directory of presentations and regenerates the slide index or the
table-of-contents document for every file whose output is missing or stale.
"""

import sys
from pathlib import Path
from typing import Optional

from slidetoc.classifier import build_outline
from slidetoc.models import ProcessResult, RunSummary
from slidetoc.readers import BaseReader, get_reader
from slidetoc.settings import GeneratorSettings
from slidetoc.walker import discover, is_fresh, output_path_for
from slidetoc.writers import BaseWriter, IndexWriter, caption_for, get_writer


class BasePipeline:
    """
    Shared directory scan for the index and TOC pipelines.

    Files are processed one at a time with a single reader instance, which
    is released once when the scan ends, whether it succeeded or not.
    """

    label = ""
    suffix = ""

    def __init__(self, reader: BaseReader, settings: Optional[GeneratorSettings] = None):
        self.reader = reader
        self.settings = settings or GeneratorSettings()

    def process(self, root: Path) -> RunSummary:
        """
        Process every presentation under root.

        Args:
            root: Directory to scan recursively

        Returns:
            RunSummary with one ProcessResult per discovered file
        """
        root = Path(root)
        summary = RunSummary()

        print(f"\n{'='*60}")
        print(f"SlideTOC {self.label}")
        print(f"{'='*60}")
        print(f"Root: {root}")
        print(f"Backend: {self.settings.backend}")
        print(f"Exclude: {self.settings.exclude!r}")
        print(f"{'='*60}\n")

        try:
            inputs = discover(root, self.reader.extensions, self.settings.exclude)
            print(f"[Walker] Found {len(inputs)} presentation(s)")

            for input_path in inputs:
                summary.results.append(self.process_file(input_path))
        finally:
            self.release()

        print(f"\n{'='*60}")
        print(f"✓ {self.label} Complete")
        print(f"{'='*60}")
        print(f"Written: {summary.written}")
        print(f"Skipped: {summary.skipped}")
        print(f"{'='*60}\n")

        return summary

    def process_file(self, input_path: Path) -> ProcessResult:
        """Regenerate the output for one presentation unless it is fresh."""
        input_path = Path(input_path)
        output_path = output_path_for(input_path, self.suffix)

        if not self.settings.force and is_fresh(input_path, output_path):
            print(f"skipping {input_path}")
            return ProcessResult(
                input_path=input_path, output_path=output_path, status="skipped"
            )

        entries = self.generate(input_path, output_path)
        print(f"Completed: {output_path}.")
        return ProcessResult(
            input_path=input_path,
            output_path=output_path,
            status="written",
            entries=entries,
        )

    def generate(self, input_path: Path, output_path: Path) -> int:
        """Write output_path for input_path; return the number of entries written."""
        raise NotImplementedError

    def release(self) -> None:
        self.reader.quit()


class IndexPipeline(BasePipeline):
    """Extract "title<TAB>page" index files from presentations."""

    label = "Index"
    suffix = ".index.txt"

    def __init__(
        self,
        reader: BaseReader,
        settings: Optional[GeneratorSettings] = None,
        index_writer: Optional[IndexWriter] = None,
    ):
        super().__init__(reader, settings)
        self.index_writer = index_writer or IndexWriter()

    @classmethod
    def from_settings(cls, settings: GeneratorSettings) -> "IndexPipeline":
        return cls(get_reader(settings.backend), settings)

    def generate(self, input_path: Path, output_path: Path) -> int:
        print(f"Extracting index for {input_path}")
        document = self.reader.open(input_path)
        count = self.index_writer.write(self.reader.slides(document), output_path)
        self.reader.close(document)
        print(f"[Index] {count} titled slide(s)")
        return count


class TocPipeline(BasePipeline):
    """Build table-of-contents Word documents from presentations."""

    label = "TOC"
    suffix = ".toc.docx"

    def __init__(
        self,
        reader: BaseReader,
        writer: BaseWriter,
        settings: Optional[GeneratorSettings] = None,
    ):
        super().__init__(reader, settings)
        self.writer = writer

    @classmethod
    def from_settings(cls, settings: GeneratorSettings) -> "TocPipeline":
        return cls(get_reader(settings.backend), get_writer(settings.backend), settings)

    def generate(self, input_path: Path, output_path: Path) -> int:
        print(f"Building TOC for {input_path}")
        presentation = self.reader.open(input_path)
        outline = build_outline(self.reader.slides(presentation), source=input_path.name)
        print(
            f"[TOC] {len(outline.headings)} heading(s), {len(outline.chapters)} chapter(s)"
        )

        toc = self.writer.create()
        toc.add_outline(outline)
        toc.set_header_footer(caption_for(output_path.stem, self.settings.locale))
        toc.save(output_path)

        # The TOC is on disk; a failure to close either document is reported only.
        try:
            toc.close()
        except Exception as e:
            print(f"[TOC] Error closing TOC document for {input_path}: {e}", file=sys.stderr)
        try:
            self.reader.close(presentation)
        except Exception as e:
            print(f"[TOC] Error closing presentation {input_path}: {e}", file=sys.stderr)

        return len(outline.headings)

    def release(self) -> None:
        try:
            self.reader.quit()
        finally:
            self.writer.quit()
