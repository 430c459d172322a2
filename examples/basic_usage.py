"""
Basic usage example for SlideTOC.

This example shows how to build slide indexes and TOC documents
for a folder of presentations using the Python API.
"""

from pathlib import Path
from slidetoc import IndexPipeline, TocPipeline
from slidetoc.settings import GeneratorSettings


def main():
    # Default settings: python-pptx / python-docx backend, skip "reference" paths
    settings = GeneratorSettings(
        backend="python",  # Use "com" to drive PowerPoint and Word on Windows
        exclude="reference",  # Paths containing this text are ignored
        locale="en",  # Header/footer caption language
        force=False,  # Keep up-to-date outputs
    )

    decks = Path("examples/decks")

    # <deck>.index.txt next to every presentation
    index_summary = IndexPipeline.from_settings(settings).process(decks)

    # <deck>.toc.docx next to every presentation
    toc_summary = TocPipeline.from_settings(settings).process(decks)

    print("\n✓ Done!")
    print(f"  Indexes written: {index_summary.written}, skipped: {index_summary.skipped}")
    print(f"  TOCs written: {toc_summary.written}, skipped: {toc_summary.skipped}")


if __name__ == "__main__":
    main()
