"""
Command-line interface for SlideTOC.
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from slidetoc import __version__
from slidetoc.pipeline import IndexPipeline, TocPipeline
from slidetoc.settings import BACKENDS, LOCALES, GeneratorSettings

PIPELINES = {
    "index": IndexPipeline,
    "toc": TocPipeline,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slidetoc",
        description="SlideTOC: slide title indexes and table-of-contents documents from presentations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Write <deck>.index.txt next to every presentation under ./decks
  slidetoc index ./decks

  # Build <deck>.toc.docx files with PowerPoint and Word (Windows)
  slidetoc toc ./decks --backend com

  # Regenerate everything, English captions
  slidetoc toc ./decks --force --locale en

Environment Variables:
  SLIDETOC_BACKEND    Document backend (python or com)
  SLIDETOC_EXCLUDE    Skip files whose path contains this marker
  SLIDETOC_LOCALE     Header/footer caption language (ja or en)
  SLIDETOC_FORCE      Set to 1 to ignore the freshness check
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"SlideTOC {__version__}",
    )

    parser.add_argument(
        "command",
        choices=sorted(PIPELINES),
        help="index: plain-text title index, toc: Word table of contents",
    )

    _add_common_arguments(parser)
    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "root",
        type=Path,
        help="Directory searched recursively for presentations",
    )

    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        help="Document backend (default: python)",
    )

    parser.add_argument(
        "--exclude",
        help="Skip files whose path contains this text (default: reference)",
    )

    parser.add_argument(
        "--locale",
        choices=LOCALES,
        help="Header/footer caption language (default: ja)",
    )

    parser.add_argument(
        "--force",
        action="store_true",
        default=None,
        help="Regenerate outputs even when they are newer than their inputs",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print a traceback on failure",
    )


def run(command: str, args: argparse.Namespace) -> int:
    """Run one pipeline for parsed arguments; return the exit code."""
    if not args.root.exists():
        print(f"Error: Input path not found: {args.root}", file=sys.stderr)
        return 1

    try:
        settings = GeneratorSettings.from_env(
            backend=args.backend,
            exclude=args.exclude,
            locale=args.locale,
            force=args.force,
        )
        pipeline = PIPELINES[command].from_settings(settings)
        pipeline.process(args.root)
        return 0

    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130

    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        if args.debug:
            import traceback
            traceback.print_exc()
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    load_dotenv()  # Load .env file if present

    args = build_parser().parse_args(argv)
    return run(args.command, args)


def _single_command_main(command: str, argv: Optional[List[str]]) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog=f"slidetoc-{command}",
        description=f"Run the SlideTOC {command} generator over a directory",
    )
    _add_common_arguments(parser)
    args = parser.parse_args(argv)
    return run(command, args)


def index_main(argv: Optional[List[str]] = None) -> int:
    """Entry point for slidetoc-index ROOT."""
    return _single_command_main("index", argv)


def toc_main(argv: Optional[List[str]] = None) -> int:
    """Entry point for slidetoc-toc ROOT."""
    return _single_command_main("toc", argv)


if __name__ == "__main__":
    sys.exit(main())
