"""
Input discovery and incremental-skip helpers.
"""

import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, List

DEFAULT_EXCLUDE = "reference"


def discover(
    root: Path,
    extensions: Iterable[str],
    exclude: str = DEFAULT_EXCLUDE,
) -> List[Path]:
    """
    Find presentation files under root.

    Args:
        root: Directory to search recursively (a single file is also accepted)
        extensions: Suffixes to accept, e.g. [".pptx", ".pptm"]
        exclude: Files whose path, as reached from root, contains this marker are dropped

    Returns:
        Sorted list of absolute paths
    """
    root = Path(root)
    if not root.exists():
        raise FileNotFoundError(f"Input path not found: {root}")

    suffixes = {ext.lower() for ext in extensions}
    candidates = [root] if root.is_file() else root.rglob("*")

    found = []
    for path in candidates:
        if not path.is_file() or path.suffix.lower() not in suffixes:
            continue
        # Marker is matched against the path as reached from root, before resolving
        if exclude and exclude in str(path):
            continue
        found.append(path.resolve())

    return sorted(found)


def output_path_for(input_path: Path, suffix: str) -> Path:
    """Same directory and base name as input_path, with a fixed suffix."""
    input_path = Path(input_path)
    return input_path.with_name(input_path.stem + suffix)


def is_fresh(input_path: Path, output_path: Path) -> bool:
    """True when output_path exists and is not older than input_path."""
    output_path = Path(output_path)
    if not output_path.exists():
        return False
    return output_path.stat().st_mtime >= Path(input_path).stat().st_mtime


@contextmanager
def atomic_output(path: Path) -> Iterator[Path]:
    """
    Yield a temporary sibling of path; move it over path on success.

    If the body raises, the temporary file is removed and any previous
    output at path is left untouched.
    """
    path = Path(path)
    tmp_path = path.with_name(f".{path.stem}.tmp{path.suffix}")
    try:
        yield tmp_path
        os.replace(tmp_path, path)
    except BaseException:
        if tmp_path.exists():
            tmp_path.unlink()
        raise
