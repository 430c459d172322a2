"""
Tests for input discovery and the freshness check.
"""

import os
from pathlib import Path

import pytest
from slidetoc.walker import atomic_output, discover, is_fresh, output_path_for


def _touch(path, mtime=None):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


def test_discover_filters_extensions(tmp_path):
    """Only matching suffixes are returned, recursively and sorted."""
    _touch(tmp_path / "b.pptx")
    _touch(tmp_path / "sub" / "a.PPTM")
    _touch(tmp_path / "notes.txt")
    _touch(tmp_path / "b.index.txt")

    found = discover(tmp_path, [".pptx", ".pptm"])

    assert {p.name for p in found} == {"b.pptx", "a.PPTM"}
    assert all(p.is_absolute() for p in found)
    assert found == sorted(found)


def test_discover_excludes_marker(tmp_path):
    """Files whose path contains the exclusion marker are never returned."""
    _touch(tmp_path / "deck.pptx")
    _touch(tmp_path / "reference" / "old.pptx")
    _touch(tmp_path / "deck-reference.pptx")

    found = discover(tmp_path, [".pptx"], exclude="reference")
    assert [p.name for p in found] == ["deck.pptx"]

    # An empty marker disables exclusion
    assert len(discover(tmp_path, [".pptx"], exclude="")) == 3


def test_discover_relative_root_inside_marker_dir(tmp_path, monkeypatch):
    """Folders above the scan root do not trigger the exclusion marker."""
    course = tmp_path / "references_course"
    _touch(course / "lecture.pptx")
    _touch(course / "reference" / "old.pptx")
    monkeypatch.chdir(course)

    found = discover(Path("."), [".pptx"], exclude="reference")

    assert found == [(course / "lecture.pptx").resolve()]
    assert found[0].is_absolute()


def test_discover_single_file_and_missing_root(tmp_path):
    """A file root is accepted; a missing root raises."""
    deck = _touch(tmp_path / "deck.pptx")
    assert discover(deck, [".pptx"]) == [deck.resolve()]

    with pytest.raises(FileNotFoundError):
        discover(tmp_path / "missing", [".pptx"])


def test_output_path_for(tmp_path):
    """Outputs sit next to the input with a fixed suffix."""
    deck = tmp_path / "sub" / "lecture.v2.pptx"
    assert output_path_for(deck, ".toc.docx") == tmp_path / "sub" / "lecture.v2.toc.docx"
    assert output_path_for(deck, ".index.txt").name == "lecture.v2.index.txt"


def test_is_fresh(tmp_path):
    """Output is fresh when it exists and is not older than the input."""
    deck = _touch(tmp_path / "deck.pptx", mtime=1_000_000)
    output = tmp_path / "deck.index.txt"

    assert not is_fresh(deck, output)

    _touch(output, mtime=999_999)
    assert not is_fresh(deck, output)

    os.utime(output, (1_000_000, 1_000_000))
    assert is_fresh(deck, output)

    os.utime(output, (1_000_500, 1_000_500))
    assert is_fresh(deck, output)


def test_atomic_output_replaces_on_success(tmp_path):
    """The temporary file is moved over the target."""
    target = tmp_path / "deck.index.txt"
    target.write_text("old", encoding="utf-8")

    with atomic_output(target) as tmp:
        assert tmp != target
        assert tmp.parent == target.parent
        tmp.write_text("new", encoding="utf-8")

    assert target.read_text(encoding="utf-8") == "new"
    assert not tmp.exists()


def test_atomic_output_keeps_previous_on_failure(tmp_path):
    """A failure leaves the previous output untouched and no temporary file."""
    target = tmp_path / "deck.index.txt"
    target.write_text("old", encoding="utf-8")

    with pytest.raises(RuntimeError):
        with atomic_output(target) as tmp:
            tmp.write_text("partial", encoding="utf-8")
            raise RuntimeError("boom")

    assert target.read_text(encoding="utf-8") == "old"
    assert list(tmp_path.iterdir()) == [target]
