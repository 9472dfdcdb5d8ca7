"""Tests for shared filesystem helpers."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

import pytest

from copyto.platform.filesystem import copy_entry, ensure_directory, is_within, remove_entry


@pytest.fixture()
def layout(tmp_path: Path) -> tuple[Path, Path]:
    src = tmp_path / "src"
    dest = tmp_path / "dest"
    src.mkdir()
    dest.mkdir()
    return src, dest


def test_copy_file_preserves_content(layout: tuple[Path, Path]) -> None:
    src, dest = layout
    source = src / "hello.txt"
    _ = source.write_text("hello world")

    written = copy_entry(source, dest / "hello.txt")

    assert written == dest / "hello.txt"
    assert written.read_text() == "hello world"
    assert source.exists()


def test_copy_folder_recursively(layout: tuple[Path, Path]) -> None:
    src, dest = layout
    folder = src / "myfolder"
    (folder / "nested").mkdir(parents=True)
    _ = (folder / "a.txt").write_text("a")
    _ = (folder / "nested" / "b.txt").write_text("b")

    _ = copy_entry(folder, dest / "myfolder")

    assert (dest / "myfolder" / "a.txt").read_text() == "a"
    assert (dest / "myfolder" / "nested" / "b.txt").read_text() == "b"


def test_existing_target_requires_overwrite(layout: tuple[Path, Path]) -> None:
    src, dest = layout
    source = src / "a.txt"
    _ = source.write_text("new")
    target = dest / "a.txt"
    _ = target.write_text("old")

    with pytest.raises(FileExistsError):
        _ = copy_entry(source, target)
    assert target.read_text() == "old"


def test_overwrite_replaces_file(layout: tuple[Path, Path]) -> None:
    src, dest = layout
    source = src / "a.txt"
    _ = source.write_text("new")
    target = dest / "a.txt"
    _ = target.write_text("old")

    _ = copy_entry(source, target, overwrite=True)

    assert target.read_text() == "new"


def test_overwrite_replaces_folder_instead_of_merging(layout: tuple[Path, Path]) -> None:
    src, dest = layout
    folder = src / "pkg"
    folder.mkdir()
    _ = (folder / "keep.txt").write_text("fresh")
    target = dest / "pkg"
    target.mkdir()
    _ = (target / "stale.txt").write_text("stale")

    _ = copy_entry(folder, target, overwrite=True)

    assert (target / "keep.txt").read_text() == "fresh"
    assert not (target / "stale.txt").exists()


def test_overwrite_file_with_folder(layout: tuple[Path, Path]) -> None:
    src, dest = layout
    folder = src / "thing"
    folder.mkdir()
    _ = (folder / "x.txt").write_text("x")
    target = dest / "thing"
    _ = target.write_text("i was a file")

    _ = copy_entry(folder, target, overwrite=True)

    assert (target / "x.txt").read_text() == "x"


def test_missing_source_raises(layout: tuple[Path, Path]) -> None:
    src, dest = layout
    with pytest.raises(FileNotFoundError):
        _ = copy_entry(src / "ghost.txt", dest / "ghost.txt", overwrite=True)


def test_same_file_is_refused(layout: tuple[Path, Path]) -> None:
    """Overwriting an entry with itself must not delete it."""

    src, _ = layout
    source = src / "a.txt"
    _ = source.write_text("precious")

    with pytest.raises(shutil.SameFileError):
        _ = copy_entry(source, src / "a.txt", overwrite=True)
    assert source.read_text() == "precious"


def test_folder_into_itself_is_refused(layout: tuple[Path, Path]) -> None:
    src, _ = layout
    folder = src / "proj"
    folder.mkdir()

    with pytest.raises(OSError, match="into itself"):
        _ = copy_entry(folder, folder / "proj", overwrite=True)


def test_remove_entry_handles_files_and_trees(tmp_path: Path) -> None:
    a_file = tmp_path / "f.txt"
    _ = a_file.write_text("x")
    tree = tmp_path / "tree" / "deep"
    tree.mkdir(parents=True)

    remove_entry(a_file)
    remove_entry(tmp_path / "tree")

    assert not a_file.exists()
    assert not (tmp_path / "tree").exists()


def test_is_within(tmp_path: Path) -> None:
    assert is_within(tmp_path / "a" / "b", tmp_path / "a")
    assert is_within(tmp_path / "a", tmp_path / "a")
    assert not is_within(tmp_path / "ab", tmp_path / "a")


def test_ensure_directory(tmp_path: Path) -> None:
    target = tmp_path / "x" / "y"
    assert ensure_directory(target) == target
    assert target.is_dir()
    assert ensure_directory(target) == target

    blocker = tmp_path / "file"
    _ = blocker.write_text("x")
    with pytest.raises(NotADirectoryError):
        _ = ensure_directory(blocker)


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="named pipes are POSIX only")
def test_failed_overwrite_keeps_existing_target(layout: tuple[Path, Path]) -> None:
    """A source that cannot be copied must not cost the user the old file."""

    src, dest = layout
    source = src / "data"
    os.mkfifo(source)
    target = dest / "data"
    _ = target.write_text("precious")

    with pytest.raises(OSError):
        _ = copy_entry(source, target, overwrite=True)

    assert target.read_text() == "precious"
    assert sorted(entry.name for entry in dest.iterdir()) == ["data"]


def test_failed_folder_overwrite_keeps_existing_folder(
    layout: tuple[Path, Path], monkeypatch: pytest.MonkeyPatch
) -> None:
    src, dest = layout
    folder = src / "pkg"
    folder.mkdir()
    _ = (folder / "new.txt").write_text("new")
    target = dest / "pkg"
    target.mkdir()
    _ = (target / "old.txt").write_text("old")

    def _broken_copytree(source: Path, destination: Path) -> Path:
        Path(destination).mkdir()
        _ = (Path(destination) / "partial.txt").write_text("half")
        raise shutil.Error("disk full")

    monkeypatch.setattr(shutil, "copytree", _broken_copytree)

    with pytest.raises(shutil.Error):
        _ = copy_entry(folder, target, overwrite=True)

    assert (target / "old.txt").read_text() == "old"
    assert sorted(entry.name for entry in dest.iterdir()) == ["pkg"]


def test_stale_staging_entry_is_replaced(layout: tuple[Path, Path]) -> None:
    src, dest = layout
    source = src / "a.txt"
    _ = source.write_text("new")
    target = dest / "a.txt"
    _ = target.write_text("old")
    _ = (dest / ".a.txt.copyto-tmp").write_text("left over")

    _ = copy_entry(source, target, overwrite=True)

    assert target.read_text() == "new"
    assert sorted(entry.name for entry in dest.iterdir()) == ["a.txt"]
