"""Tests for the local filesystem adapter."""

from __future__ import annotations

from pathlib import Path

import pytest

from copyto.features.copying import FileSystem
from copyto.features.copying.adapters.filesystem import LocalFileSystem


@pytest.fixture()
def fs() -> LocalFileSystem:
    return LocalFileSystem()


def test_implements_port(fs: LocalFileSystem) -> None:
    assert isinstance(fs, FileSystem)


def test_exists(fs: LocalFileSystem, tmp_path: Path) -> None:
    present = tmp_path / "present.txt"
    _ = present.write_text("x")

    assert fs.exists(present)
    assert fs.exists(tmp_path)
    assert not fs.exists(tmp_path / "missing")


def test_create_directory_with_parents(fs: LocalFileSystem, tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "c"
    fs.create_directory(target)
    assert target.is_dir()

    # Existing directories are accepted.
    fs.create_directory(target)


def test_create_directory_over_file_fails(fs: LocalFileSystem, tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    _ = blocker.write_text("x")

    with pytest.raises(OSError):
        fs.create_directory(blocker)


def test_copy_file_and_folder(fs: LocalFileSystem, tmp_path: Path) -> None:
    src_file = tmp_path / "src" / "hello.txt"
    src_dir = tmp_path / "src" / "folder"
    src_dir.mkdir(parents=True)
    _ = src_file.write_text("hello world")
    _ = (src_dir / "inner.txt").write_text("inner")
    dest = tmp_path / "dest"
    dest.mkdir()

    fs.copy(src_file, dest / "hello.txt", overwrite=True)
    fs.copy(src_dir, dest / "folder", overwrite=True)

    assert (dest / "hello.txt").read_text() == "hello world"
    assert (dest / "folder" / "inner.txt").read_text() == "inner"
