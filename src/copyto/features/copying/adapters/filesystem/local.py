"""Filesystem adapter for the copy use case."""

from __future__ import annotations

from pathlib import Path

from copyto.platform.filesystem import copy_entry, ensure_directory

from ...usecases.ports import FileSystem


class LocalFileSystem(FileSystem):
    """Thin wrapper around the local filesystem."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def create_directory(self, path: Path) -> None:
        _ = ensure_directory(path)

    def copy(self, source: Path, target: Path, *, overwrite: bool) -> None:
        _ = copy_entry(source, target, overwrite=overwrite)


__all__ = ["LocalFileSystem"]
