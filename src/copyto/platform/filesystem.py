"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
import shutil
from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def is_within(child: Path, parent: Path) -> bool:
    """Return True when ``child`` resolves to ``parent`` or a path below it."""

    try:
        return child.resolve().is_relative_to(parent.resolve())
    except OSError:
        return False


def remove_entry(path: Path) -> None:
    """Remove a file, symlink, or whole directory tree at ``path``."""

    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def _staging_path(target: Path) -> Path:
    return target.with_name(f".{target.name}.copyto-tmp")


def _copy_into(source: Path, target: Path) -> None:
    if source.is_dir():
        _ = shutil.copytree(source, target)
    else:
        _ = shutil.copy2(source, target)


def copy_entry(source: Path, target: Path, *, overwrite: bool = False) -> Path:
    """Copy a file or directory tree from ``source`` to ``target``.

    Files keep their metadata (``shutil.copy2``); directories are copied
    recursively (``shutil.copytree``). With ``overwrite`` the copy is written
    to a hidden sibling first and swapped in only once it is complete, so a
    copied folder replaces the old one instead of merging and a failed copy
    leaves the existing target untouched.

    Returns:
        Path: The written target path.

    Raises:
        FileNotFoundError: ``source`` does not exist.
        FileExistsError: ``target`` exists and ``overwrite`` is False.
        shutil.SameFileError: ``source`` and ``target`` are the same entry.
        OSError: ``target`` lies inside the ``source`` folder, or the copy fails.
    """

    if not source.exists():
        raise FileNotFoundError(f"Source does not exist: {source}")

    if target.resolve() == source.resolve():
        raise shutil.SameFileError(f"{source} and {target} are the same file")

    if source.is_dir() and is_within(target, source):
        raise OSError(f"Cannot copy a folder into itself: {target}")

    if not (target.exists() or target.is_symlink()):
        _copy_into(source, target)
        return target

    if not overwrite:
        raise FileExistsError(f"Target already exists: {target}")

    staging = _staging_path(target)
    if staging.exists() or staging.is_symlink():
        remove_entry(staging)

    try:
        _copy_into(source, staging)
        # os.replace only swaps file over file atomically.
        if staging.is_dir() or (target.is_dir() and not target.is_symlink()):
            remove_entry(target)
        os.replace(staging, target)
    finally:
        if staging.exists() or staging.is_symlink():
            remove_entry(staging)
    return target


__all__ = ["copy_entry", "ensure_directory", "is_within", "remove_entry"]
