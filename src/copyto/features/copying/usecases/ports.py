"""
Summary: Ports defining the capabilities the copy use case depends on.
Why: Decouple the workflow from the terminal and disk so tests can use fakes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from ..domain.models import ConflictAction


@runtime_checkable
class FileSystem(Protocol):
    """Filesystem primitives used while copying."""

    def exists(self, path: Path) -> bool:
        """Return True if an entry exists at ``path``."""
        ...

    def create_directory(self, path: Path) -> None:
        """Create ``path`` and any missing parents."""
        ...

    def copy(self, source: Path, target: Path, *, overwrite: bool) -> None:
        """Copy a file or folder from ``source`` to ``target``."""
        ...


@runtime_checkable
class DestinationPicker(Protocol):
    """Interactive single-folder selection."""

    def pick_destination(self) -> Path | None:
        """Return the chosen folder, or ``None`` when the user dismisses the picker."""
        ...


@runtime_checkable
class ConflictPrompter(Protocol):
    """Modal overwrite/skip/cancel question for an existing target."""

    def ask(self, file_name: str, destination: str) -> ConflictAction:
        """Block until the user decides; dismissal yields ``ConflictAction.CANCEL``."""
        ...


@runtime_checkable
class Notifier(Protocol):
    """User-facing messages."""

    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


__all__ = ["ConflictPrompter", "DestinationPicker", "FileSystem", "Notifier"]
