"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class CopyArgs:
    """Command line arguments for the ``copy`` subcommand."""

    command: Literal["copy"]
    sources: list[Path] = field(default_factory=list)
    destination: str | None = None
    verbose: bool = False
    quiet: bool = False


@final
@dataclass(slots=True)
class ConfigArgs:
    """Command line arguments for the ``config`` subcommand."""

    command: Literal["config"]
    set_destination: str | None = None
    clear_destination: bool = False
    verbose: bool = False
    quiet: bool = False


CLIArgs = CopyArgs | ConfigArgs

__all__ = ["CLIArgs", "ConfigArgs", "CopyArgs"]
