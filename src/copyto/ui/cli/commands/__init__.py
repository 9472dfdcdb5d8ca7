"""Command execution package for CLI."""

from copyto.ui.cli.commands.config import ConfigCommand
from copyto.ui.cli.commands.copy import CopyCommand

__all__ = ["ConfigCommand", "CopyCommand"]
