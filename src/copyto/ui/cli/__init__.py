"""Command line interface package."""

from copyto.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
