"""Command line argument handling package."""

from copyto.ui.cli.args.parser import ArgumentParser
from copyto.ui.cli.args.options import CLIArgs, ConfigArgs, CopyArgs

__all__ = ["ArgumentParser", "CLIArgs", "ConfigArgs", "CopyArgs"]
