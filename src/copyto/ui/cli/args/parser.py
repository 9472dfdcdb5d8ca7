"""Command line argument parser."""

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from copyto.config.config import Config
from copyto.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from copyto.ui.cli.args.options import CLIArgs, ConfigArgs, CopyArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="copyto",
            description="copyto - Copy files and folders to a configured destination.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        copy_parser = subparsers.add_parser(
            "copy",
            help="Copy files or folders to the destination, asking on conflicts",
        )
        _ = copy_parser.add_argument(
            "sources",
            nargs="*",
            type=str,
            help="Files or folders to copy, processed in the given order",
            metavar="SOURCE",
        )
        _ = copy_parser.add_argument(
            "--dest",
            type=str,
            help="Destination folder for this run (overrides the configured one)",
            metavar="DESTINATION",
        )
        ArgumentParser._add_verbosity_flags(copy_parser)

        config_parser = subparsers.add_parser(
            "config",
            help="Show or change the configured destination",
        )
        destination_group = config_parser.add_mutually_exclusive_group()
        _ = destination_group.add_argument(
            "--set-destination",
            type=str,
            help="Persist a destination folder (a leading ~ is kept and expanded at copy time)",
            metavar="DESTINATION",
        )
        _ = destination_group.add_argument(
            "--clear-destination",
            action="store_true",
            help="Forget the destination so every copy asks for a folder",
        )
        ArgumentParser._add_verbosity_flags(config_parser)

        return parser

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed copy information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the command is unknown or argparse rejects the input.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "copy":
            return ArgumentParser._process_copy(parsed_args)

        if command == "config":
            return ArgumentParser._process_config(parsed_args)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_copy(parsed_args: argparse.Namespace) -> CopyArgs:
        # abspath keeps the last segment meaningful for inputs like ``..`` or ``dir/``.
        sources = [Path(os.path.abspath(os.path.expanduser(raw))) for raw in parsed_args.sources]
        destination: str | None = parsed_args.dest or None

        return CopyArgs(
            command="copy",
            sources=sources,
            destination=destination,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_config(parsed_args: argparse.Namespace) -> ConfigArgs:
        return ConfigArgs(
            command="config",
            set_destination=parsed_args.set_destination,
            clear_destination=parsed_args.clear_destination,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
