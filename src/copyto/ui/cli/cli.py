"""Command line interface for copyto."""

import sys
from typing import final

from copyto.platform.logging import logger
from copyto.ui.cli.args import ArgumentParser
from copyto.ui.cli.args.options import CLIArgs, ConfigArgs, CopyArgs
from copyto.ui.cli.commands import ConfigCommand, CopyCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, CopyArgs):
                _ = CopyCommand(args).execute()
                return

            assert isinstance(args, ConfigArgs)
            _ = ConfigCommand(args).execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
