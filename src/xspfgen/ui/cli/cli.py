"""Command line interface for xspfgen."""

import sys
from typing import final

from xspfgen.application.services import GenerateRequest, PlaylistService
from xspfgen.ui.cli.args import ArgumentParser
from xspfgen.ui.cli.display import ResultDisplay
from xspfgen.platform.logging import logger


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
            args = ArgumentParser.process_args(args_list)
            if args is None or args.is_empty:
                return

            request = GenerateRequest(files=args.files, directories=args.directories)
            results = PlaylistService().run(request)
            ResultDisplay().show_results(results)
            if any(not r.success for r in results):
                sys.exit(1)

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
