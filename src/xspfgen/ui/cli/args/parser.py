"""Command line argument parser."""

import argparse
from collections.abc import Sequence
from pathlib import Path
from typing import final

from xspfgen.platform.logging import logger
from xspfgen.ui.cli.args.options import GenerateArgs


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
            prog="xspfgen",
            description=(
                "Write an XSPF playlist for each directory, listing its media files "
                "with their description and cover image sidecars."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "paths",
            nargs="*",
            type=str,
            help="Media files or directories to process",
            metavar="PATH",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> GenerateArgs | None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            GenerateArgs | None: Existing files and directories, or None when no
            path was supplied and the usage banner was printed instead.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if not parsed_args.paths:
            parser.print_usage()
            return None

        return ArgumentParser.split_paths(parsed_args.paths)

    @staticmethod
    def split_paths(raw_paths: Sequence[str]) -> GenerateArgs:
        """Classify raw paths; paths that do not exist are dropped."""

        args = GenerateArgs()
        for raw_path in raw_paths:
            path = Path(raw_path)
            if path.is_file():
                args.files.append(path)
            elif path.is_dir():
                args.directories.append(path)
            else:
                logger.debug("Ignoring missing path: %s", path)
        return args
