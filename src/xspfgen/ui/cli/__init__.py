"""Command line interface package."""

from xspfgen.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
