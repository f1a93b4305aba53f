"""Command line argument handling package."""

from xspfgen.ui.cli.args.options import GenerateArgs
from xspfgen.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "GenerateArgs"]
