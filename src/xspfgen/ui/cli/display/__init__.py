"""Display management for CLI interface."""

from xspfgen.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
