"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import final


@final
@dataclass(slots=True)
class GenerateArgs:
    """Paths from the command line, split by what they exist as."""

    files: list[Path] = field(default_factory=list)
    directories: list[Path] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Whether no argument named an existing file or directory."""

        return not self.files and not self.directories


__all__ = ["GenerateArgs"]
