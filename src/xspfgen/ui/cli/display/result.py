"""src/xspfgen/ui/cli/display/result.py
What: Render the per-root summary after a generation run.
Why: Keep console output formatting in one place.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console

from xspfgen.application.services import PlaylistResult


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_results(self, results: Sequence[PlaylistResult]) -> None:
        """Display one line per processed root followed by totals."""

        if not results:
            return

        self.console.print("\n[bold]Playlist Summary:[/bold]")
        for result in results:
            if result.success:
                self.console.print(
                    f"[green]  • {result.output_path}[/green] ({result.track_count} tracks)",
                    highlight=False,
                )
            else:
                self.console.print(
                    f"[red]  • {result.root}: {result.error_message}[/red]",
                    highlight=False,
                )

        failed = sum(1 for result in results if not result.success)
        self.console.print(f"Playlists written: {len(results) - failed}")
        if failed:
            self.console.print(f"[red]Failed: {failed}[/red]")
