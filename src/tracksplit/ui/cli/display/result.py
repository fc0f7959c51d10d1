"""src/tracksplit/ui/cli/display/result.py
What: Render user-facing summaries and errors for split runs.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape

from tracksplit.features.splitting import TrackResult


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(soft_wrap=True)

    def show_results(self, results: list[TrackResult], quiet: bool = False) -> None:
        """Display a one-line summary of a completed run.

        Args:
            results: Completed track results.
            quiet: Whether to suppress non-error output.
        """
        if quiet or not results:
            return

        directory = results[0].path.parent
        self.console.print(
            f"[bold green]Split {len(results)} track(s) into[/bold green] {escape(str(directory))}",
            highlight=False,
        )

    def show_error(self, message: str) -> None:
        """Print ``error: <message>`` verbatim to standard output."""

        self.console.print(f"error: {message}", markup=False, highlight=False)


__all__ = ["ResultDisplay"]
