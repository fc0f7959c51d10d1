"""Dry-run plan display for the CLI."""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.table import Table

from tracksplit.features.splitting import TrackResult


@final
class PlanDisplay:
    """Render planned tracks as a table."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    @staticmethod
    def build_table(results: list[TrackResult]) -> Table:
        table = Table(title="Planned tracks", show_lines=False)
        table.add_column("#", justify="right", style="cyan", no_wrap=True)
        table.add_column("Start", style="green", no_wrap=True)
        table.add_column("End", style="green", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Output", style="magenta")

        for result in results:
            track = result.track
            table.add_row(
                str(track.number),
                str(track.start),
                str(track.end) if track.end is not None else "end",
                track.title,
                str(result.path),
            )
        return table

    def show_plan(self, results: list[TrackResult]) -> None:
        self.console.print(self.build_table(results))
        self.console.print(
            f"[yellow]Dry run: {len(results)} track(s) planned; nothing was written.[/yellow]"
        )


__all__ = ["PlanDisplay"]
