"""
OSU CLI Display

Rich table formatting for terminal output.
"""
from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table

from osu_export.models import Results, SpreadsheetMetadata


console = Console()


def display_results(results: Results, labels: Optional[list[str]] = None, title: str = "Results") -> None:
    """Display all series side by side, keyed on the first series' sizes."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Size", justify="right", style="dim")
    for idx, _ in enumerate(results.results):
        label = labels[idx] if labels and idx < len(labels) else f"Series {idx + 1}"
        table.add_column(label, justify="right")

    by_series = [{dp.size: dp.value for dp in r.data_points} for r in results.results]
    for size in results.sizes:
        values = [series.get(size) for series in by_series]
        table.add_row(
            f"{size:g}",
            *("" if v is None else f"{v:,.2f}" for v in values),
        )

    console.print(table)


def display_metadata(metadata: SpreadsheetMetadata) -> None:
    table = Table(title=f"Metadata (Sheet{metadata.sheet_id})", show_header=False)
    table.add_column("Line")
    table.add_row(metadata.timestamp)
    for line in metadata.content:
        table.add_row(line)
    console.print(table)
