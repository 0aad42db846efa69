"""
Console summary of a pull run.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from .targets import TargetReport


def build_summary_table(reports: list[TargetReport]) -> Table:
    """Create a table with one row per pulled resource."""
    table = Table(title="Pulled Translations")
    table.add_column("Target", style="cyan")
    table.add_column("Resource")
    table.add_column("Threshold", justify="right")
    table.add_column("Locales", justify="right", style="green")

    for report in reports:
        for pulled in report.resources:
            table.add_row(
                report.target,
                pulled.resource,
                f"{pulled.required_completion:.0%}",
                str(len(pulled.locales)),
            )
    return table


def print_summary(reports: list[TargetReport], console: Console | None = None) -> None:
    """Print the pull summary, or a notice when every target was skipped."""
    console = console or Console()
    if not reports:
        console.print("[yellow]No target checkouts found; nothing was written.[/yellow]")
        return
    console.print(build_summary_table(reports))
