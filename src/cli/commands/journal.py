"""Journal CLI commands."""

import asyncio
import sys

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components, level_label, local_only_requested, print_analysis
from sentiment import InputValidationError

console = Console()


@click.command()
@click.argument("text")
def analyze(text: str):
    """Analyze text without saving it."""
    c = get_components(local_only=local_only_requested())
    try:
        with console.status("Analyzing..."):
            result = asyncio.run(c["analyzer"].analyze(text))
    except InputValidationError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    print_analysis(result)


@click.command()
@click.argument("text")
def write(text: str):
    """Analyze, recommend and save a journal entry."""
    c = get_components(local_only=local_only_requested())
    try:
        with console.status("Analyzing..."):
            entry = asyncio.run(c["service"].create_entry(text))
    except InputValidationError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red]Could not save entry:[/] {e}")
        sys.exit(1)

    print_analysis(entry.analysis)

    console.print("\n[bold]Recommendations:[/]")
    for i, rec in enumerate(entry.recommendations, 1):
        console.print(f"  {i}. {rec}")

    console.print(f"\n[green]Saved[/] {entry.id}")


@click.command()
@click.option("-n", "--limit", default=10, help="Max entries to show")
def entries(limit: int):
    """List saved entries, newest first."""
    c = get_components(local_only=True)
    saved = c["service"].entries()

    if not saved:
        console.print("[yellow]No entries yet. Add one with: mindlog write \"...\"[/]")
        return

    table = Table(show_header=True, title=f"Entries ({len(saved)} total)")
    table.add_column("Date", style="dim")
    table.add_column("Level")
    table.add_column("Score", justify="right")
    table.add_column("Entry")
    table.add_column("ID", style="dim")

    for entry in list(reversed(saved))[:limit]:
        preview = entry.text if len(entry.text) <= 40 else entry.text[:37] + "..."
        table.add_row(
            entry.timestamp.strftime("%Y-%m-%d %H:%M"),
            level_label(entry.analysis.level),
            f"{entry.analysis.score:+.2f}",
            preview,
            entry.id,
        )

    console.print(table)


@click.command()
@click.argument("entry_id")
def delete(entry_id: str):
    """Delete a saved entry."""
    c = get_components(local_only=True)
    if c["storage"].delete(entry_id):
        console.print(f"[green]Deleted[/] {entry_id}")
    else:
        console.print(f"[red]Entry not found:[/] {entry_id}")
        sys.exit(1)
