"""Recommendation CLI command."""

import asyncio
from typing import Optional

import click
from rich.console import Console

from cli.utils import get_components, level_label, local_only_requested
from shared_types import StressLevel

console = Console()


@click.command()
@click.argument("level", type=click.Choice([lvl.value for lvl in StressLevel]))
@click.option("--text", default=None, help="Entry text to personalize suggestions")
def recommend(level: str, text: Optional[str]):
    """Wellness suggestions for a stress level."""
    c = get_components(local_only=local_only_requested())
    with console.status("Selecting recommendations..."):
        recs = asyncio.run(c["selector"].recommend(level, text))

    console.print(f"[bold]Recommendations for[/] {level_label(level)}:")
    for i, rec in enumerate(recs, 1):
        console.print(f"  {i}. {rec}")
