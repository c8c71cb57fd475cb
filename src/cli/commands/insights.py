"""Insights CLI command: distribution, averages and daily trends."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from cli.utils import emotion_bar, get_components, level_label
from sentiment import EMOTIONS, TrendPoint, zero_vector
from shared_types import StressLevel

console = Console()


def placeholder_trends(days: int, today=None) -> list[TrendPoint]:
    """Zero rows for the last `days` UTC days, oldest first."""
    today = today or datetime.now(timezone.utc).date()
    return [
        TrendPoint(date=today - timedelta(days=offset), emotions=zero_vector(), entry_count=0)
        for offset in range(days - 1, -1, -1)
    ]


@click.command()
@click.option("-d", "--days", default=None, type=click.IntRange(min=1), help="Trend window in days")
def insights(days: Optional[int]):
    """Show stress distribution, average emotions and daily trends."""
    c = get_components(local_only=True)
    window = days or c["config_model"].insights.trend_window_days
    summary = c["service"].insights(window_days=window)

    if summary.total == 0:
        console.print("[yellow]No entries yet. Add one with: mindlog write \"...\"[/]\n")
    else:
        console.print(f"[bold]Total entries:[/] {summary.total}")
        dist = Table(show_header=True, title="Stress levels")
        dist.add_column("Level")
        dist.add_column("Share", justify="right")
        for level in StressLevel:
            dist.add_row(level_label(level), f"{summary.distribution.get(level.value, 0)}%")
        console.print(dist)

        if summary.most_common_level is not None:
            console.print(
                f"[bold]Most common:[/] {level_label(summary.most_common_level)} "
                f"({summary.most_common_percent}%)  "
                f"[bold]Average score:[/] {summary.average_score:+.2f}  "
                f"[bold]Primary emotion:[/] {summary.primary_emotion}"
            )

        avg = Table(show_header=True, title="Average emotions")
        avg.add_column("Emotion")
        avg.add_column("", no_wrap=True)
        avg.add_column("Value", justify="right")
        for name, value in summary.average_emotions.items():
            avg.add_row(name, emotion_bar(value), f"{value:.2f}")
        console.print(avg)

    trends = summary.trends or placeholder_trends(window)

    table = Table(show_header=True, title=f"Daily trends - last {window} days")
    table.add_column("Date", style="dim")
    table.add_column("Entries", justify="right")
    for name in EMOTIONS:
        table.add_column(name.capitalize(), justify="right")
    for point in trends:
        table.add_row(
            point.date.isoformat(),
            str(point.entry_count),
            *(f"{point.emotions[name]:.2f}" for name in EMOTIONS),
        )
    console.print(table)
