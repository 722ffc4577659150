"""Command-line interface for the mood-habit analysis engine."""

import json
import logging
import sys
from datetime import date, timedelta

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.panel import Panel
from rich import box

from .config import config
from .analysis import InvalidInputError, NoDataError, analyze as run_analysis
from .loaders import LoaderError, load_completion_records, load_mood_samples
from .models import DIMENSIONS, AnalysisResult, TrendDirection

console = Console()

TREND_STYLES = {
    TrendDirection.IMPROVING: "[green]improving ↑[/green]",
    TrendDirection.DECLINING: "[red]declining ↓[/red]",
    TrendDirection.STABLE: "[yellow]stable →[/yellow]",
}


def configure_logging(level: str) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def resolve_date_range(start: str, end: str, days: int) -> tuple:
    """Fill in a missing start or end date from the --days window."""
    if end is None:
        end = date.today().isoformat()
    if start is None:
        try:
            end_day = date.fromisoformat(end)
        except ValueError:
            raise InvalidInputError(f"Date {end!r} is not in YYYY-MM-DD format")
        start = (end_day - timedelta(days=days - 1)).isoformat()
    return start, end


def render_result(result: AnalysisResult) -> None:
    """Print the analysis as rich tables."""
    stats = result.statistics
    console.print(
        f"\n[bold]Days analyzed:[/bold] {stats.total_days_analyzed}    "
        f"[bold]Avg completion:[/bold] {stats.avg_completion_rate:.1f}%"
    )

    table = Table(title="Mood vs Habit Completion", box=box.ROUNDED)
    table.add_column("Dimension", style="bold")
    table.add_column("Average", justify="right")
    table.add_column("Correlation", justify="right")
    table.add_column("Trend")
    table.add_column("Optimal Range", justify="center")

    correlations = result.correlations.to_dict()
    optimal = result.insights.optimal_mood_range
    for dimension in DIMENSIONS:
        low, high = getattr(optimal, dimension)
        table.add_row(
            dimension.title(),
            f"{stats.avg_mood_scores[dimension]:.2f}",
            f"{correlations[dimension]:+.2f}",
            TREND_STYLES[getattr(result.trends, dimension)],
            f"{low}–{high}",
        )
    table.add_row("Habits", "", "", TREND_STYLES[result.trends.habits], "")
    console.print(table)

    levels = result.insights.performance_by_mood_level
    console.print(
        f"[bold]Completion by mood level:[/bold] "
        f"low {levels.low:.0f}% · medium {levels.medium:.0f}% · high {levels.high:.0f}%"
    )
    console.print(f"[bold]Strongest positive:[/bold] {result.insights.strongest_positive_correlation}")
    console.print(f"[bold]Strongest negative:[/bold] {result.insights.strongest_negative_correlation}")

    console.print("\n[bold]Recommendations[/bold]")
    for i, recommendation in enumerate(result.recommendations, 1):
        console.print(f"  {i}. {recommendation}")


@click.group()
def cli():
    """Mood-Habit Correlation & Pattern Analysis Tool."""
    configure_logging(config.LOG_LEVEL)


@cli.command()
@click.option("--moods", "moods_path", required=True, type=click.Path(), help="Mood export (CSV or JSON)")
@click.option("--completions", "completions_path", required=True, type=click.Path(),
              help="Habit completion export (CSV or JSON)")
@click.option("--active-habits", default=0, type=int,
              help="Active habit count, used for days without completion records")
@click.option("--start", default=None, help="Start date (YYYY-MM-DD)")
@click.option("--end", default=None, help="End date (YYYY-MM-DD), defaults to today")
@click.option("--days", default=config.DEFAULT_ANALYSIS_DAYS, type=int,
              help="Window size when --start is omitted")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def analyze(moods_path, completions_path, active_habits, start, end, days, as_json):
    """Analyze how mood, energy, stress and sleep relate to habit completion."""
    try:
        start, end = resolve_date_range(start, end, days)
        moods = load_mood_samples(moods_path)
        completions = load_completion_records(completions_path)
        result = run_analysis(moods, completions, active_habits, start, end)
    except NoDataError as e:
        console.print(f"[yellow]⚠️  {e}[/yellow]")
        console.print("[yellow]Log a few more days of mood check-ins and try again.[/yellow]")
        sys.exit(1)
    except (InvalidInputError, LoaderError) as e:
        console.print(f"[red]❌ {e}[/red]")
        sys.exit(2)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    console.print(Panel.fit(f"🧠 Mood-Habit Analysis ({start} to {end})", style="bold blue"))
    render_result(result)


if __name__ == "__main__":
    cli()
