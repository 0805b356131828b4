"""Chart commands for JournalChart CLI.

Generates synthetic candle series around a trade entry and shows the
volatility table used to shape them.
"""

import json
import random
from datetime import tzinfo
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from journalchart.config import load_config
from journalchart.errors import JournalChartError
from journalchart.market.generator import SyntheticSeriesGenerator
from journalchart.models import Series, to_chart_data

console = Console()

# Candles shown in the table before truncating
MAX_TABLE_ROWS = 24


def _error_panel(message: str) -> None:
    console.print(Panel(
        f"[red]{message}[/red]",
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))


def summarize_series(series: Series, tz: tzinfo) -> dict:
    """Summarize a generated series.

    Args:
        series: Generated candles.
        tz: Timezone to express the start and end in.

    Returns:
        Dictionary with count, start, end, first_open, last_close,
        high and low. Only ``count`` is set for an empty series.
    """
    if not series:
        return {"count": 0}

    return {
        "count": len(series),
        "start": series[0].opened_at(tz),
        "end": series[-1].opened_at(tz),
        "first_open": series[0].open,
        "last_close": series[-1].close,
        "high": max(c.high for c in series),
        "low": min(c.low for c in series),
    }


def build_candle_table(symbol: str, series: Series, tz: tzinfo, show_volume: bool = True) -> Table:
    """Build a rich table of the last candles in a series."""
    table = Table(
        title=f"{symbol} - 1hour synthetic ({len(series)} candles)",
        show_header=True,
        header_style="bold cyan",
    )

    table.add_column("Date/Time", style="dim")
    table.add_column("Open", justify="right")
    table.add_column("High", justify="right", style="green")
    table.add_column("Low", justify="right", style="red")
    table.add_column("Close", justify="right")
    if show_volume:
        table.add_column("Volume", justify="right", style="dim")

    for candle in series[-MAX_TABLE_ROWS:]:
        style = "green" if candle.close >= candle.open else "red"
        row = [
            candle.opened_at(tz).strftime("%Y-%m-%d %H:%M"),
            f"{candle.open:.2f}",
            f"{candle.high:.2f}",
            f"{candle.low:.2f}",
            f"[{style}]{candle.close:.2f}[/{style}]",
        ]
        if show_volume:
            row.append(f"{candle.volume:,}" if candle.volume is not None else "-")
        table.add_row(*row)

    return table


@click.command()
@click.argument("symbol")
@click.argument("entry_price", type=float)
@click.argument("entry_date")
@click.option(
    "-d", "--days",
    default=None,
    type=int,
    help="Days spanned by the chart (default: config or 3)",
)
@click.option(
    "-z", "--timezone", "tz_name",
    default=None,
    help="IANA timezone for sessions and the entry day (default: config or UTC)",
)
@click.option("--seed", default=None, type=int, help="Seed for a reproducible series")
@click.option("--json", "json_output", is_flag=True, help="Print chart data as JSON")
@click.option("--no-volume", is_flag=True, help="Leave out synthetic volume")
def chart(
    symbol: str,
    entry_price: float,
    entry_date: str,
    days: Optional[int],
    tz_name: Optional[str],
    seed: Optional[int],
    json_output: bool,
    no_volume: bool,
) -> None:
    """Generate a synthetic hourly chart around a trade entry.

    SYMBOL is the ticker (case-sensitive, e.g. MES, NQ, CL).
    ENTRY_PRICE is the trade entry price.
    ENTRY_DATE is the entry date (e.g. 2024-01-10).

    \b
    Examples:
      journalchart chart MES 5000 2024-01-10
      journalchart chart NQ 17500 2024-01-10 --days 5
      journalchart chart CL 75.2 2024-03-04 -z America/New_York --json
    """
    try:
        settings = load_config()
        generator = SyntheticSeriesGenerator(
            volatility_table=settings.volatility_table(),
            rng=random.Random(seed),
            tz=tz_name or settings.timezone,
            decimals=settings.decimals,
        )
        days_range = days if days is not None else settings.days_range
        series = generator.generate(symbol, entry_price, entry_date, days_range)
    except JournalChartError as e:
        _error_panel(str(e))
        raise SystemExit(1)

    if json_output:
        click.echo(json.dumps(to_chart_data(series, include_volume=not no_volume)))
        return

    if not series:
        console.print(Panel(
            f"[yellow]No trading hours in a {days_range}-day window for {symbol}[/yellow]",
            title="[bold yellow]No Data[/bold yellow]",
            border_style="yellow",
        ))
        return

    console.print(build_candle_table(symbol, series, generator.tz, show_volume=not no_volume))

    summary = summarize_series(series, generator.tz)
    if summary["count"] > MAX_TABLE_ROWS:
        console.print(f"[dim]Showing last {MAX_TABLE_ROWS} of {summary['count']} candles[/dim]")
    console.print(
        f"[bold]{summary['start']:%Y-%m-%d %H:%M}[/bold] to "
        f"[bold]{summary['end']:%Y-%m-%d %H:%M}[/bold] | "
        f"open {summary['first_open']:.2f} | close {summary['last_close']:.2f} | "
        f"range {summary['low']:.2f} - {summary['high']:.2f}"
    )


@click.command()
@click.argument("symbol", required=False)
def volatility(symbol: Optional[str]) -> None:
    """Show the per-hour volatility table.

    With SYMBOL, show the coefficient used for that symbol only.

    \b
    Examples:
      journalchart volatility
      journalchart volatility CL
    """
    try:
        table_data = load_config().volatility_table()
    except JournalChartError as e:
        _error_panel(str(e))
        raise SystemExit(1)

    if symbol is not None:
        value = table_data.resolve(symbol)
        if symbol in table_data:
            console.print(f"[bold]{symbol}[/bold]: {value:.4f}")
        else:
            console.print(f"[bold]{symbol}[/bold]: {value:.4f} [dim](default)[/dim]")
        return

    table = Table(title="Volatility Table", show_header=True, header_style="bold cyan")
    table.add_column("Symbol", style="bold")
    table.add_column("Volatility", justify="right")
    for name in table_data.symbols():
        table.add_row(name, f"{table_data.resolve(name):.4f}")
    console.print(table)
    console.print(f"[dim]Unknown symbols use {table_data.default:.4f}[/dim]")
