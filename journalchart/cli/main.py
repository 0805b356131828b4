"""Main CLI entry point for JournalChart."""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from journalchart.cli.chart import chart, volatility

# Console for rich output
console = Console()

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="journalchart")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """JournalChart - synthetic price charts for trading journal entries.

    Back-fills an hourly candle chart around a logged trade when no
    real market data is available.

    \b
    Quick Start:
      journalchart chart MES 5000 2024-01-10     # 3 days around the entry
      journalchart chart CL 75.2 2024-03-04 --json
      journalchart volatility                    # Show volatility table
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )
    ctx.ensure_object(dict)


cli.add_command(chart)
cli.add_command(volatility)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
