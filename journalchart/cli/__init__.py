"""CLI commands for JournalChart.

This package provides the command-line interface for generating
synthetic candle charts and inspecting the volatility table.
"""

from journalchart.cli.main import cli, main

__all__ = ["cli", "main"]
