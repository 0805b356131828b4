"""Data models for JournalChart."""

from journalchart.models.candle import Candle, Series, to_chart_data

__all__ = [
    "Candle",
    "Series",
    "to_chart_data",
]
