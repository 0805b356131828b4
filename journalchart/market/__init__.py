"""Synthetic market data for journal charts."""

from journalchart.market.generator import (
    RandomSource,
    SyntheticSeriesGenerator,
    generate_sample_ohlc,
)
from journalchart.market.session import hourly_slots, is_weekend
from journalchart.market.volatility import (
    BUILTIN_VOLATILITY,
    DEFAULT_TABLE,
    DEFAULT_VOLATILITY,
    VolatilityTable,
    resolve_volatility,
)

__all__ = [
    "BUILTIN_VOLATILITY",
    "DEFAULT_TABLE",
    "DEFAULT_VOLATILITY",
    "RandomSource",
    "SyntheticSeriesGenerator",
    "VolatilityTable",
    "generate_sample_ohlc",
    "hourly_slots",
    "is_weekend",
    "resolve_volatility",
]
