"""Per-symbol volatility coefficients for synthetic candles.

Coefficients are dimensionless per-hour scale factors. They control how far
a synthetic candle may move relative to its open.
"""

import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Optional

from journalchart.errors import InvalidArgumentError

DEFAULT_VOLATILITY = 0.015
MAX_VOLATILITY = 0.5

# Typical hourly volatility of the futures contracts the journal trades
BUILTIN_VOLATILITY: Mapping[str, float] = MappingProxyType({
    "MES": 0.015,  # Micro E-mini S&P 500
    "MNQ": 0.020,  # Micro E-mini Nasdaq
    "MYM": 0.012,  # Micro E-mini Dow
    "ES": 0.015,   # E-mini S&P 500
    "NQ": 0.020,   # E-mini Nasdaq
    "YM": 0.012,   # E-mini Dow
    "CL": 0.025,   # Crude Oil
    "GC": 0.018,   # Gold
    "ZB": 0.008,   # 30Y Treasury Bond
    "ZN": 0.006,   # 10Y Treasury Note
})


def _check_coefficient(symbol: str, value: float) -> float:
    try:
        coefficient = float(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Volatility for {symbol!r} is not a number: {value!r}")
    # Above MAX_VOLATILITY a candle's low could reach zero
    if not math.isfinite(coefficient) or not 0 < coefficient <= MAX_VOLATILITY:
        raise InvalidArgumentError(
            f"Volatility for {symbol!r} must be in (0, {MAX_VOLATILITY}], got {value!r}"
        )
    return coefficient


class VolatilityTable:
    """Immutable symbol -> volatility lookup with a fallback coefficient.

    Lookups are exact and case-sensitive. Symbols missing from the table
    resolve to the default coefficient instead of raising.
    """

    def __init__(
        self,
        coefficients: Optional[Mapping[str, float]] = None,
        default: float = DEFAULT_VOLATILITY,
    ):
        """Initialize the table.

        Args:
            coefficients: Symbol to coefficient mapping. Built-in table if omitted.
            default: Coefficient for unknown symbols.

        Raises:
            InvalidArgumentError: If any coefficient is not finite and positive.
        """
        source = BUILTIN_VOLATILITY if coefficients is None else coefficients
        self._coefficients = MappingProxyType(
            {symbol: _check_coefficient(symbol, value) for symbol, value in source.items()}
        )
        self._default = _check_coefficient("<default>", default)

    @property
    def default(self) -> float:
        """Coefficient returned for symbols absent from the table."""
        return self._default

    def resolve(self, symbol: str) -> float:
        """Get the volatility coefficient for a symbol."""
        return self._coefficients.get(symbol, self._default)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._coefficients

    def __len__(self) -> int:
        return len(self._coefficients)

    def symbols(self) -> list[str]:
        """Known symbols, sorted."""
        return sorted(self._coefficients)

    def with_overrides(self, overrides: Mapping[str, float]) -> "VolatilityTable":
        """Return a new table with ``overrides`` merged over this one."""
        merged = dict(self._coefficients)
        merged.update(overrides)
        return VolatilityTable(merged, default=self._default)

    def __repr__(self) -> str:
        return f"VolatilityTable({len(self)} symbols, default={self._default})"


DEFAULT_TABLE = VolatilityTable()


def resolve_volatility(symbol: str, table: Optional[VolatilityTable] = None) -> float:
    """Resolve the per-hour volatility coefficient for a symbol.

    Args:
        symbol: Ticker, matched exactly (case-sensitive).
        table: Table to look in. The built-in table if omitted.

    Returns:
        The table coefficient, or the table default for unknown symbols.
    """
    if table is None:
        table = DEFAULT_TABLE
    return table.resolve(symbol)
