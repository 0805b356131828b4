"""Candle (OHLC) data model."""

from datetime import datetime, timezone, tzinfo
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class Candle(BaseModel):
    """Represents a single hourly OHLC candle on a chart."""

    time: int = Field(..., description="Unix timestamp (seconds) of the bar open")
    open: float = Field(..., gt=0, description="Opening price")
    high: float = Field(..., gt=0, description="High price")
    low: float = Field(..., gt=0, description="Low price")
    close: float = Field(..., gt=0, description="Closing price")
    volume: Optional[int] = Field(default=None, gt=0, description="Synthetic volume")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_price_bounds(self) -> "Candle":
        if self.low > min(self.open, self.close):
            raise ValueError(f"low {self.low} above body of candle at {self.time}")
        if self.high < max(self.open, self.close):
            raise ValueError(f"high {self.high} below body of candle at {self.time}")
        return self

    def opened_at(self, tz: Optional[tzinfo] = None) -> datetime:
        """Return the bar open as an aware datetime (UTC unless ``tz`` is given)."""
        return datetime.fromtimestamp(self.time, tz=tz or timezone.utc)


# A series is an ordered list of candles, one per trading hour.
Series = list[Candle]


def to_chart_data(series: Series, include_volume: bool = True) -> list[dict]:
    """Convert candles into flat records for a candlestick chart.

    Args:
        series: Candles to convert.
        include_volume: Whether to keep the synthetic volume field.

    Returns:
        List of dictionaries with time, open, high, low, close and
        (optionally) volume keys. Candles without volume never carry the key.
    """
    exclude = None if include_volume else {"volume"}
    return [candle.model_dump(exclude=exclude, exclude_none=True) for candle in series]
