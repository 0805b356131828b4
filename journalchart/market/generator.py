"""Synthetic hourly OHLC series generator.

Produces a self-consistent, visually plausible price series around a trade
entry so a journal chart has something to draw when no real market feed is
available. The series makes no claim about real price history.
"""

import logging
import math
import random
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Optional, Protocol, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from journalchart.errors import InvalidArgumentError
from journalchart.market.session import hourly_slots
from journalchart.market.volatility import DEFAULT_TABLE, VolatilityTable
from journalchart.models import Candle, Series

logger = logging.getLogger(__name__)

# Series opens slightly below the entry so the entry reads as a move up into the chart
OPEN_DISCOUNT = 0.998

TREND_PERIOD = 10
TREND_AMPLITUDE = 0.001

MIN_VOLUME = 1000
MAX_VOLUME = 10999

DEFAULT_DAYS_RANGE = 3
DEFAULT_DECIMALS = 2

EntryDate = Union[str, date, datetime]


class RandomSource(Protocol):
    """Uniform random sample provider (the subset of ``random.Random`` used)."""

    def uniform(self, a: float, b: float) -> float: ...

    def randint(self, a: int, b: int) -> int: ...


def resolve_timezone(tz: Union[str, tzinfo]) -> tzinfo:
    """Turn a timezone name or tzinfo into a tzinfo.

    Raises:
        InvalidArgumentError: If the name is not a known IANA timezone.
    """
    if isinstance(tz, tzinfo):
        return tz
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError, TypeError):
        raise InvalidArgumentError(f"Unknown timezone: {tz!r}")


def parse_entry_date(entry_date: EntryDate, tz: tzinfo) -> datetime:
    """Parse an entry date into an aware datetime in ``tz``, truncated to the hour.

    A bare date means start of day. A naive timestamp is read as wall time in
    ``tz``; an aware one is converted into ``tz``.

    Raises:
        InvalidArgumentError: If the value cannot be read as a date.
    """
    if isinstance(entry_date, datetime):
        moment = entry_date
    elif isinstance(entry_date, date):
        moment = datetime.combine(entry_date, datetime.min.time())
    elif isinstance(entry_date, str):
        text = entry_date.strip()
        # fromisoformat only accepts a trailing "Z" from Python 3.11
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            moment = datetime.fromisoformat(text)
        except ValueError:
            raise InvalidArgumentError(f"Invalid entry date: {entry_date!r}")
    else:
        raise InvalidArgumentError(f"Invalid entry date: {entry_date!r}")

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=tz)
    else:
        try:
            moment = moment.astimezone(tz)
        except OverflowError:
            raise InvalidArgumentError(f"Entry date out of range: {entry_date!r}")
    return moment.replace(minute=0, second=0, microsecond=0)


class SyntheticSeriesGenerator:
    """Generates fake hourly candles centred on a trade entry.

    The generator holds only configuration (volatility table, random source,
    timezone and rounding precision). Each call to :meth:`generate` builds
    its own running price, so one instance can serve many calls.
    """

    def __init__(
        self,
        volatility_table: VolatilityTable = DEFAULT_TABLE,
        rng: Optional[RandomSource] = None,
        tz: Union[str, tzinfo] = "UTC",
        decimals: int = DEFAULT_DECIMALS,
    ):
        """Initialize the generator.

        Args:
            volatility_table: Symbol volatility lookup.
            rng: Random source. A fresh ``random.Random`` if omitted.
            tz: Timezone deciding weekends and the start of the entry day.
            decimals: Decimal places prices are rounded to.

        Raises:
            InvalidArgumentError: If the timezone or precision is invalid.
        """
        if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
            raise InvalidArgumentError(f"decimals must be a non-negative integer, got {decimals!r}")
        self._table = volatility_table
        self._rng = rng if rng is not None else random.Random()
        self._tz = resolve_timezone(tz)
        self._decimals = decimals

    @property
    def tz(self) -> tzinfo:
        """Generation timezone."""
        return self._tz

    @property
    def volatility_table(self) -> VolatilityTable:
        """Volatility table used for symbol lookups."""
        return self._table

    def _check_entry_price(self, entry_price: float) -> float:
        if isinstance(entry_price, bool):
            raise InvalidArgumentError(f"Invalid entry price: {entry_price!r}")
        try:
            price = float(entry_price)
        except (TypeError, ValueError):
            raise InvalidArgumentError(f"Invalid entry price: {entry_price!r}")
        if not math.isfinite(price) or price <= 0:
            raise InvalidArgumentError(
                f"Entry price must be a finite positive number, got {entry_price!r}"
            )
        if round(price * OPEN_DISCOUNT, self._decimals) <= 0:
            raise InvalidArgumentError(
                f"Entry price {entry_price!r} is too small for {self._decimals} decimal places"
            )
        return price

    def _round_price(self, value: float) -> float:
        """Round to the display precision, never below one tick.

        The floor is monotonic, so rounded candles keep low <= body <= high.
        """
        return max(round(value, self._decimals), 10 ** -self._decimals)

    @staticmethod
    def _check_days_range(days_range: int) -> int:
        if isinstance(days_range, bool) or not isinstance(days_range, int):
            raise InvalidArgumentError(f"days_range must be an integer, got {days_range!r}")
        if days_range < 0:
            raise InvalidArgumentError(f"days_range must not be negative, got {days_range}")
        return days_range

    def anchor_for(self, entry_date: EntryDate, days_range: int) -> datetime:
        """Compute the first slot of the window so the entry sits near its centre.

        The entry is moved back ``days_range // 2`` calendar days on wall
        time, keeping its time of day.

        Raises:
            InvalidArgumentError: If the date is invalid or the window runs
                outside the range ``datetime`` can represent.
        """
        entry = parse_entry_date(entry_date, self._tz)
        try:
            wall = entry.replace(tzinfo=None) - timedelta(days=days_range // 2)
            anchor = wall.replace(tzinfo=self._tz)
            # Last slot of the window must be representable in both UTC and tz
            (anchor.astimezone(timezone.utc) + timedelta(hours=days_range * 24)).astimezone(self._tz)
        except OverflowError:
            raise InvalidArgumentError(
                f"A {days_range}-day window around {entry_date!r} is out of range"
            )
        return anchor

    def generate(
        self,
        symbol: str,
        entry_price: float,
        entry_date: EntryDate,
        days_range: int = DEFAULT_DAYS_RANGE,
    ) -> Series:
        """Generate an hourly candle series around a trade entry.

        Args:
            symbol: Ticker used to pick the volatility coefficient.
            entry_price: Trade entry price.
            entry_date: Trade entry date (ISO string, date or datetime).
            days_range: Number of calendar days the window spans.

        Returns:
            Candles in time order. Weekend hours are never emitted, so the
            series has at most ``days_range * 24`` candles.

        Raises:
            InvalidArgumentError: If any input is invalid. Nothing is
                generated in that case.
        """
        price = self._check_entry_price(entry_price)
        days_range = self._check_days_range(days_range)
        anchor = self.anchor_for(entry_date, days_range)

        volatility = self._table.resolve(symbol)
        steps = days_range * 24
        logger.debug(
            "Generating %s from %s over %d hours (volatility %.4f)",
            symbol, anchor.isoformat(), steps, volatility,
        )

        price *= OPEN_DISCOUNT
        series: Series = []
        for i, slot in hourly_slots(anchor, steps, self._tz):
            trend = math.sin(i / TREND_PERIOD) * TREND_AMPLITUDE
            noise = self._rng.uniform(-0.5, 0.5) * volatility

            open_ = price
            change = trend + noise
            close = open_ * (1 + change)

            spread = abs(change) + self._rng.uniform(0, 1) * volatility * 0.5
            high = max(open_, close) * (1 + spread)
            low = min(open_, close) * (1 - spread)

            series.append(Candle(
                time=int(slot.timestamp()),
                open=self._round_price(open_),
                high=self._round_price(high),
                low=self._round_price(low),
                close=self._round_price(close),
                volume=self._rng.randint(MIN_VOLUME, MAX_VOLUME),
            ))

            # Carry the unrounded close so rounding error does not compound
            price = close

        logger.debug("Generated %d candles for %s", len(series), symbol)
        return series


def generate_sample_ohlc(
    symbol: str,
    entry_price: float,
    entry_date: EntryDate,
    days_range: int = DEFAULT_DAYS_RANGE,
    tz: Union[str, tzinfo] = "UTC",
    rng: Optional[RandomSource] = None,
) -> Series:
    """Generate a sample series with the built-in volatility table.

    Shortcut for ``SyntheticSeriesGenerator(rng=rng, tz=tz).generate(...)``.
    """
    generator = SyntheticSeriesGenerator(rng=rng, tz=tz)
    return generator.generate(symbol, entry_price, entry_date, days_range)
