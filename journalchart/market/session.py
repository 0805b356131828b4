"""Market session filter for hourly candle slots."""

import logging
from collections.abc import Iterator
from datetime import datetime, timedelta, timezone, tzinfo

logger = logging.getLogger(__name__)

ONE_HOUR = timedelta(hours=1)

# datetime.weekday() values for Saturday and Sunday
WEEKEND_DAYS = frozenset({5, 6})


def is_weekend(moment: datetime) -> bool:
    """Check whether a datetime falls on a Saturday or Sunday.

    The weekday is taken from the calendar day of ``moment`` as given, so
    callers should pass a datetime already expressed in the session timezone.
    """
    return moment.weekday() in WEEKEND_DAYS


def hourly_slots(anchor: datetime, steps: int, tz: tzinfo) -> Iterator[tuple[int, datetime]]:
    """Walk ``steps`` hours from ``anchor`` and yield the trading hours.

    Hours are added on absolute (UTC) time so consecutive slots are always
    exactly one hour apart, even across daylight saving transitions.

    Args:
        anchor: Aware datetime of the first slot.
        steps: Number of hourly steps to consider.
        tz: Timezone whose calendar decides what counts as a weekend.

    Yields:
        ``(step_index, local_datetime)`` for each weekday hour. The step index
        counts every hour walked, including skipped weekend hours.
    """
    start = anchor.astimezone(timezone.utc)
    skipped = 0
    for i in range(steps):
        local = (start + i * ONE_HOUR).astimezone(tz)
        if is_weekend(local):
            skipped += 1
            continue
        yield i, local
    if skipped:
        logger.debug("Skipped %d weekend hours of %d", skipped, steps)
